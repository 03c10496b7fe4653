from .columns import Alignment, SparseColumnVector
from .errors import PositioningError

DIGITS = "0123456789"

ALIGNMENT_CHARS = {a.value: a for a in Alignment}


class Positioning:
    """Per-column minimum widths and alignments."""

    def __init__(self, max_width: SparseColumnVector[int] | None = None,
                 align: SparseColumnVector[Alignment] | None = None):
        self.max_width = max_width if max_width is not None else SparseColumnVector(0)
        self.align = align if align is not None else SparseColumnVector(Alignment.LEFT)

    def __repr__(self) -> str:
        return f"Positioning(max_width={self.max_width!r}, align={self.align!r})"

    def copy(self) -> "Positioning":
        return Positioning(self.max_width.copy(), self.align.copy())


def parse_positioning(fmt: str) -> Positioning:
    """
    Parse a format string of the form (digits? [<>=])*.

    '<50>=<' -> left, right with minimum width 50, centered, then left for
    the fourth column and every column after it.
    """
    positioning = Positioning()
    pos = 0
    while pos < len(fmt):
        end = pos
        while end < len(fmt) and fmt[end] in DIGITS:
            end += 1
        if end == len(fmt):
            raise PositioningError("Invalid format sequence")

        positioning.max_width.push(int(fmt[pos:end]) if end > pos else 0)

        char = fmt[end]
        if char not in ALIGNMENT_CHARS:
            raise PositioningError(f"Invalid format character: {char}")
        positioning.align.push(ALIGNMENT_CHARS[char])
        pos = end + 1

    # sentinel: widths of unconfigured columns come from content only
    positioning.max_width.push(0)
    return positioning
