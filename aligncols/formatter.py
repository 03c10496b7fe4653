from dataclasses import dataclass, field
from typing import BinaryIO

from .columns import Alignment
from .errors import ConfigError
from .logs import log
from .measure import WidthMode, measure_columns
from .positioning import Positioning
from .words import Words, leading_indent

DEFAULT_SEPARATOR = b" "
DEFAULT_DELIMITER = b'"'


@dataclass(frozen=True)
class AlignConfig:
    out_sep: bytes = DEFAULT_SEPARATOR
    str_delim: bytes | None = DEFAULT_DELIMITER
    until: int | None = None
    positioning: Positioning = field(default_factory=Positioning)
    width_mode: WidthMode = WidthMode.DISPLAY

    def __post_init__(self):
        if self.str_delim is not None and len(self.str_delim) > 1:
            raise ConfigError(f"string delimiter must be a single byte, got {self.str_delim!r}")
        if self.until is not None and self.until < 0:
            raise ConfigError(f"until must not be negative, got {self.until}")


def format_line(words: Words, positioning: Positioning, config: AlignConfig, indent: bytes) -> bytes:
    """Render one line with the final column widths; always ends with a newline."""
    width = config.width_mode.width
    out = bytearray()
    if len(words):
        out += indent

    last = len(words) - 1
    for i, word in enumerate(words):
        more = i < last
        pad = positioning.max_width.get(i) - width(word)
        if pad < 0:
            raise RuntimeError(f"column {i} is narrower than {word!r}; widths were not measured")

        align = positioning.align.get(i)
        if align is Alignment.LEFT:
            out += word
            if more:
                out += b" " * pad
        elif align is Alignment.RIGHT:
            out += b" " * pad + word
        else:
            out += b" " * (pad // 2) + word
            if more:
                out += b" " * (pad - pad // 2)

        if more:
            out += config.out_sep
    out += b"\n"
    return bytes(out)


class ColumnFormatter:
    def __init__(self, lines: list[bytes], config: AlignConfig | None = None):
        self.config = config if config is not None else AlignConfig()
        self.indent = leading_indent(lines[0]) if lines else b""
        self.lines: list[Words] = [Words(line, self.config.str_delim, self.config.until) for line in lines]

    def measure(self) -> Positioning:
        positioning = self.config.positioning.copy()
        measure_columns(self.lines, positioning, self.config.width_mode.width)
        log.debug("columns_measured", widths=positioning.max_width.values)
        return positioning

    def format(self) -> list[bytes]:
        positioning = self.measure()
        return [format_line(words, positioning, self.config, self.indent) for words in self.lines]

    def write(self, stream: BinaryIO) -> None:
        for line in self.format():
            stream.write(line)
