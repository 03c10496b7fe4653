from enum import Enum
from typing import Callable, Iterable

from wcwidth import wcswidth, wcwidth

from .positioning import Positioning
from .words import Words

WidthFunc = Callable[[bytes], int]


def byte_width(word: bytes) -> int:
    return len(word)


def display_width(word: bytes) -> int:
    """Terminal columns taken by a UTF-8 word; wide glyphs count 2, control chars 0."""
    text = word.decode("utf-8")
    width = wcswidth(text)
    if width < 0:
        # non-printables present
        width = sum(max(wcwidth(char), 0) for char in text)
    return width


class WidthMode(Enum):
    BYTES = "bytes"
    DISPLAY = "display"

    @property
    def width(self) -> WidthFunc:
        return byte_width if self is WidthMode.BYTES else display_width


def measure_columns(lines: Iterable[Words], positioning: Positioning, width: WidthFunc) -> None:
    """Grow positioning.max_width to the widest word seen in each column."""
    max_width = positioning.max_width
    for words in lines:
        for i, word in enumerate(words):
            w = width(word)
            if w > max_width.get(i):
                max_width.set(i, w)
