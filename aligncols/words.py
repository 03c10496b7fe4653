from typing import Iterator

SPACE = 0x20
TAB = 0x09
BACKSLASH = 0x5C


def is_indent(byte: int) -> bool:
    return byte == SPACE or byte == TAB


def leading_indent(line: bytes) -> bytes:
    end = 0
    while end < len(line) and is_indent(line[end]):
        end += 1
    return line[:end]


def split_words(line: bytes, str_delim: bytes | None = b'"',
                until: int | None = None) -> list[tuple[int, int]]:
    """
    Find the [start, end) spans of the words in a line.

    Whitespace inside a region opened by str_delim does not split. A backslash
    escapes the next byte, so an escaped delimiter does not open or close a
    region. Quotes and backslashes stay in the word. Once `until` words have
    been found the rest of the line becomes one last word.
    """
    delim = str_delim[0] if str_delim else None
    spans: list[tuple[int, int]] = []
    pos = 0
    while pos < len(line):
        while pos < len(line) and is_indent(line[pos]):
            pos += 1
        if pos == len(line):
            break

        if until is not None and len(spans) == until:
            spans.append((pos, len(line)))
            break

        start = pos
        end = len(line)
        esc = False
        string = False
        for i in range(start, len(line)):
            c = line[i]
            if not esc and c == delim:
                string = not string
            esc = not esc and c == BACKSLASH
            if not string and is_indent(c):
                end = i
                break
        spans.append((start, end))
        pos = end
    return spans


class Words:
    """A line and the spans of its words."""

    def __init__(self, line: bytes, str_delim: bytes | None = b'"', until: int | None = None):
        self.line = line
        self.spans = split_words(line, str_delim, until)

    def __len__(self) -> int:
        return len(self.spans)

    def __iter__(self) -> Iterator[bytes]:
        for start, end in self.spans:
            yield self.line[start:end]

    def __repr__(self) -> str:
        return f"Words({self.line!r}, spans={self.spans!r})"
