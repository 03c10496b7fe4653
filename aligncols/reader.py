from typing import BinaryIO

from .errors import InputDecodeError
from .logs import log
from .measure import WidthMode


def strip_newline(line: bytes) -> bytes:
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def check_utf8(line: bytes, line_number: int) -> None:
    try:
        line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodeError(line_number, e.reason) from e


def read_lines(stream: BinaryIO, mode: WidthMode = WidthMode.DISPLAY) -> list[bytes]:
    """
    Read every line of a binary stream, without line endings.

    In display mode a line that is not valid UTF-8 ends the input; the lines
    before it are kept.
    """
    lines: list[bytes] = []
    for line_number, raw in enumerate(stream, start=1):
        line = strip_newline(raw)
        if mode is WidthMode.DISPLAY:
            try:
                check_utf8(line, line_number)
            except InputDecodeError as e:
                log.warning("input_decode_error", line=e.line_number, reason=e.reason, kept=len(lines))
                return lines
        lines.append(line)

    log.debug("input_read", lines=len(lines))
    return lines
