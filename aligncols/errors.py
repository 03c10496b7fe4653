class AlignError(Exception):
    """Base class for everything aligncols reports to the user."""


class PositioningError(AlignError, ValueError):
    """Malformed positioning format string."""


class ConfigError(AlignError, ValueError):
    """Invalid separator, delimiter or column limit."""


class InputDecodeError(AlignError):
    def __init__(self, line_number: int, reason: str):
        super().__init__(f"line {line_number}: invalid UTF-8 ({reason})")
        self.line_number = line_number
        self.reason = reason
