"""
Format errors raised while parsing an LP file.

Any of these aborts the file being parsed; no Document is produced.
"""

from ..formulation.schema import Position


class LPFormatError(Exception):
    """Base class for fatal LP format errors, carrying the offending position."""

    def __init__(self, message: str, position: Position):
        self.position = position
        super().__init__(f"{position}: {message}")


class LineTooLongError(LPFormatError):
    """Line exceeds MAX_LINE_LEN bytes."""

    def __init__(self, position: Position, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"line too long ({length} > {limit})", position)


class SectionContextError(LPFormatError):
    """Data line seen before any section keyword (or after END)."""

    def __init__(self, position: Position):
        super().__init__("not in a section", position)


class VariableTooLongError(LPFormatError):
    """Symbol exceeds MAX_VAR_LEN bytes."""

    def __init__(self, position: Position, token: str, length: int, limit: int):
        self.token = token
        self.length = length
        self.limit = limit
        super().__init__(f"variable too long: {token!r} ({length} > {limit})", position)


class InvalidVariableNameError(LPFormatError):
    """Symbol contains a character outside the allowed set."""

    def __init__(self, position: Position, token: str):
        self.token = token
        super().__init__(f"invalid variable name: {token!r}", position)
