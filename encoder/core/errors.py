"""
Exception types for the mission encoder.
"""

from typing import Optional


class ParseError(ValueError):
    """Raised when a telemetry token cannot be parsed into a value."""

    def __init__(self, token: str, message: Optional[str] = None) -> None:
        self.token = token
        super().__init__(message or f"{type(self).__name__}: {token!r}")


class NothingToParse(ParseError):
    """Raised for an empty token."""
    pass


class ArrayNoClosingBracket(ParseError):
    """Raised when a token starts with '[' but does not end with ']'."""
    pass


class StringNoClosingQuote(ParseError):
    """Raised when a token starts with '"' but does not end with '"'."""
    pass


class NumberBadData(ParseError):
    """Raised when a token falls through to numeric parsing and is not a float literal."""
    pass


class TelemetryError(ValueError):
    """Raised when a parsed value does not describe a mission event."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class BlobStoreError(Exception):
    """Raised when a replay blob cannot be persisted."""
    pass
