"""Error types raised by pxmedia."""


class PxMediaError(Exception):
    """Base class for every error pxmedia raises on purpose."""


class ConfigError(PxMediaError):
    """Raised when transform options are invalid."""


class ParseError(PxMediaError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
