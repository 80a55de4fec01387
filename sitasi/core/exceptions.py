"""Exception classes for sitasi."""


class SitasiError(Exception):
    """Base exception for sitasi errors."""

    pass


class RecordError(SitasiError, ValueError):
    """Raised when a bibliographic record cannot be built from input data."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize with message and optional source description."""
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class ClipboardError(SitasiError):
    """Raised by clipboard backends when text cannot be copied."""

    pass
