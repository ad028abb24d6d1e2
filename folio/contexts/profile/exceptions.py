"""Custom exceptions for the profile context."""

from typing import Optional


class ProfileLoadError(Exception):
    """
    Exception raised when the profile document cannot be fetched or parsed.

    The store never lets this escape ``load``; it is attached to the
    ProfileLoadResult so the caller can report it.

    Attributes:
        message: Error description
        source: Path or URL that was being loaded
        original_error: The underlying I/O, HTTP or JSON error
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source = source
        self.original_error = original_error

        parts = [message]

        if source:
            parts.append(f"Source: {source}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class NotLoadedError(RuntimeError):
    """Raised when profile data is requested before the one-time load has run."""

    def __init__(self, message: str = "Profile data has not been loaded yet"):
        super().__init__(message)
