# helperkit/exceptions.py
"""Custom exceptions for helperkit."""


class HelperKitError(Exception):
    """Base exception for all helperkit errors."""

    pass


class ConfigurationError(HelperKitError):
    """Raised when a required setting or argument is missing or invalid."""

    pass


class EncodingError(HelperKitError):
    """Raised when text cannot be handled with the requested input encoding."""

    def __init__(self, encoding: str, message: str | None = None):
        """Initialize EncodingError.

        Args:
            encoding: Name of the encoding that could not be used.
            message: Optional detail; defaults to a generic description.
        """
        self.encoding = encoding
        super().__init__(message or f"Invalid input encoding: {encoding!r}")
