class EncodingError(Exception):
    """Base exception for all encoding-related errors."""


class FileReadError(EncodingError):
    """Raised when an attachment cannot be read in full."""
