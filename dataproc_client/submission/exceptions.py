from typing import ClassVar


class SubmissionError(Exception):
    """Base exception for a submission that ended without a result.

    ``message`` is the user-facing text; ``detail`` carries the underlying
    cause for the logs.
    """

    kind: ClassVar[str] = "SubmissionError"
    default_message: ClassVar[str] = "An error occurred"

    def __init__(self, message: str | None = None, *, detail: str = "") -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)


class InvalidInputFormatError(SubmissionError):
    """Raised when the input text is not a JSON object."""

    kind = "InvalidInputFormat"
    default_message = "Invalid JSON format"


class FileProcessingError(SubmissionError):
    """Raised when the attached file cannot be read or encoded."""

    kind = "FileProcessingError"
    default_message = "Failed to process file"


class NetworkError(SubmissionError):
    """Raised when no response was received from the processing service."""

    kind = "NetworkError"
    default_message = "Unable to reach processing service"


class ServiceError(SubmissionError):
    """Raised when the processing service answers with a non-success status."""

    kind = "ServiceError"
    default_message = "Processing failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(message, detail=detail)
        self.status_code = status_code


class ResponseValidationError(ServiceError):
    """Raised when a success response body does not match the result shape."""

    default_message = "Invalid response from processing service"
