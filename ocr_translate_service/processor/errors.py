"""Faults raised while handling an upload.

Every fault carries the message and HTTP status the API answers with, the
upload route in `ocr_translate_service.api.upload` turns them into the
uniform `{"error": ...}` body.
"""


class UploadProcessingError(Exception):

    status_code: int = 500
    default_message: str = "Internal server error. Please try again."

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(UploadProcessingError):
    """The oracle credential is absent."""

    status_code = 500
    default_message = "API key not configured"


class InvalidUploadError(UploadProcessingError):
    """Missing file or a file that is not an image."""

    status_code = 400
    default_message = "Please upload a valid image file"


class UploadTooLargeError(UploadProcessingError):
    """File over the size limit, status is configurable (500 unless overridden)."""

    status_code = 500
    default_message = "File size too large. Please upload an image under 10MB"


class OracleError(UploadProcessingError):
    """Any failure while talking to the oracle, the cause is only logged."""

    status_code = 500
    default_message = "Failed to analyze image with AI. Please try again."
