class TextValidationError(Exception):
    """Base exception for client input that cannot be processed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingPayloadError(TextValidationError):
    """Raised when the request carries no body."""

    def __init__(self) -> None:
        super().__init__("No file uploaded.")


class InvalidContentTypeError(TextValidationError):
    """Raised when the declared content type is not text/plain."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid file type. Only text/plain (.txt) files are allowed."
        )


class InvalidEncodingError(TextValidationError):
    """Raised when a body flagged as base64 cannot be decoded."""

    def __init__(self) -> None:
        super().__init__("Uploaded file is not valid base64.")


class EmptyPayloadError(TextValidationError):
    """Raised when the decoded payload has no bytes."""

    def __init__(self) -> None:
        super().__init__("Uploaded file is empty.")


class PayloadTooLargeError(TextValidationError):
    """Raised when the decoded payload exceeds the size limit."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"File size exceeds the 1MB limit. Your file size: {size} bytes."
        )
        self.size = size


class WhitespaceOnlyError(TextValidationError):
    """Raised when the decoded text contains only whitespace."""

    def __init__(self) -> None:
        super().__init__(
            "Uploaded file contains no meaningful text (only whitespace)."
        )


class NoTextContentError(TextValidationError):
    """Raised when analysis finds neither words nor lines."""

    def __init__(self) -> None:
        super().__init__("No text content found after processing.")
