GENERIC_FAILURE = "Could not process the image."


class AsciifyError(Exception):
    status_code = 500

    @property
    def public_message(self) -> str:
        return str(self)


class NoInputError(AsciifyError):
    """The upload was missing or empty."""

    status_code = 400

    def __init__(self, message: str = "No image file uploaded."):
        super().__init__(message)


class ValidationError(AsciifyError, ValueError):
    """A render parameter was malformed or out of its domain."""

    status_code = 400

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class UploadTooLargeError(ValidationError):
    status_code = 413

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__("image", f"upload exceeds {limit} bytes")


class DecodeError(AsciifyError):
    """The image bytes could not be decoded."""

    @property
    def public_message(self) -> str:
        return GENERIC_FAILURE


class ProcessingError(AsciifyError):
    """Unexpected failure while resampling, enhancing or mapping."""

    @property
    def public_message(self) -> str:
        return GENERIC_FAILURE
