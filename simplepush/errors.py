"""Exception hierarchy shared by the payload pipeline, the transport and the CLI."""


class SimplePushError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SimplePushError, ValueError):
    """Raised when a message fails the pre-send checks."""


class EncryptionFailed(SimplePushError):
    """Raised when the cipher layer rejects a field.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DecryptionFailed(SimplePushError):
    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class SendFailed(SimplePushError):
    """Raised when the HTTP submission to the API does not succeed."""

    def __init__(self, message: str, cause: BaseException | None = None, status_code: int | None = None):
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code


__all__ = [
    "DecryptionFailed",
    "EncryptionFailed",
    "SendFailed",
    "SimplePushError",
    "ValidationError",
]
