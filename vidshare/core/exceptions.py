"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status it maps to; the handlers registered in
``vidshare.main`` turn them into ``{"error": message}`` responses.
"""


class VidShareError(Exception):
    """Base exception for all domain errors."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(VidShareError):
    """A required field is missing or empty."""

    status_code = 400
    default_message = "Invalid request"


class Conflict(VidShareError):
    """Raised when a unique resource (e.g. an email) already exists."""

    status_code = 400
    default_message = "User already exists"


class InvalidCredentials(VidShareError):
    # Same status and shape for unknown email and wrong password.
    status_code = 400
    default_message = "Invalid credentials"


class Unauthenticated(VidShareError):
    status_code = 401
    default_message = "Access token required"


class InvalidOrExpiredToken(VidShareError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFound(VidShareError):
    """The resource is absent, or present but not accessible to the caller."""

    status_code = 404
    default_message = "Not found"


class PayloadTooLarge(VidShareError):
    status_code = 413
    default_message = "File too large"


class UnsupportedMediaType(VidShareError):
    status_code = 415
    default_message = "Only video files are allowed!"
