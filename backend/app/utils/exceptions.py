"""
Application error types.

Every error carries the message returned to the client and the HTTP status
it maps to; ``app.main`` serialises them as ``{"message": ...}``.
"""

from typing import Optional


class AppError(Exception):
    """Base error for request failures surfaced to the caller"""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class Unauthenticated(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403


class NotEligible(Forbidden):
    """Raised when a certificate is requested for an enrollment that has not passed"""


class BadRequest(AppError):
    status_code = 400


class AlreadyEnrolled(BadRequest):
    pass


class UpstreamFailure(AppError):
    """Wraps an error raised by the database client"""

    status_code = 500

    @classmethod
    def from_exception(cls, exc: Exception) -> "UpstreamFailure":
        # postgrest.APIError keeps the server message on .message
        message = getattr(exc, "message", None) or str(exc)
        return cls(message)
