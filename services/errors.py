"""Error types raised by the services and mapped to HTTP responses in app.py."""

from typing import Optional


class ServiceError(Exception):
    """Base exception for service errors."""

    status_code: int = 500

    def __init__(self, message: str, headers: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers


class InvalidInputError(ServiceError):
    """Raised when a required field is missing or empty."""
    status_code = 400


class ConflictError(ServiceError):
    """Raised when signing up with an email that is already registered."""
    status_code = 400


class UnauthorizedError(ServiceError):
    """Raised when login credentials do not match."""
    status_code = 401


class UnauthenticatedError(ServiceError):
    """Raised when a request carries no token or an invalid one."""
    status_code = 401

    def __init__(self, message: str):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(ServiceError):
    """Raised when a task does not exist or belongs to another user."""
    status_code = 404


class InternalError(ServiceError):
    """Raised when the store or another collaborator fails unexpectedly."""
    status_code = 500
