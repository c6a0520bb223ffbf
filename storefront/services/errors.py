"""Service-layer errors. Each carries the HTTP status the API renders it with."""


class ServiceError(Exception):
    """Base for errors raised by service operations."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """Raised when a user, category or other record does not exist."""

    status_code = 404


class InvalidCredentialsError(ServiceError):
    """Raised when login email/password do not match an account."""

    status_code = 401


class InvalidPasswordError(ServiceError):
    """Raised when a profile change is not confirmed with the current password."""

    status_code = 400


class ConflictError(ServiceError):
    """Raised when a write violates a uniqueness constraint."""

    status_code = 409
