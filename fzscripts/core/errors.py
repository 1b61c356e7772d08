"""Service-layer errors. The API layer maps each to an HTTP status and {"error": message}."""


class ServiceError(Exception):
    """Base for errors raised by services; carries a client-safe message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or missing input."""

    status_code = 400


class Conflict(ServiceError):
    """Unique resource already exists (e.g. username taken). Reported as 400."""

    status_code = 400


class Unauthenticated(ServiceError):
    """No valid session for the request."""

    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class InvalidCredentials(Unauthenticated):
    """Login failed. Never says whether the username exists."""

    def __init__(self, message: str = "Incorrect username or password") -> None:
        super().__init__(message)


class Forbidden(ServiceError):
    """Authenticated but not allowed to perform the action."""

    status_code = 403


class NotFound(ServiceError):
    status_code = 404


class InternalFailure(ServiceError):
    """Store unreachable or unexpected failure; details stay in the logs."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
