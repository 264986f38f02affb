"""Service errors and their HTTP status codes."""


class ServiceError(Exception):
    """Base for errors that are answered with an error body."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Malformed path parameter or body, or a missing/invalid field."""
    status_code = 400


ValidationError = BadRequestError


class NotFoundError(ServiceError):
    """Identifier absent from the store."""
    status_code = 404


class InternalError(ServiceError):
    status_code = 500


class ServiceUnavailableError(ServiceError):
    status_code = 503
