"""
Errors raised by the repositories and turned into responses by
``handle_http_errors``. Each class names the HTTP status it answers with.
"""


class AppException(Exception):
    """Root of the service's errors; ``message`` is shown to the client."""

    http_status: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """A record cannot be processed as given, e.g. an update without id."""

    http_status = 400


class NotFoundError(AppException):
    """No stored row has the requested id (update and delete)."""

    http_status = 404


class StorageConstraintError(AppException):
    """
    The database refused a write: NOT NULL, non-empty CHECK, uniqueness
    or length.
    """

    http_status = 409


class DatabaseError(AppException):
    http_status = 500
