"""
Domain error taxonomy.

Every error the services and repositories surface derives from FreshStockError
and carries the HTTP status it renders as. The presentation layer maps an error
to a response in exactly one place (see presentation/web.py).
"""

from typing import Optional


class FreshStockError(Exception):
    """Base class for all surfaced errors."""

    status_code = 500

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFound(FreshStockError):
    status_code = 404


class Conflict(FreshStockError):
    status_code = 409


class AlreadyExists(Conflict):
    """A uniqueness key is already taken (pre-check or storage constraint)."""


class ForeignKeyMissing(Conflict):
    """
    A referenced row does not exist.

    Args:
        message: Client-facing message
        field: Name of the referencing column when the repository could
            identify which referent is missing, otherwise None
    """

    def __init__(self, message: str = "", field: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, status_code)
        self.field = field


class ReferentNotFound(ForeignKeyMissing):
    """A ForeignKeyMissing refined by a service into a missing-referent error."""

    status_code = 404


class DatePast(Conflict):
    pass


class BadRequest(FreshStockError):
    status_code = 400


class DateInvalid(BadRequest):
    pass


class BodyInvalid(FreshStockError):
    status_code = 422


class FieldTooLong(FreshStockError):
    status_code = 422


class Internal(FreshStockError):
    status_code = 500
