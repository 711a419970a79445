# fixup/db/errors.py
from sqlalchemy.exc import DBAPIError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
RAISE_EXCEPTION = "P0001"


def pg_code(exc: Exception):
    """SQLSTATE of the driver error wrapped by a SQLAlchemy exception, if any."""
    if isinstance(exc, DBAPIError):
        return getattr(exc.orig, "pgcode", None)
    return None


def is_unique_violation(exc: Exception) -> bool:
    return pg_code(exc) == UNIQUE_VIOLATION


def is_foreign_key_violation(exc: Exception) -> bool:
    return pg_code(exc) == FOREIGN_KEY_VIOLATION


def is_raise_exception(exc: Exception) -> bool:
    return pg_code(exc) == RAISE_EXCEPTION
