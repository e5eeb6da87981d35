"""Classification of store failures.

Unique-constraint violations are reported to callers with the store's detail
text. Everything else is logged in full and surfaced as an opaque error.
"""

from typing import Any, NoReturn

import structlog

from shopcatalog.domain.exceptions import ProductConflictError, UnexpectedServerError

# PostgreSQL SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"

SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"


class DatabaseErrorClassifier:
    """Turns low-level database errors into catalog errors.

    Example usage:
        classifier = DatabaseErrorClassifier(structlog.get_logger("catalog"))
        try:
            await session.commit()
        except SQLAlchemyError as e:
            classifier.raise_for(e)
    """

    def __init__(self, logger: Any = None) -> None:
        """Initialize classifier.

        Args:
            logger: Logger receiving unexpected failures.
        """
        self.logger = logger or structlog.get_logger("shopcatalog.catalog")

    def raise_for(self, error: BaseException) -> NoReturn:
        """Raise the catalog error matching a store failure.

        Args:
            error: Exception raised by the store or the ORM.

        Raises:
            ProductConflictError: If a unique constraint was violated.
            UnexpectedServerError: For anything else.
        """
        if is_unique_violation(error):
            raise ProductConflictError(unique_violation_detail(error)) from error

        self.logger.error(
            "Unexpected database error",
            error_type=type(error).__name__,
            error=str(error),
            exc_info=error,
        )
        raise UnexpectedServerError() from error


def _driver_error(error: BaseException) -> BaseException:
    """Unwrap the DBAPI exception from a SQLAlchemy wrapper."""
    return getattr(error, "orig", None) or error


def is_unique_violation(error: BaseException) -> bool:
    """Check whether an error is a unique-constraint violation.

    Args:
        error: Exception raised by the store or the ORM.

    Returns:
        True for PostgreSQL code 23505 or SQLite's unique constraint code.
    """
    orig = _driver_error(error)

    for candidate in (orig, orig.__cause__):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code == PG_UNIQUE_VIOLATION:
            return True
        if getattr(candidate, "sqlite_errorname", None) == SQLITE_UNIQUE_VIOLATION:
            return True

    return False


def unique_violation_detail(error: BaseException) -> str:
    """Extract the human-readable detail of a unique violation.

    PostgreSQL drivers expose it as ``detail`` (e.g.
    "Key (title)=(Shirt) already exists."); SQLite only has the message.

    Args:
        error: Exception classified as a unique violation.

    Returns:
        Detail text.
    """
    orig = _driver_error(error)

    for candidate in (orig, orig.__cause__):
        detail = getattr(candidate, "detail", None)
        if isinstance(detail, str) and detail:
            return detail

    return str(orig.args[0]) if orig.args else str(orig)
