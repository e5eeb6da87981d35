"""Tests for store error classification."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from shopcatalog.catalog.errors import (
    DatabaseErrorClassifier,
    is_unique_violation,
    unique_violation_detail,
)
from shopcatalog.domain.exceptions import ProductConflictError, UnexpectedServerError


class FakePostgresError(Exception):
    """Driver error shaped like a PostgreSQL unique violation."""

    sqlstate = "23505"
    detail = "Key (title)=(Relaxed T Logo Hat) already exists."


class FakeAdapterError(Exception):
    """SQLAlchemy asyncpg adapter error: code on itself, detail on the cause."""

    sqlstate = "23505"


class FakeSqliteError(Exception):
    """Driver error shaped like sqlite3.IntegrityError."""

    sqlite_errorname = "SQLITE_CONSTRAINT_UNIQUE"


def wrap(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO products ...", {}, orig)


@pytest.fixture
def logger() -> MagicMock:
    """Create a logger double."""
    return MagicMock()


class TestIsUniqueViolation:
    """Tests for is_unique_violation."""

    def test_postgres_code(self) -> None:
        assert is_unique_violation(wrap(FakePostgresError("duplicate key")))

    def test_code_on_cause(self) -> None:
        cause = FakePostgresError("duplicate key")
        orig = Exception("adapter")
        orig.__cause__ = cause
        assert is_unique_violation(wrap(orig))

    def test_sqlite_code(self) -> None:
        assert is_unique_violation(
            wrap(FakeSqliteError("UNIQUE constraint failed: products.slug"))
        )

    def test_other_integrity_error(self) -> None:
        orig = Exception("NOT NULL constraint failed: product_images.url")
        orig.sqlite_errorname = "SQLITE_CONSTRAINT_NOTNULL"
        assert not is_unique_violation(wrap(orig))

    def test_plain_exception(self) -> None:
        assert not is_unique_violation(RuntimeError("boom"))


class TestUniqueViolationDetail:
    """Tests for unique_violation_detail."""

    def test_detail_attribute(self) -> None:
        detail = unique_violation_detail(wrap(FakePostgresError("duplicate key")))
        assert detail == "Key (title)=(Relaxed T Logo Hat) already exists."

    def test_detail_on_cause(self) -> None:
        orig = FakeAdapterError("<class 'UniqueViolationError'>: duplicate key")
        orig.__cause__ = FakePostgresError("duplicate key")
        assert unique_violation_detail(wrap(orig)) == FakePostgresError.detail

    def test_falls_back_to_message(self) -> None:
        detail = unique_violation_detail(
            wrap(FakeSqliteError("UNIQUE constraint failed: products.slug"))
        )
        assert detail == "UNIQUE constraint failed: products.slug"


class TestDatabaseErrorClassifier:
    """Tests for DatabaseErrorClassifier.raise_for."""

    def test_unique_violation_raises_conflict(self, logger: MagicMock) -> None:
        """Conflicts expose the store detail and are not logged as errors."""
        classifier = DatabaseErrorClassifier(logger)
        error = wrap(FakePostgresError("duplicate key"))

        with pytest.raises(ProductConflictError) as exc_info:
            classifier.raise_for(error)

        assert exc_info.value.message == FakePostgresError.detail
        assert exc_info.value.__cause__ is error
        logger.error.assert_not_called()

    def test_other_errors_are_redacted(self, logger: MagicMock) -> None:
        """Unexpected errors are logged in full and surfaced generically."""
        classifier = DatabaseErrorClassifier(logger)
        error = OperationalError(
            "SELECT ...", {}, Exception("password authentication failed for user shop")
        )

        with pytest.raises(UnexpectedServerError) as exc_info:
            classifier.raise_for(error)

        assert exc_info.value.message == "Unexpected error check server logs"
        assert "password" not in str(exc_info.value)
        assert exc_info.value.__cause__ is error

        logger.error.assert_called_once()
        kwargs = logger.error.call_args.kwargs
        assert kwargs["error_type"] == "OperationalError"
        assert "password authentication failed" in kwargs["error"]

    def test_non_database_errors_are_unexpected(self, logger: MagicMock) -> None:
        classifier = DatabaseErrorClassifier(logger)

        with pytest.raises(UnexpectedServerError):
            classifier.raise_for(ValueError("bad value"))

        logger.error.assert_called_once()

    def test_default_logger(self) -> None:
        classifier = DatabaseErrorClassifier()
        assert classifier.logger is not None
