"""
Tests for the HTTP error handler decorator.
"""

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, OperationalError

from author_service.exceptions import (
    AppException,
    DatabaseError,
    NotFoundError,
    StorageConstraintError,
    ValidationError,
)
from author_service.utils.error_handler import handle_http_errors


class TestHandleHTTPErrors:
    """Test handle_http_errors decorator for HTTP endpoints."""

    @pytest.mark.asyncio
    async def test_successful_execution(self):
        """Should return the endpoint result untouched."""

        @handle_http_errors
        async def endpoint(author_id: int) -> dict:
            return {"id": author_id}

        assert await endpoint(author_id=3) == {"id": 3}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exception, status_code",
        [
            (ValidationError("Author id is required"), 400),
            (NotFoundError("Author with id 1 not found"), 404),
            (StorageConstraintError("Author violates a storage constraint"), 409),
            (DatabaseError("Database error occurred"), 500),
        ],
    )
    async def test_app_exception_to_http(self, exception, status_code):
        """Should convert each AppException to its HTTP status."""

        @handle_http_errors
        async def endpoint():
            raise exception

        with pytest.raises(HTTPException) as exc_info:
            await endpoint()

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == exception.message

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_to_500(self):
        """Should hide raw database errors behind a generic 500."""

        @handle_http_errors
        async def endpoint():
            raise OperationalError("SELECT 1", None, Exception("db down"))

        with pytest.raises(HTTPException) as exc_info:
            await endpoint()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Database error occurred"

    @pytest.mark.asyncio
    async def test_untranslated_integrity_error_to_500(self):
        """Integrity errors outside a repository transaction are not conflicts."""

        @handle_http_errors
        async def endpoint():
            raise IntegrityError("INSERT", {}, Exception("duplicate"))

        with pytest.raises(HTTPException) as exc_info:
            await endpoint()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_other_exceptions_propagate(self):
        """Should not swallow unexpected errors."""

        @handle_http_errors
        async def endpoint():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await endpoint()

    def test_preserves_endpoint_metadata(self):
        """Should keep the wrapped function's name for FastAPI."""

        @handle_http_errors
        async def get_author(author_id: int):
            return None

        assert get_author.__name__ == "get_author"
        assert get_author.__wrapped__ is not None


class TestExceptions:
    """Exception attributes."""

    def test_message_is_kept(self):
        ex = NotFoundError("Author with id 1 not found")

        assert ex.message == "Author with id 1 not found"
        assert str(ex) == "Author with id 1 not found"

    def test_base_status_is_500(self):
        assert AppException("unexpected").http_status == 500
