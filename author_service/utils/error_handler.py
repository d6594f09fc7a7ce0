"""
Translation of service errors into HTTP responses for the endpoints.
"""

from functools import wraps
from typing import Any, Awaitable, Callable

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from author_service.exceptions import AppException, DatabaseError
from author_service.logging import logger

Endpoint = Callable[..., Awaitable[Any]]


def _as_http(error: AppException) -> HTTPException:
    return HTTPException(status_code=error.http_status, detail=error.message)


def handle_http_errors(func: Endpoint) -> Endpoint:
    """
    Wrap an endpoint so failures reach the client as ``{"detail": ...}``.

    ``AppException`` subclasses keep their own status and message. A bare
    ``SQLAlchemyError`` is logged with its traceback and answered with a
    generic 500, so driver messages never reach the client. Anything else
    propagates unchanged.

    Example:
        ```python
        @router.delete("/authors/{author_id}")
        @handle_http_errors
        async def delete_author(author_id: int, repo: AuthorRepoDep) -> str:
            await repo.delete(author_id)  # NotFoundError becomes a 404
            return f"Author {author_id} deleted"
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(f"{func.__name__} -> {ex.http_status}: {ex.message}")
            raise _as_http(ex) from ex
        except SQLAlchemyError as ex:
            logger.exception(f"{func.__name__} failed in the database layer")
            raise _as_http(DatabaseError("Database error occurred")) from ex

    return wrapper
