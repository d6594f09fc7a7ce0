"""
Per-request correlation ids.

A client may send ``X-Correlation-ID``; otherwise a fresh id is minted.
The id is cut to eight characters, exposed to the log formatters through a
context variable and echoed back on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.requests import Request
from starlette.responses import Response

HEADER = "X-Correlation-ID"
ID_LENGTH = 8

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Id of the request being served, or ``""`` outside a request."""
    return correlation_id.get()


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        cid = (request.headers.get(HEADER) or uuid.uuid4().hex)[:ID_LENGTH]
        request.state.request_id = cid
        correlation_id.set(cid)

        response = await call_next(request)
        response.headers[HEADER] = cid
        return response
