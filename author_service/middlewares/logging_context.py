"""
Request fields for log lines, plus one access line per request.
"""

from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.requests import Request
from starlette.responses import Response

from author_service.logging import clear_log_context, logger, set_log_context
from author_service.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every record logged while serving a request with its path and
    method, then with the response status. Paths listed in
    ``LOG_EXCLUDED_PATHS`` get no access line.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        set_log_context(endpoint=path, method=request.method)
        try:
            response = await call_next(request)
            set_log_context(status_code=response.status_code)
            if path not in app_settings.LOG_EXCLUDED_PATHS:
                logger.info(f"{request.method} {path} {response.status_code}")
            return response
        finally:
            clear_log_context()
