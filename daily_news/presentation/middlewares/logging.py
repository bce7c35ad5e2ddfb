import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from daily_news.core.logger import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f'{request.method} {request.url.path} raised {e.__class__.__name__}')
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f'{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f}ms)')
        return response
