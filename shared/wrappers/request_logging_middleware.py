import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from shared.core.logging import get_logger
from shared.helpers.json_response_helper import error_response

logger = get_logger("facility.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        # Skip docs/openapi endpoints
        if request.url.path.startswith(("/openapi", "/docs", "/redoc")):
            return await call_next(request)

        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("[%s] %s %s raised", request_id,
                             request.method, request.url.path)
            response = error_response("Internal server error", http_status=500)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info("[%s] %s %s -> %s (%.1f ms)", request_id, request.method,
                    request.url.path, response.status_code, duration_ms)

        response.headers["X-Request-ID"] = request_id
        return response
