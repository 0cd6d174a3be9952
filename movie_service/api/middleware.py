import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add a correlation ID (request_id) and log request timing.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Downstream handlers and exception handlers read it from here
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            process_time = (time.perf_counter() - start_time) * 1000
            logger.error(
                "%s %s failed after %.2fms [request_id=%s]",
                request.method, request.url.path, process_time, request_id,
                exc_info=True,
            )
            raise

        process_time = (time.perf_counter() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.2f}"

        logger.info(
            "%s %s -> %d in %.2fms [request_id=%s]",
            request.method, request.url.path, response.status_code, process_time, request_id,
        )
        return response
