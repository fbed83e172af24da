"""
Request tracing middleware.
"""
import time
import logging
import uuid
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

# Set up logging
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id and logs its outcome and duration.

    An id supplied by an upstream gateway in ``X-Request-ID`` is kept so a
    command can be followed across services.
    """
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"[{request_id}] {request.method} {request.url.path} failed "
                f"after {time.perf_counter() - started:.4f}s"
            )
            raise

        elapsed = time.perf_counter() - started
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"

        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"[{request_id}] {request.method} {request.url.path} -> {response.status_code} ({elapsed:.4f}s)")
        return response


def setup_middlewares(app: FastAPI) -> None:
    """Install the tracing middleware on the application."""
    app.add_middleware(RequestTracingMiddleware)
