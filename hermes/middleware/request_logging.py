# hermes/middleware/request_logging.py
import json
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Una línea JSON por request (method, path, status, duración, request_id).
    El request_id se devuelve en la cabecera X-Request-ID.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        request_id = str(uuid.uuid4())
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            # si hubo excepción se registra como 500 y se relanza
            logger.info(json.dumps({
                "event": "http_request",
                "method": request.method,
                "path": request.url.path,
                "status": status_code,
                "duration_ms": round((time.monotonic() - start) * 1000, 2),
                "request_id": request_id,
            }))

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
