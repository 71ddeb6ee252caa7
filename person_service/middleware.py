# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP middleware — request ID propagation into responses and log records.
"""

import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from person_service.core.logging import request_id_ctx


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Echo or mint X-Request-ID and expose it to loggers while the request runs."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response
