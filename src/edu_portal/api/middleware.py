"""
访问日志中间件
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from edu_portal.core import get_logger

logger = get_logger("edu_portal.http")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """每个请求记录一行日志，并透传 x-request-id"""

    async def dispatch(self, request: Request, call_next: Callable):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = rid
        start = time.perf_counter()

        response: Response = await call_next(request)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed:.1f} ms) rid={rid}"
        )
        response.headers["x-request-id"] = rid
        return response
