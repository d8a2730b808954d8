"""Custom middleware."""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging import get_logger

logger = get_logger(__name__)

COUNTRY_HEADER = "x-vercel-ip-country"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its processing time."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(f"{request.method} {request.url.path}",
                    extra={ "method": request.method, "path": request.url.path,
                            "status_code": response.status_code, "process_time": process_time,
                            "request_id": request_id, })
        return response


class GeoRestrictionMiddleware(BaseHTTPMiddleware):
    """Reject requests whose edge country header is not in the allow list.

    A missing header counts as country ``'unknown'`` and is rejected.
    """

    def __init__(self, app: ASGIApp, allowed_countries: list[str]):
        super().__init__(app)
        self.allowed_countries = set(allowed_countries)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        country = request.headers.get(COUNTRY_HEADER, "unknown").upper()
        if country not in self.allowed_countries:
            logger.warning("Request blocked by geo restriction", extra={ "country": country,
                                                                         "path": request.url.path })
            return PlainTextResponse("Access Denied", status_code=403)
        return await call_next(request)
