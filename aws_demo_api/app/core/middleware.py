"""
Request correlation and access logging.

Each request is tagged with a short id, taken from an incoming
``X-Request-ID`` header when the caller supplies one.  The id is kept
on ``request.state.request_id`` so error handlers can log it, echoed
back in the response header and written to the access log together
with the status code and duration.
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"

access_logger = logging.getLogger("aws_demo_api.access")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.info(
                "%s %s -> 500 (%.2fms) [%s]",
                request.method,
                request.url.path,
                (time.perf_counter() - start) * 1000,
                request_id,
            )
            raise
        response.headers[REQUEST_ID_HEADER] = request_id
        access_logger.info(
            "%s %s -> %d (%.2fms) [%s]",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
            request_id,
        )
        return response
