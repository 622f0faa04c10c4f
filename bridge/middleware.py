"""
FastAPI middleware for CORS preflight and request logging.
"""
import time
import logging
from fastapi import Request
from fastapi.responses import Response

from .cors import cors_headers

logger = logging.getLogger(__name__)


async def cors_preflight_middleware(request: Request, call_next):
    """Answer OPTIONS on any path with an empty 200 before routing"""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=cors_headers())
    return await call_next(request)


async def log_requests_middleware(request: Request, call_next):
    """Middleware for request logging and timing"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    # Path only: query strings and bodies may carry credentials
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

    return response
