"""
Exception handlers mapping routing failures to plain-text responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# A known path with an unsupported method is treated as unmatched
NOT_FOUND_STATUSES = {404, 405}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in NOT_FOUND_STATUSES:
        logger.debug(f"No route for {request.method} {request.url.path}")
        return PlainTextResponse("Not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI):
    """Install the bridge's exception handlers on an application"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
