"""
Code-for-token exchange endpoint (the calling client's server calls this).
"""
import json
import logging
from typing import Any, Optional
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..cors import cors_headers
from ..logging_utils import describe_secret
from ..models import TokenExchangeResult

logger = logging.getLogger(__name__)
router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class InvalidRequestFormat(ValueError):
    """Token request body could not be parsed"""


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=cors_headers())


def parse_urlencoded(body: bytes) -> dict:
    """Strictly parse a form-urlencoded body; empty bodies parse to {}

    A repeated key keeps its first value.
    """
    if not body.strip():
        return {}
    try:
        pairs = parse_qsl(body.decode("utf-8"), keep_blank_values=True, strict_parsing=True)
    except ValueError as e:
        raise InvalidRequestFormat(str(e)) from e
    fields = {}
    for name, value in pairs:
        fields.setdefault(name, value)
    return fields


async def extract_code(request: Request) -> Optional[Any]:
    """
    Read the code from a form, JSON, or unlabelled body.

    Raises:
        InvalidRequestFormat: the body does not match any supported encoding
    """
    content_type = request.headers.get("content-type", "")

    if any(form_type in content_type for form_type in FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except StarletteHTTPException as e:
            # Starlette reports malformed multipart bodies as a 400
            raise InvalidRequestFormat(str(e.detail)) from e
        codes = form.getlist("code")
        code = codes[0] if codes else None
        # File parts are not codes
        return code if isinstance(code, str) else None

    if "application/json" in content_type:
        try:
            payload = json.loads(await request.body())
        except ValueError as e:
            raise InvalidRequestFormat(str(e)) from e
        if not isinstance(payload, dict):
            raise InvalidRequestFormat("JSON body must be an object")
        return payload.get("code")

    # Unknown content type: try form-urlencoded as a default
    return parse_urlencoded(await request.body()).get("code")


@router.post("/token")
async def token(request: Request):
    """Return the submitted code as the access token"""
    try:
        code = await extract_code(request)
    except InvalidRequestFormat as e:
        logger.info(f"Token request rejected: {e}")
        return _error("Invalid request format")

    if not code:
        logger.info("Token request rejected: missing code")
        return _error("Missing code")

    if not isinstance(code, str):
        # JSON callers may send a non-string code; relay its JSON text form
        code = json.dumps(code)

    logger.info(f"Exchanging code {describe_secret(code)} for access token")
    result = TokenExchangeResult(access_token=code)
    return JSONResponse(result.model_dump(), headers=cors_headers())
