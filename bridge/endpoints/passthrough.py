"""
Transparent pass-through of /api/v1/ requests to the upstream API host.
"""
import logging
from urllib.parse import quote

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from config import BridgeConfig
from ..cors import cors_headers
from ..dependencies import get_bridge_config
from ..upstream import forward_upstream_request

logger = logging.getLogger(__name__)
router = APIRouter()

PASSTHROUGH_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


def raw_request_path(request: Request) -> str:
    """Path as the client sent it, percent-escapes intact"""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return quote(request.url.path)
    # Some servers include the query string in raw_path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


@router.api_route("/api/v1/{upstream_path:path}", methods=PASSTHROUGH_METHODS)
async def passthrough(
    upstream_path: str,
    request: Request,
    config: BridgeConfig = Depends(get_bridge_config),
):
    """Relay the request upstream with the caller's Authorization header"""
    authorization = request.headers.get("authorization")
    if not authorization:
        logger.info(f"Pass-through rejected: missing Authorization for {request.method} {request.url.path}")
        return JSONResponse(
            {"error": "Missing Authorization header"},
            status_code=401,
            headers=cors_headers(),
        )

    try:
        upstream_response = await forward_upstream_request(
            config.upstream_base_url,
            request.method,
            raw_request_path(request),
            request.url.query,
            await request.body(),
            authorization,
            request.headers.get("content-type"),
        )
    except httpx.RequestError as e:
        logger.error(f"Upstream request to {config.upstream_api_host} failed: {type(e).__name__}: {e}")
        return JSONResponse(
            {"error": "Upstream request failed"},
            status_code=502,
            headers=cors_headers(),
        )

    return Response(
        content=upstream_response.content,
        status_code=upstream_response.status_code,
        media_type=upstream_response.headers.get("content-type"),
        headers=cors_headers(),
    )
