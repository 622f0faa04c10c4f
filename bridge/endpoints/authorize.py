"""
Authorization page endpoint (the calling client sends the user here).
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from config import BridgeConfig
from ..cors import cors_headers
from ..dependencies import get_bridge_config
from ..models import AuthorizationRequest
from ..pages import render_authorize_page

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/authorize", response_class=HTMLResponse)
async def authorize(
    redirect_uri: Optional[str] = None,
    state: Optional[str] = None,
    config: BridgeConfig = Depends(get_bridge_config),
):
    """Render the token login form for an OAuth-style authorization request"""
    if not redirect_uri:
        logger.info("Authorization request rejected: missing redirect_uri")
        return PlainTextResponse("Missing redirect_uri", status_code=400)

    auth_request = AuthorizationRequest(redirect_uri=redirect_uri, state=state)
    logger.debug(f"Rendering login form for redirect_uri={auth_request.redirect_uri}")

    page = render_authorize_page(
        config.institution_name,
        config.upstream_api_host,
        auth_request.redirect_uri,
        auth_request.state,
    )
    return HTMLResponse(page, headers=cors_headers())
