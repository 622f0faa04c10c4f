"""
Landing page endpoint.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from config import BridgeConfig
from ..cors import cors_headers
from ..dependencies import get_bridge_config
from ..pages import render_home_page

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(config: BridgeConfig = Depends(get_bridge_config)):
    """Informational page for users who open the bridge directly"""
    return HTMLResponse(render_home_page(config.institution_name), headers=cors_headers())
