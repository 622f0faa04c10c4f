"""
FastAPI dependencies shared by the endpoint routers.
"""
from fastapi import Request

from config import BridgeConfig


def get_bridge_config(request: Request) -> BridgeConfig:
    """Configuration injected into the application by create_app()"""
    return request.app.state.config
