"""
FastAPI application initialization and configuration.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from config import BridgeConfig
from .errors import register_exception_handlers
from .middleware import cors_preflight_middleware, log_requests_middleware
from .endpoints import (
    home_router,
    authorize_router,
    callback_router,
    token_router,
    passthrough_router,
)

logger = logging.getLogger(__name__)


def create_app(config: Optional[BridgeConfig] = None) -> FastAPI:
    """Build a bridge application bound to one institution's configuration

    Args:
        config: Deploy-time configuration; read from settings when omitted

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = BridgeConfig.from_settings()

    app = FastAPI(
        title="Canvas OAuth Bridge",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # Paths match exactly; "/token/" is not "/token"
        redirect_slashes=False,
    )
    app.state.config = config

    # Last registered runs outermost, so preflight responses are logged too
    app.middleware("http")(cors_preflight_middleware)
    app.middleware("http")(log_requests_middleware)

    register_exception_handlers(app)

    app.include_router(home_router)
    app.include_router(authorize_router)
    app.include_router(callback_router)
    app.include_router(token_router)
    if config.passthrough_enabled:
        app.include_router(passthrough_router)

    logger.debug(
        f"Bridge application initialized for {config.institution_name} "
        f"(upstream={config.upstream_api_host}, passthrough={config.passthrough_enabled})"
    )
    return app


# Default application for `uvicorn bridge.app:app`
app = create_app()
