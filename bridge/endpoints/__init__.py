"""
Endpoint routers for the bridge.
"""
from .home import router as home_router
from .authorize import router as authorize_router
from .callback import router as callback_router
from .token import router as token_router
from .passthrough import router as passthrough_router

__all__ = [
    'home_router',
    'authorize_router',
    'callback_router',
    'token_router',
    'passthrough_router',
]
