"""
Canvas OAuth Bridge - lets an OAuth client sign in with a pasted Canvas token.

The package exposes a FastAPI application factory and a uvicorn server wrapper.
"""
from .app import app, create_app
from .server import BridgeServer

__version__ = "1.0.0"

__all__ = [
    'BridgeServer',
    'app',
    'create_app',
]
