"""Configuration management package for the Canvas OAuth bridge"""

from .loader import ConfigLoader, get_config_loader
from .bridge_config import BridgeConfig

__all__ = [
    "BridgeConfig",
    "ConfigLoader",
    "get_config_loader",
]
