"""CLI package for the Canvas OAuth Bridge

Parses command-line overrides and runs the bridge server.
"""

from cli.main import main

__all__ = [
    "main",
]
