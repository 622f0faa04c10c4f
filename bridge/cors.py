"""
Permissive cross-origin headers so third-party clients can call the bridge.
"""

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def cors_headers() -> dict:
    """Return a fresh copy of the CORS header set"""
    return dict(CORS_HEADERS)
