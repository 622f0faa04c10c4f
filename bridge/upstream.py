"""Upstream API HTTP client for the /api/v1/ pass-through"""

import logging
from typing import Optional

import httpx

from .logging_utils import redact_headers

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/json"


async def forward_upstream_request(
    base_url: str,
    method: str,
    path: str,
    query: str,
    body: bytes,
    authorization: str,
    content_type: Optional[str] = None,
) -> httpx.Response:
    """Forward a request to the upstream API unchanged except for headers

    Args:
        base_url: Upstream origin, e.g. https://school.instructure.com
        method: HTTP method of the incoming request
        path: Request path, including the /api/v1/ prefix
        query: Raw query string without the leading "?"
        body: Raw request body
        authorization: Caller's Authorization header, sent verbatim
        content_type: Caller's Content-Type, defaults to application/json

    Returns:
        HTTP response from the upstream API

    Raises:
        httpx.RequestError: the upstream host could not be reached
    """
    url = f"{base_url}{path}"
    if query:
        url = f"{url}?{query}"

    headers = {
        "Authorization": authorization,
        "Content-Type": content_type or DEFAULT_CONTENT_TYPE,
    }

    logger.debug(f"Forwarding {method} {path} upstream with headers {redact_headers(headers)}")

    # No timeout: a slow upstream holds the calling request open
    async with httpx.AsyncClient(timeout=None) as client:
        response = await client.request(method, url, headers=headers, content=body)
        logger.debug(f"Upstream {method} {path} -> {response.status_code}")
        return response
