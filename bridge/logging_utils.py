"""
Logging helpers that keep credentials out of the log.
"""
from typing import Mapping, Dict, Optional

SENSITIVE_HEADERS = {'authorization', 'cookie', 'x-api-key', 'api-key'}


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy headers with credential-bearing values replaced"""
    return {
        name: "[REDACTED]" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def describe_secret(value: Optional[str]) -> str:
    """Describe a credential by length only"""
    if not value:
        return "<empty>"
    return f"<{len(value)} chars>"
