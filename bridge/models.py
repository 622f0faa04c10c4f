"""
Request-scoped entities for the authorize -> callback -> token flow.
"""
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way browsers encode URI components"""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class AuthorizationRequest(BaseModel):
    """Parameters the calling client sent to /authorize"""
    redirect_uri: str
    state: Optional[str] = None


class SubmittedCredential(BaseModel):
    """Login form submission posted to /callback"""
    token: str
    redirect_uri: str
    state: Optional[str] = None

    def redirect_url(self) -> str:
        """Redirect target carrying the credential back as the authorization code"""
        separator = "&" if "?" in self.redirect_uri else "?"
        return (
            f"{self.redirect_uri}{separator}"
            f"code={encode_uri_component(self.token)}"
            f"&state={encode_uri_component(self.state or '')}"
        )


class TokenExchangeResult(BaseModel):
    """Body returned from /token; the access token is the code, unmodified"""
    access_token: str
    token_type: str = "Bearer"
    scope: str = "read write"
