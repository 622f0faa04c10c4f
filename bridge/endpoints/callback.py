"""
Login form submission endpoint.

The pasted credential is handed back to the calling client as the
authorization code; no code is generated and nothing is stored.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Form
from fastapi.responses import PlainTextResponse, RedirectResponse

from ..cors import cors_headers
from ..logging_utils import describe_secret
from ..models import SubmittedCredential

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/callback")
async def callback(
    token: Optional[str] = Form(None),
    redirect_uri: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
):
    """Redirect back to the calling client with the token as ?code="""
    if not token or not redirect_uri:
        logger.info("Form submission rejected: missing token or redirect_uri")
        return PlainTextResponse("Missing token or redirect_uri", status_code=400)

    credential = SubmittedCredential(token=token, redirect_uri=redirect_uri, state=state)
    logger.info(f"Redirecting credential {describe_secret(credential.token)} to {credential.redirect_uri}")

    return RedirectResponse(credential.redirect_url(), status_code=302, headers=cors_headers())
