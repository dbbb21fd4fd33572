"""
Users Router - login, session and profile endpoints.
Login itself happens at the identity service; these routes only exchange the
resulting code for a session cookie and expose the signed-in user.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, Request, Response

from app.core.exceptions import BadRequestError
from .auth import (
    clear_session_cookie,
    get_current_user,
    get_identity_service,
    get_session_token,
    set_session_cookie,
)
from .identity import IdentityServiceClient, IdentityUser
from .schemas import CreateSessionDto, RedirectUrlResponse, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/oauth/google/redirect_url", response_model=RedirectUrlResponse)
async def get_google_redirect_url(
    identity: IdentityServiceClient = Depends(get_identity_service),
):
    """URL to send the browser to for Google sign-in"""
    redirect_url = await identity.get_redirect_url("google")
    return RedirectUrlResponse(redirectUrl=redirect_url)


@router.post("/sessions", response_model=SessionResponse)
async def create_session(
    dto: CreateSessionDto,
    response: Response,
    identity: IdentityServiceClient = Depends(get_identity_service),
):
    """Exchange an authorization code for a session cookie"""
    if not dto.code:
        raise BadRequestError("No authorization code provided")

    session_token = await identity.exchange_code_for_session_token(dto.code)
    set_session_cookie(response, session_token)
    logger.info("Session created")
    return SessionResponse()


@router.get("/users/me")
async def get_current_user_profile(
    current_user: IdentityUser = Depends(get_current_user),
) -> Dict[str, Any]:
    """Profile of the signed-in user, as reported by the identity service"""
    return current_user.to_dict()


@router.get("/logout", response_model=SessionResponse)
async def logout(
    request: Request,
    response: Response,
    identity: IdentityServiceClient = Depends(get_identity_service),
):
    """Revoke the session (best effort) and clear the cookie"""
    session_token = get_session_token(request)
    if session_token is not None:
        await identity.revoke_session(session_token)

    clear_session_cookie(response)
    return SessionResponse()
