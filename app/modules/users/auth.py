"""
Session-based authentication.
Provides the identity service dependency, the current-user dependency and
session cookie helpers.
"""

from typing import Optional
from fastapi import Depends, Request, Response

from app.core.config import config
from app.core.exceptions import AuthError
from .identity import IdentityServiceClient, IdentityUser


def get_identity_service() -> IdentityServiceClient:
    """Dependency returning the identity service client (overridden in tests)."""
    return IdentityServiceClient(
        api_url=config.identity_service_api_url,
        api_key=config.identity_service_api_key,
        timeout=config.identity_service_timeout,
    )


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(config.session_cookie_name) or None


async def get_current_user(
    request: Request,
    identity: IdentityServiceClient = Depends(get_identity_service),
) -> IdentityUser:
    """
    Dependency to get the current authenticated user from the session cookie.

    Raises:
        AuthError: If the cookie is missing or the session is invalid
    """
    token = get_session_token(request)
    if token is None:
        raise AuthError("Not authenticated")

    user = await identity.resolve_session_to_user(token)
    if user is None:
        raise AuthError("Invalid or expired session")

    return user


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=config.session_cookie_name,
        value=token,
        max_age=config.session_max_age_seconds,
        path="/",
        secure=True,
        httponly=True,
        samesite="none",
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=config.session_cookie_name,
        value="",
        max_age=0,
        path="/",
        secure=True,
        httponly=True,
        samesite="none",
    )
