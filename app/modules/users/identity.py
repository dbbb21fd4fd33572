"""
Client for the hosted identity service.

The identity service owns the OAuth flow and the sessions. This backend only
forwards an authorization code to obtain an opaque session token, resolves
that token to a user on each request, and revokes it on logout. The token is
never parsed locally.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from app.core.exceptions import AuthError, ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Identity"


@dataclass
class IdentityUser:
    """User as reported by the identity service"""

    id: str
    email: str
    profile: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IdentityUser":
        return cls(id=str(payload["id"]), email=payload.get("email", ""), profile=payload)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.profile)
        data.setdefault("id", self.id)
        data.setdefault("email", self.email)
        return data


class IdentityServiceClient:
    """Thin async pass-through to the identity service REST API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _client(self, token: Optional[str] = None) -> httpx.AsyncClient:
        headers = {"x-api-key": self.api_key}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return httpx.AsyncClient(
            base_url=self.api_url,
            headers=headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def get_redirect_url(self, provider: str) -> str:
        """URL the browser should visit to begin federated login."""
        try:
            async with self._client() as client:
                response = await client.get(f"/oauth/{provider}/redirect_url")
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Could not fetch %s redirect URL: %s", provider, exc)
            raise ExternalServiceError(SERVICE_NAME, "could not start login") from exc
        return response.json()["redirect_url"]

    async def exchange_code_for_session_token(self, code: str) -> str:
        """
        Trade an OAuth authorization code for a session token.

        Raises:
            AuthError: If the identity service rejects the code
            ExternalServiceError: If the identity service cannot be reached
        """
        try:
            async with self._client() as client:
                response = await client.post("/sessions", json={"code": code})
        except httpx.HTTPError as exc:
            logger.error("Session exchange failed: %s", exc)
            raise ExternalServiceError(SERVICE_NAME, "could not create session") from exc

        if response.status_code in (400, 401, 403, 404):
            raise AuthError("Invalid or expired authorization code")
        if response.is_error:
            raise ExternalServiceError(
                SERVICE_NAME, f"unexpected status {response.status_code}"
            )
        return response.json()["session_token"]

    async def resolve_session_to_user(self, token: str) -> Optional[IdentityUser]:
        """
        Resolve a session token to its user.

        Returns:
            IdentityUser, or None if the token is invalid or expired
        """
        try:
            async with self._client(token) as client:
                response = await client.get("/users/me")
        except httpx.HTTPError as exc:
            logger.error("Session lookup failed: %s", exc)
            raise ExternalServiceError(SERVICE_NAME, "could not verify session") from exc

        if response.status_code in (401, 403, 404):
            return None
        if response.is_error:
            raise ExternalServiceError(
                SERVICE_NAME, f"unexpected status {response.status_code}"
            )
        return IdentityUser.from_payload(response.json())

    async def revoke_session(self, token: str) -> None:
        """Best-effort session invalidation. Failures are logged, never raised."""
        try:
            async with self._client(token) as client:
                response = await client.delete("/sessions")
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Failed to revoke session: %s", exc)
