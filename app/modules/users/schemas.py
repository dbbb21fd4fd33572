"""
Session DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel
from typing import Optional


class CreateSessionDto(BaseModel):
    """Authorization code returned to the browser by the OAuth provider"""

    code: Optional[str] = None


class RedirectUrlResponse(BaseModel):
    redirectUrl: str


class SessionResponse(BaseModel):
    success: bool = True
