"""Users module"""

from .identity import IdentityServiceClient, IdentityUser
from .auth import get_current_user, get_identity_service
from .router import router

__all__ = [
    "IdentityServiceClient",
    "IdentityUser",
    "get_current_user",
    "get_identity_service",
    "router",
]
