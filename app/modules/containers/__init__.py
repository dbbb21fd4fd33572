"""Containers module"""

from .models import Container, ContainerStatus
from .service import ContainerService
from .schemas import CreateContainerDto, UpdateContainerDto, ContainerResponse
from .client import ContainersClient
from .router import router

__all__ = [
    "Container",
    "ContainerStatus",
    "ContainerService",
    "CreateContainerDto",
    "UpdateContainerDto",
    "ContainerResponse",
    "ContainersClient",
    "router",
]
