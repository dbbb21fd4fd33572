"""
Containers Router - CRUD endpoints for the signed-in user's containers.
The owner is always taken from the session, never from the request body.

POST and PUT read their JSON body inside the handler, after get_current_user
has run, so a request without a valid session is answered with 401 even when
its body is malformed.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.engine import get_db_util
from app.core.exceptions import ValidationError
from app.modules.users.auth import get_current_user
from app.modules.users.identity import IdentityUser
from .service import ContainerService
from .schemas import ContainerResponse, SuccessResponse

router = APIRouter(prefix="/containers", tags=["containers"])


async def read_json_object(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Malformed JSON body", ["body"])
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", ["body"])
    return body


@router.get("", response_model=List[ContainerResponse])
async def get_all_containers(
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """
    Get all containers of the current user.
    Sorted by expected arrival (soonest first, undated last), then newest first.
    """
    return await ContainerService.find_all(db, current_user.id)


@router.post("", response_model=SuccessResponse, status_code=status.HTTP_201_CREATED)
async def create_container(
    request: Request,
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """Create a new container"""
    payload = await read_json_object(request)
    await ContainerService.create(db, current_user.id, payload)
    return SuccessResponse()


@router.put("/{container_id}", response_model=SuccessResponse)
async def update_container(
    container_id: int,
    request: Request,
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """
    Update the supplied fields of a container.
    Succeeds silently when the id does not belong to the current user.
    """
    payload = await read_json_object(request)
    await ContainerService.update(db, current_user.id, container_id, payload)
    return SuccessResponse()


@router.delete("/{container_id}", response_model=SuccessResponse)
async def delete_container(
    container_id: int,
    current_user: IdentityUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_util),
):
    """Permanently delete a container (no-op for absent or foreign ids)"""
    await ContainerService.remove(db, current_user.id, container_id)
    return SuccessResponse()
