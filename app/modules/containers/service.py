"""
ContainerService - persistence operations for the containers table.

Every method takes the owner id explicitly; nothing here knows about cookies
or requests, so the service can be driven directly from tests or scripts.
"""

import logging
from typing import Any, List
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, StorageError
from app.core.utils import utcnow
from .models import Container
from .schemas import parse_create_payload, parse_update_payload

logger = logging.getLogger(__name__)


class ContainerService:
    """
    Container service. All writes are single statements scoped by
    (user_id, id), committed before returning.
    """

    @staticmethod
    async def find_all(db: AsyncSession, owner_id: str) -> List[Container]:
        """
        Find all containers owned by `owner_id`.

        Ordering: soonest expected arrival first, records without an expected
        arrival last; ties broken by newest first.
        """
        query = (
            select(Container)
            .where(Container.user_id == owner_id)
            .order_by(
                Container.expected_arrival_date.is_(None),
                Container.expected_arrival_date.asc(),
                Container.created_at.desc(),
                Container.id.desc(),
            )
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def create(db: AsyncSession, owner_id: str, payload: Any) -> Container:
        """
        Create a new container for `owner_id`.

        Args:
            payload: CreateContainerDto or a raw mapping

        Returns:
            Created container instance

        Raises:
            ValidationError: If the payload fails the create projection
            StorageError: If the insert cannot be committed
        """
        dto = parse_create_payload(payload)
        now = utcnow()
        container = Container(
            user_id=owner_id,
            created_at=now,
            updated_at=now,
            **dto.model_dump(),
        )
        db.add(container)
        try:
            await db.commit()
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.error("Failed to create container for user %s: %s", owner_id, exc)
            raise StorageError("Failed to create container") from exc

        logger.info("Container %s created for user %s", container.id, owner_id)
        return container

    @staticmethod
    async def update(
        db: AsyncSession, owner_id: str, container_id: int, payload: Any
    ) -> int:
        """
        Apply a partial update to a container owned by `owner_id`.
        Single UPDATE query touching only the supplied fields and updated_at.

        Returns:
            Number of rows changed (0 when the id is absent or foreign)

        Raises:
            ValidationError: If the payload fails the update projection
            BadRequestError: If the payload has no fields to apply
            StorageError: If the update cannot be committed
        """
        dto = parse_update_payload(payload)
        changes = dto.changes()
        if not changes:
            raise BadRequestError("No updates provided")

        stmt = (
            update(Container)
            .where(Container.user_id == owner_id, Container.id == container_id)
            .values(**changes, updated_at=utcnow())
        )
        try:
            result = await db.execute(stmt)
            await db.commit()
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.error("Failed to update container %s: %s", container_id, exc)
            raise StorageError("Failed to update container") from exc

        logger.info(
            "Container %s update by user %s matched %s row(s): %s",
            container_id,
            owner_id,
            result.rowcount,
            sorted(changes),
        )
        return result.rowcount

    @staticmethod
    async def remove(db: AsyncSession, owner_id: str, container_id: int) -> int:
        """
        Permanently delete a container owned by `owner_id`.
        Deleting an absent or foreign id is a no-op.

        Returns:
            Number of rows deleted
        """
        stmt = delete(Container).where(
            Container.user_id == owner_id, Container.id == container_id
        )
        try:
            result = await db.execute(stmt)
            await db.commit()
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.error("Failed to delete container %s: %s", container_id, exc)
            raise StorageError("Failed to delete container") from exc

        logger.info(
            "Container %s delete by user %s removed %s row(s)",
            container_id,
            owner_id,
            result.rowcount,
        )
        return result.rowcount
