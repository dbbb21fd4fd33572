import enum
from sqlalchemy import String, Text, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional

from app.core.db.base import BaseModel


class ContainerStatus(str, enum.Enum):
    """Where a shipment currently is in its journey"""

    pending = "pending"
    departed = "departed"
    in_transit = "in_transit"
    arrived = "arrived"
    delayed = "delayed"


class Container(BaseModel):
    """
    Container model - one row per tracked shipment.
    Extends BaseModel which provides: id, created_at, updated_at
    """

    __tablename__ = "containers"
    __table_args__ = (
        Index("ix_containers_user_expected_arrival", "user_id", "expected_arrival_date"),
    )

    # Owner id issued by the identity service; never changes after insert
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    container_number: Mapped[str] = mapped_column(String(255), nullable=False)
    departure_port: Mapped[str] = mapped_column(String(255), nullable=False)
    arrival_port: Mapped[str] = mapped_column(String(255), nullable=False)

    # ISO date or date-time strings, stored as supplied
    departure_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    expected_arrival_date: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True
    )
    actual_arrival_date: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True
    )

    status: Mapped[ContainerStatus] = mapped_column(
        SQLEnum(
            ContainerStatus,
            name="container_status_enum",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=ContainerStatus.pending,
        server_default=ContainerStatus.pending.value,
    )

    cargo_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tracking_number: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    shipping_line: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Serialized list of image references, kept as an opaque string
    product_images: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Container(id={self.id}, number='{self.container_number}', "
            f"status={self.status.value})>"
        )
