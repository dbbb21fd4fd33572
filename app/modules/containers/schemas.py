"""
Container DTOs (Data Transfer Objects).

Two projections gate what reaches storage: CreateContainerDto for inserts and
UpdateContainerDto for partial updates. Submitted values are stored as sent,
except that a blank date is stored as null.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from typing import Any, Optional, List
from datetime import datetime

from app.core.exceptions import ValidationError
from app.core.utils import parse_iso_date
from .models import ContainerStatus

REQUIRED_TEXT_FIELDS = ("container_number", "departure_port", "arrival_port")
DATE_FIELDS = ("departure_date", "expected_arrival_date", "actual_arrival_date")


def _check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _check_iso_date(value: Optional[str]) -> Optional[str]:
    # An empty date input means "no date"
    if value is None or not value.strip():
        return None
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValueError("must be an ISO date (YYYY-MM-DD) or date-time")
    return value


class CreateContainerDto(BaseModel):
    """DTO for creating a container"""

    container_number: str = Field(..., min_length=1)
    departure_port: str = Field(..., min_length=1)
    arrival_port: str = Field(..., min_length=1)
    departure_date: Optional[str] = None
    expected_arrival_date: Optional[str] = None
    actual_arrival_date: Optional[str] = None
    status: ContainerStatus = ContainerStatus.pending
    cargo_description: Optional[str] = None
    tracking_number: Optional[str] = None
    shipping_line: Optional[str] = None
    notes: Optional[str] = None
    product_images: Optional[str] = None

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def required_text_not_blank(cls, value: str) -> str:
        return _check_not_blank(value)

    @field_validator(*DATE_FIELDS)
    @classmethod
    def dates_are_iso(cls, value: Optional[str]) -> Optional[str]:
        return _check_iso_date(value)

    class Config:
        from_attributes = True


class UpdateContainerDto(BaseModel):
    """
    DTO for partially updating a container.
    Only fields present in the request body are applied; an explicit null
    clears an optional field.
    """

    container_number: Optional[str] = Field(None, min_length=1)
    departure_port: Optional[str] = Field(None, min_length=1)
    arrival_port: Optional[str] = Field(None, min_length=1)
    departure_date: Optional[str] = None
    expected_arrival_date: Optional[str] = None
    actual_arrival_date: Optional[str] = None
    status: Optional[ContainerStatus] = None
    cargo_description: Optional[str] = None
    tracking_number: Optional[str] = None
    shipping_line: Optional[str] = None
    notes: Optional[str] = None
    product_images: Optional[str] = None

    # Defaults are not validated, so these only see values the caller sent
    @field_validator(*REQUIRED_TEXT_FIELDS, "status")
    @classmethod
    def required_fields_not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        if isinstance(value, str):
            return _check_not_blank(value)
        return value

    @field_validator(*DATE_FIELDS)
    @classmethod
    def dates_are_iso(cls, value: Optional[str]) -> Optional[str]:
        return _check_iso_date(value)

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, nulls included."""
        return self.model_dump(exclude_unset=True)

    class Config:
        from_attributes = True


class ContainerResponse(BaseModel):
    """Response model for Container entity"""

    id: int
    user_id: str
    container_number: str
    departure_port: str
    arrival_port: str
    departure_date: Optional[str] = None
    expected_arrival_date: Optional[str] = None
    actual_arrival_date: Optional[str] = None
    status: ContainerStatus
    cargo_description: Optional[str] = None
    tracking_number: Optional[str] = None
    shipping_line: Optional[str] = None
    notes: Optional[str] = None
    product_images: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    success: bool = True


def _raise_validation_error(exc: PydanticValidationError) -> None:
    fields: List[str] = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "body"
        if name not in fields:
            fields.append(name)
    raise ValidationError("Validation failed", fields)


def parse_create_payload(payload: Any) -> CreateContainerDto:
    """Validate a raw mapping (or pass through a DTO) against the create projection."""
    if isinstance(payload, CreateContainerDto):
        return payload
    try:
        return CreateContainerDto.model_validate(dict(payload))
    except PydanticValidationError as exc:
        _raise_validation_error(exc)


def parse_update_payload(payload: Any) -> UpdateContainerDto:
    """Validate a raw mapping (or pass through a DTO) against the update projection."""
    if isinstance(payload, UpdateContainerDto):
        return payload
    try:
        return UpdateContainerDto.model_validate(dict(payload))
    except PydanticValidationError as exc:
        _raise_validation_error(exc)
