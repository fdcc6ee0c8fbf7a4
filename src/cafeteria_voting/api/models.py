"""Pydantic request and response models for the REST API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cafeteria_voting.domain.models import (
    Role,
    SessionShift,
    SessionStatus,
    UserShift,
)


class ApiModel(BaseModel):
    """Base model using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_null(value: object) -> object:
    if value is None:
        raise ValueError("must not be null")
    return value


class StudentLoginRequest(ApiModel):
    """Student login payload; both fields are checked by the handler."""

    student_id: str | None = None
    birth_date: str | None = None


class UserUpsertRequest(ApiModel):
    """Admin payload for creating or patching a user."""

    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: Role | None = None
    shift: UserShift | None = None
    student_id: str | None = None
    birth_date: date | None = None

    @field_validator("role", mode="before")
    @classmethod
    def reject_null_role(cls, value: object) -> object:
        return _reject_null(value)


class UserResponse(ApiModel):
    """User as returned to clients; the birth date is never echoed back."""

    id: str
    role: Role
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    shift: UserShift | None = None
    student_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MenuItemCreateRequest(ApiModel):
    name: str = Field(min_length=1)
    description: str
    category: str = Field(min_length=1)
    image_url: str | None = None
    available: bool = True


class MenuItemUpdateRequest(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category: str | None = Field(default=None, min_length=1)
    image_url: str | None = None
    available: bool | None = None

    @field_validator("name", "description", "category", "available", mode="before")
    @classmethod
    def reject_null_fields(cls, value: object) -> object:
        """Only imageUrl may be cleared with null."""
        return _reject_null(value)


class MenuItemResponse(ApiModel):
    id: str
    name: str
    description: str
    category: str
    available: bool
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VotingSessionCreateRequest(ApiModel):
    name: str = Field(min_length=1)
    shift: SessionShift
    start_time: datetime
    end_time: datetime
    status: SessionStatus = "scheduled"


class VotingSessionUpdateRequest(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    shift: SessionShift | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: SessionStatus | None = None

    @field_validator(
        "name", "shift", "start_time", "end_time", "status", mode="before"
    )
    @classmethod
    def reject_null_fields(cls, value: object) -> object:
        return _reject_null(value)


class VotingSessionResponse(ApiModel):
    id: str
    name: str
    shift: SessionShift
    start_time: datetime
    end_time: datetime
    status: SessionStatus
    created_at: datetime | None = None


class SessionMenuItemRequest(ApiModel):
    menu_item_id: str = Field(min_length=1)


class SessionMenuItemResponse(ApiModel):
    id: str
    session_id: str
    menu_item_id: str


class VoteCreateRequest(ApiModel):
    session_id: str = Field(min_length=1)
    menu_item_id: str = Field(min_length=1)


class VoteResponse(ApiModel):
    id: str
    user_id: str
    session_id: str
    menu_item_id: str
    created_at: datetime | None = None


class VoteTallyResponse(ApiModel):
    menu_item_id: str
    votes: int
