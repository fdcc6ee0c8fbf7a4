"""Domain models for the cafeteria voting service."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

Role = Literal["staff", "student"]
UserShift = Literal["morning", "afternoon", "full-time"]
SessionShift = Literal["morning", "afternoon", "both"]
SessionStatus = Literal["scheduled", "active", "ended"]


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the document."""

    id: str
    role: Role
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    shift: UserShift | None = None
    student_id: str | None = None
    birth_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MenuItem:
    """A dish staff can offer in a voting session."""

    id: str
    name: str
    description: str
    category: str
    available: bool = True
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class VotingSession:
    """A time-boxed voting window scoped to a shift."""

    id: str
    name: str
    shift: SessionShift
    start_time: datetime
    end_time: datetime
    status: SessionStatus = "scheduled"
    created_at: datetime | None = None


@dataclass(frozen=True)
class SessionMenuItem:
    """Links a menu item to a voting session."""

    id: str
    session_id: str
    menu_item_id: str


@dataclass(frozen=True)
class Vote:
    """A student's choice of menu item in a session."""

    id: str
    user_id: str
    session_id: str
    menu_item_id: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class VoteTally:
    """Number of votes a menu item received in a session."""

    menu_item_id: str
    votes: int
