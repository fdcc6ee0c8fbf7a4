"""Voting session scheduling and menu composition."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from cafeteria_voting.domain.errors import BadRequestError, NotFoundError
from cafeteria_voting.domain.models import MenuItem, SessionMenuItem, VotingSession
from cafeteria_voting.services.menu_items import MenuItemRepository


class VotingSessionRepository(Protocol):
    """Persistence interface for voting sessions and their menu links."""

    def list_voting_sessions(self) -> list[VotingSession]:
        """Return all sessions in insertion order."""

    def list_active_voting_sessions(self) -> list[VotingSession]:
        """Return sessions whose status is active."""

    def get_voting_session(self, session_id: str) -> VotingSession | None:
        """Return a session by id, if present."""

    def create_voting_session(self, fields: dict[str, object]) -> VotingSession:
        """Create a session and return it."""

    def update_voting_session(
        self, session_id: str, partial: dict[str, object]
    ) -> VotingSession | None:
        """Merge-patch a session, returning None when it does not exist."""

    def link_menu_item(self, session_id: str, menu_item_id: str) -> SessionMenuItem:
        """Attach a menu item to a session, reusing an existing link."""

    def unlink_menu_item(self, session_id: str, menu_item_id: str) -> bool:
        """Detach a menu item from a session."""

    def list_session_menu_item_ids(self, session_id: str) -> list[str]:
        """Return ids of menu items linked to a session."""


@dataclass
class VotingSessionService:
    """Application service for voting sessions."""

    repository: VotingSessionRepository
    menu_item_repository: MenuItemRepository

    def list_voting_sessions(self) -> list[VotingSession]:
        return self.repository.list_voting_sessions()

    def list_active_voting_sessions(self) -> list[VotingSession]:
        return self.repository.list_active_voting_sessions()

    def get_voting_session(self, session_id: str) -> VotingSession:
        session = self.repository.get_voting_session(session_id)
        if session is None:
            raise NotFoundError("Voting session not found")
        return session

    def create_voting_session(self, fields: dict[str, object]) -> VotingSession:
        _ensure_window(fields.get("start_time"), fields.get("end_time"))
        return self.repository.create_voting_session(fields)

    def update_voting_session(
        self, session_id: str, partial: dict[str, object]
    ) -> VotingSession:
        """Apply a partial update, keeping the start before the end."""
        current = self.get_voting_session(session_id)
        _ensure_window(
            partial.get("start_time", current.start_time),
            partial.get("end_time", current.end_time),
        )
        session = self.repository.update_voting_session(session_id, partial)
        if session is None:
            raise NotFoundError("Voting session not found")
        return session

    def add_menu_item(self, session_id: str, menu_item_id: str) -> SessionMenuItem:
        self.get_voting_session(session_id)
        if self.menu_item_repository.get_menu_item(menu_item_id) is None:
            raise NotFoundError("Menu item not found")
        return self.repository.link_menu_item(session_id, menu_item_id)

    def remove_menu_item(self, session_id: str, menu_item_id: str) -> None:
        self.repository.unlink_menu_item(session_id, menu_item_id)

    def list_menu_items(self, session_id: str) -> list[MenuItem]:
        """Return the menu items offered in a session, in link order."""
        self.get_voting_session(session_id)
        items = []
        for menu_item_id in self.repository.list_session_menu_item_ids(session_id):
            item = self.menu_item_repository.get_menu_item(menu_item_id)
            if item is not None:
                items.append(item)
        return items


def _ensure_window(start: object, end: object) -> None:
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        raise BadRequestError("Start and end time are required")
    if _as_utc(start) >= _as_utc(end):
        raise BadRequestError("Start time must be before end time")


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)
