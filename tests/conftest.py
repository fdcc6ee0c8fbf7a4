"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from uuid import uuid4

import pytest

from cafeteria_voting.config import Settings
from cafeteria_voting.containers import AppContainer, build_container
from cafeteria_voting.domain.errors import ConflictError
from cafeteria_voting.domain.models import (
    MenuItem,
    SessionMenuItem,
    UserRecord,
    Vote,
    VotingSession,
)
from cafeteria_voting.services.menu_items import MenuItemRepository
from cafeteria_voting.services.rate_limit import LoginRateLimiter
from cafeteria_voting.services.users import UserRepository
from cafeteria_voting.services.votes import VoteRepository
from cafeteria_voting.services.voting_sessions import VotingSessionRepository


@dataclass
class FakeClock:
    """Manually advanced clock for rate limiter tests."""

    now: datetime = field(
        default_factory=lambda: datetime(2026, 3, 2, 11, 30, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    def get_user_by_credentials(
        self, student_id: str, birth_date: date
    ) -> UserRecord | None:
        for user in self.users.values():
            if user.student_id == student_id and user.birth_date == birth_date:
                return user
        return None

    def upsert_user(self, user_id: str | None, fields: dict[str, object]) -> UserRecord:
        student_id = fields.get("student_id")
        for user in self.users.values():
            if student_id and user.student_id == student_id and user.id != user_id:
                raise ConflictError("Student ID already registered")
        if user_id in self.users:
            self.users[user_id] = replace(self.users[user_id], **fields)
        else:
            new_id = user_id or str(uuid4())
            self.users[new_id] = UserRecord(
                **{"role": "student", **fields, "id": new_id}
            )
            user_id = new_id
        return self.users[user_id]

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryMenuItemRepository(MenuItemRepository):
    """In-memory menu item repository for tests."""

    items: dict[str, MenuItem] = field(default_factory=dict)

    def list_menu_items(self) -> list[MenuItem]:
        return list(self.items.values())

    def get_menu_item(self, menu_item_id: str) -> MenuItem | None:
        return self.items.get(menu_item_id)

    def create_menu_item(self, fields: dict[str, object]) -> MenuItem:
        item = MenuItem(id=str(uuid4()), **fields)
        self.items[item.id] = item
        return item

    def update_menu_item(
        self, menu_item_id: str, partial: dict[str, object]
    ) -> MenuItem | None:
        if menu_item_id not in self.items:
            return None
        self.items[menu_item_id] = replace(self.items[menu_item_id], **partial)
        return self.items[menu_item_id]

    def delete_menu_item(self, menu_item_id: str) -> bool:
        return self.items.pop(menu_item_id, None) is not None


@dataclass
class InMemoryVotingSessionRepository(VotingSessionRepository):
    """In-memory voting session repository for tests."""

    sessions: dict[str, VotingSession] = field(default_factory=dict)
    links: list[SessionMenuItem] = field(default_factory=list)

    def list_voting_sessions(self) -> list[VotingSession]:
        return list(self.sessions.values())

    def list_active_voting_sessions(self) -> list[VotingSession]:
        return [s for s in self.sessions.values() if s.status == "active"]

    def get_voting_session(self, session_id: str) -> VotingSession | None:
        return self.sessions.get(session_id)

    def create_voting_session(self, fields: dict[str, object]) -> VotingSession:
        session = VotingSession(id=str(uuid4()), **fields)
        self.sessions[session.id] = session
        return session

    def update_voting_session(
        self, session_id: str, partial: dict[str, object]
    ) -> VotingSession | None:
        if session_id not in self.sessions:
            return None
        self.sessions[session_id] = replace(self.sessions[session_id], **partial)
        return self.sessions[session_id]

    def link_menu_item(self, session_id: str, menu_item_id: str) -> SessionMenuItem:
        for link in self.links:
            if link.session_id == session_id and link.menu_item_id == menu_item_id:
                return link
        link = SessionMenuItem(
            id=str(uuid4()), session_id=session_id, menu_item_id=menu_item_id
        )
        self.links.append(link)
        return link

    def unlink_menu_item(self, session_id: str, menu_item_id: str) -> bool:
        before = len(self.links)
        self.links = [
            link
            for link in self.links
            if (link.session_id, link.menu_item_id) != (session_id, menu_item_id)
        ]
        return len(self.links) != before

    def list_session_menu_item_ids(self, session_id: str) -> list[str]:
        return [
            link.menu_item_id for link in self.links if link.session_id == session_id
        ]


@dataclass
class InMemoryVoteRepository(VoteRepository):
    """In-memory vote repository for tests."""

    votes: list[Vote] = field(default_factory=list)

    def create_vote(self, fields: dict[str, object]) -> Vote:
        vote = Vote(id=str(uuid4()), **fields)
        self.votes.append(vote)
        return vote

    def create_vote_once(
        self, user_id: str, session_id: str, menu_item_id: str
    ) -> Vote | None:
        if self.list_votes_by_user(user_id, session_id):
            return None
        return self.create_vote(
            {"user_id": user_id, "session_id": session_id, "menu_item_id": menu_item_id}
        )

    def list_votes_by_session(self, session_id: str) -> list[Vote]:
        return [vote for vote in self.votes if vote.session_id == session_id]

    def list_votes_by_user(
        self, user_id: str, session_id: str | None = None
    ) -> list[Vote]:
        return [
            vote
            for vote in self.votes
            if vote.user_id == user_id
            and (session_id is None or vote.session_id == session_id)
        ]


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(
        data_file=str(data_file),
        auth_mode="header",
        admin_token="admin-token",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> AppContainer:
    rate_limiter = LoginRateLimiter(
        window_seconds=settings.login_rate_limit_window_seconds,
        max_attempts=settings.login_rate_limit_max_attempts,
        clock=clock,
    )
    return build_container(settings, rate_limiter=rate_limiter)


@pytest.fixture
def staff_user(container: AppContainer) -> UserRecord:
    return container.user_service.upsert_user(
        {"role": "staff", "email": "cook@school.example", "first_name": "Ana"}
    )


@pytest.fixture
def student_user(container: AppContainer) -> UserRecord:
    return container.user_service.upsert_user(
        {
            "role": "student",
            "shift": "morning",
            "student_id": "2024001",
            "birth_date": date(2010, 5, 17),
            "first_name": "Bruno",
        }
    )
