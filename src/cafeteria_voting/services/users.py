"""User-related business logic."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from cafeteria_voting.domain.errors import UnauthorizedError
from cafeteria_voting.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_user_by_credentials(
        self, student_id: str, birth_date: date
    ) -> UserRecord | None:
        """Return the student whose id and birth date both match exactly."""

    def upsert_user(self, user_id: str | None, fields: dict[str, object]) -> UserRecord:
        """Insert a user, or merge-patch the fields over an existing one."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""


@dataclass
class UserService:
    """Application service for user lookups and student login."""

    repository: UserRepository

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.repository.get_user(user_id)

    def list_users(self) -> list[UserRecord]:
        return self.repository.list_users()

    def upsert_user(
        self, fields: dict[str, object], user_id: str | None = None
    ) -> UserRecord:
        """Create a user or apply a merge-patch to an existing one.

        Raises ConflictError when another user already holds the student id.
        """
        return self.repository.upsert_user(user_id, fields)

    def authenticate_student(self, student_id: str, birth_date: date) -> UserRecord:
        """Resolve a student from login credentials or raise UnauthorizedError."""
        user = self.repository.get_user_by_credentials(student_id, birth_date)
        if user is None:
            raise UnauthorizedError()
        return user
