"""JSON document-backed user repository."""

from dataclasses import dataclass
from datetime import date

from cafeteria_voting.adapters.json_document_store import (
    JsonDocumentStore,
    new_id,
    parse_date,
    parse_datetime,
    to_json_value,
    utc_now_iso,
)
from cafeteria_voting.domain.errors import ConflictError
from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services.users import UserRepository

_FIELD_NAMES = {
    "email": "email",
    "first_name": "firstName",
    "last_name": "lastName",
    "profile_image_url": "profileImageUrl",
    "role": "role",
    "shift": "shift",
    "student_id": "studentId",
    "birth_date": "birthDate",
}


@dataclass
class JsonUserRepository(UserRepository):
    """Stores users in the ``users`` collection."""

    store: JsonDocumentStore

    def get_user(self, user_id: str) -> UserRecord | None:
        """Return the user with the given id, if present."""
        with self.store.read() as document:
            for row in document["users"]:
                if row.get("id") == user_id:
                    return _to_user(row)
        return None

    def get_user_by_credentials(
        self, student_id: str, birth_date: date
    ) -> UserRecord | None:
        """Match a student by exact student id and birth date."""
        stored_birth_date = birth_date.isoformat()
        with self.store.read() as document:
            for row in document["users"]:
                if (
                    row.get("studentId") == student_id
                    and row.get("birthDate") == stored_birth_date
                ):
                    return _to_user(row)
        return None

    def upsert_user(self, user_id: str | None, fields: dict[str, object]) -> UserRecord:
        """Insert a new user or merge-patch an existing one."""
        patch = {
            _FIELD_NAMES[name]: to_json_value(value)
            for name, value in fields.items()
            if name in _FIELD_NAMES
        }
        with self.store.transaction() as document:
            users = document["users"]
            student_id = patch.get("studentId")
            if student_id is not None and any(
                row.get("studentId") == student_id and row.get("id") != user_id
                for row in users
            ):
                raise ConflictError("Student ID already registered")
            now = utc_now_iso()
            for index, row in enumerate(users):
                if user_id is not None and row.get("id") == user_id:
                    users[index] = {**row, **patch, "updatedAt": now}
                    return _to_user(users[index])
            row = {
                "role": "student",
                **patch,
                "id": user_id or new_id(),
                "createdAt": now,
                "updatedAt": now,
            }
            users.append(row)
            return _to_user(row)

    def list_users(self) -> list[UserRecord]:
        with self.store.read() as document:
            return [_to_user(row) for row in document["users"]]


def _to_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=str(row["id"]),
        role=row.get("role") or "student",
        email=row.get("email"),
        first_name=row.get("firstName"),
        last_name=row.get("lastName"),
        profile_image_url=row.get("profileImageUrl"),
        shift=row.get("shift"),
        student_id=row.get("studentId"),
        birth_date=parse_date(row.get("birthDate")),
        created_at=parse_datetime(row.get("createdAt")),
        updated_at=parse_datetime(row.get("updatedAt")),
    )
