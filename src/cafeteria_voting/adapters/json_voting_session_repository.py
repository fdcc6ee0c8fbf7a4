"""JSON document-backed voting session repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from cafeteria_voting.adapters.json_document_store import (
    JsonDocumentStore,
    new_id,
    parse_datetime,
    to_json_value,
    utc_now_iso,
)
from cafeteria_voting.domain.models import SessionMenuItem, VotingSession
from cafeteria_voting.services.voting_sessions import VotingSessionRepository

_FIELD_NAMES = {
    "name": "name",
    "shift": "shift",
    "start_time": "startTime",
    "end_time": "endTime",
    "status": "status",
}


@dataclass
class JsonVotingSessionRepository(VotingSessionRepository):
    """Stores sessions in ``votingSessions`` and links in ``sessionMenuItems``."""

    store: JsonDocumentStore

    def list_voting_sessions(self) -> list[VotingSession]:
        with self.store.read() as document:
            return [_to_session(row) for row in document["votingSessions"]]

    def list_active_voting_sessions(self) -> list[VotingSession]:
        with self.store.read() as document:
            return [
                _to_session(row)
                for row in document["votingSessions"]
                if row.get("status") == "active"
            ]

    def get_voting_session(self, session_id: str) -> VotingSession | None:
        with self.store.read() as document:
            for row in document["votingSessions"]:
                if row.get("id") == session_id:
                    return _to_session(row)
        return None

    def create_voting_session(self, fields: dict[str, object]) -> VotingSession:
        """Append a session with a fresh id and creation timestamp."""
        row = {
            "status": "scheduled",
            **_to_row(fields),
            "id": new_id(),
            "createdAt": utc_now_iso(),
        }
        with self.store.transaction() as document:
            document["votingSessions"].append(row)
        return _to_session(row)

    def update_voting_session(
        self, session_id: str, partial: dict[str, object]
    ) -> VotingSession | None:
        """Merge-patch a session, returning None when it does not exist."""
        patch = _to_row(partial)
        with self.store.transaction() as document:
            sessions = document["votingSessions"]
            for index, row in enumerate(sessions):
                if row.get("id") == session_id:
                    sessions[index] = {**row, **patch}
                    return _to_session(sessions[index])
        return None

    def link_menu_item(self, session_id: str, menu_item_id: str) -> SessionMenuItem:
        with self.store.transaction() as document:
            links = document["sessionMenuItems"]
            for row in links:
                if (
                    row.get("sessionId") == session_id
                    and row.get("menuItemId") == menu_item_id
                ):
                    return _to_link(row)
            row = {"id": new_id(), "sessionId": session_id, "menuItemId": menu_item_id}
            links.append(row)
            return _to_link(row)

    def unlink_menu_item(self, session_id: str, menu_item_id: str) -> bool:
        with self.store.transaction() as document:
            before = len(document["sessionMenuItems"])
            document["sessionMenuItems"] = [
                row
                for row in document["sessionMenuItems"]
                if not (
                    row.get("sessionId") == session_id
                    and row.get("menuItemId") == menu_item_id
                )
            ]
            return len(document["sessionMenuItems"]) != before

    def list_session_menu_item_ids(self, session_id: str) -> list[str]:
        with self.store.read() as document:
            return [
                str(row["menuItemId"])
                for row in document["sessionMenuItems"]
                if row.get("sessionId") == session_id
            ]


def _to_row(fields: dict[str, object]) -> dict[str, object]:
    return {
        _FIELD_NAMES[name]: to_json_value(value)
        for name, value in fields.items()
        if name in _FIELD_NAMES
    }


def _to_session(row: dict[str, object]) -> VotingSession:
    epoch = datetime.fromtimestamp(0, tz=UTC)
    return VotingSession(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        shift=row.get("shift") or "both",
        start_time=parse_datetime(row.get("startTime")) or epoch,
        end_time=parse_datetime(row.get("endTime")) or epoch,
        status=row.get("status") or "scheduled",
        created_at=parse_datetime(row.get("createdAt")),
    )


def _to_link(row: dict[str, object]) -> SessionMenuItem:
    return SessionMenuItem(
        id=str(row["id"]),
        session_id=str(row["sessionId"]),
        menu_item_id=str(row["menuItemId"]),
    )
