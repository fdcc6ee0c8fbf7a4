"""JSON document-backed vote repository."""

from dataclasses import dataclass

from cafeteria_voting.adapters.json_document_store import (
    JsonDocumentStore,
    new_id,
    parse_datetime,
    utc_now_iso,
)
from cafeteria_voting.domain.models import Vote
from cafeteria_voting.services.votes import VoteRepository


@dataclass
class JsonVoteRepository(VoteRepository):
    """Stores votes in the ``votes`` collection."""

    store: JsonDocumentStore

    def create_vote(self, fields: dict[str, object]) -> Vote:
        """Append a vote with a fresh id and timestamp."""
        row = _new_row(
            user_id=str(fields["user_id"]),
            session_id=str(fields["session_id"]),
            menu_item_id=str(fields["menu_item_id"]),
        )
        with self.store.transaction() as document:
            document["votes"].append(row)
        return _to_vote(row)

    def create_vote_once(
        self, user_id: str, session_id: str, menu_item_id: str
    ) -> Vote | None:
        """Append a vote unless the user already voted in the session."""
        with self.store.transaction() as document:
            votes = document["votes"]
            if any(
                row.get("userId") == user_id and row.get("sessionId") == session_id
                for row in votes
            ):
                return None
            row = _new_row(user_id, session_id, menu_item_id)
            votes.append(row)
        return _to_vote(row)

    def list_votes_by_session(self, session_id: str) -> list[Vote]:
        with self.store.read() as document:
            return [
                _to_vote(row)
                for row in document["votes"]
                if row.get("sessionId") == session_id
            ]

    def list_votes_by_user(
        self, user_id: str, session_id: str | None = None
    ) -> list[Vote]:
        with self.store.read() as document:
            return [
                _to_vote(row)
                for row in document["votes"]
                if row.get("userId") == user_id
                and (session_id is None or row.get("sessionId") == session_id)
            ]


def _new_row(user_id: str, session_id: str, menu_item_id: str) -> dict[str, object]:
    return {
        "id": new_id(),
        "userId": user_id,
        "sessionId": session_id,
        "menuItemId": menu_item_id,
        "createdAt": utc_now_iso(),
    }


def _to_vote(row: dict[str, object]) -> Vote:
    return Vote(
        id=str(row["id"]),
        user_id=str(row["userId"]),
        session_id=str(row["sessionId"]),
        menu_item_id=str(row["menuItemId"]),
        created_at=parse_datetime(row.get("createdAt")),
    )
