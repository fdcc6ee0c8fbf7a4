"""Vote casting and reporting."""

from collections import Counter
from dataclasses import dataclass
from typing import Protocol

from cafeteria_voting.domain.errors import AlreadyVotedError, NotFoundError
from cafeteria_voting.domain.models import Vote, VoteTally
from cafeteria_voting.services.menu_items import MenuItemRepository
from cafeteria_voting.services.voting_sessions import VotingSessionRepository


class VoteRepository(Protocol):
    """Persistence interface for votes."""

    def create_vote(self, fields: dict[str, object]) -> Vote:
        """Append a vote without any duplicate check."""

    def create_vote_once(
        self, user_id: str, session_id: str, menu_item_id: str
    ) -> Vote | None:
        """Append a vote unless the user already voted in the session."""

    def list_votes_by_session(self, session_id: str) -> list[Vote]:
        """Return votes cast in a session."""

    def list_votes_by_user(
        self, user_id: str, session_id: str | None = None
    ) -> list[Vote]:
        """Return votes cast by a user, optionally within one session."""


@dataclass
class VoteService:
    """Application service for votes."""

    repository: VoteRepository
    session_repository: VotingSessionRepository
    menu_item_repository: MenuItemRepository

    def cast_vote(self, user_id: str, session_id: str, menu_item_id: str) -> Vote:
        """Record a vote, allowing one vote per user and session.

        The duplicate check and the insert run in one repository call so two
        concurrent requests from the same student cannot both succeed.
        """
        if self.session_repository.get_voting_session(session_id) is None:
            raise NotFoundError("Voting session not found")
        if self.menu_item_repository.get_menu_item(menu_item_id) is None:
            raise NotFoundError("Menu item not found")
        vote = self.repository.create_vote_once(user_id, session_id, menu_item_id)
        if vote is None:
            raise AlreadyVotedError()
        return vote

    def list_votes_by_session(self, session_id: str) -> list[Vote]:
        return self.repository.list_votes_by_session(session_id)

    def list_votes_by_user(
        self, user_id: str, session_id: str | None = None
    ) -> list[Vote]:
        return self.repository.list_votes_by_user(user_id, session_id)

    def tally(self, session_id: str) -> list[VoteTally]:
        """Count votes per menu item, most voted first."""
        votes = self.repository.list_votes_by_session(session_id)
        counts = Counter(vote.menu_item_id for vote in votes)
        return [
            VoteTally(menu_item_id=menu_item_id, votes=count)
            for menu_item_id, count in counts.most_common()
        ]
