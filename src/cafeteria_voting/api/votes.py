"""Vote endpoints."""

from fastapi import APIRouter, Depends, Query, status

from cafeteria_voting.api.dependencies import get_container, require_student
from cafeteria_voting.api.models import (
    VoteCreateRequest,
    VoteResponse,
    VoteTallyResponse,
)
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import UserRecord, Vote, VoteTally

router = APIRouter(prefix="/api/votes", tags=["votes"])


@router.post("", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
def cast_vote(
    payload: VoteCreateRequest,
    user: UserRecord = Depends(require_student),
    container: AppContainer = Depends(get_container),
) -> Vote:
    """Cast the caller's single vote for a session. Students only."""
    return container.vote_service.cast_vote(
        user_id=user.id,
        session_id=payload.session_id,
        menu_item_id=payload.menu_item_id,
    )


@router.get("/mine", response_model=list[VoteResponse])
def list_my_votes(
    session_id: str | None = Query(default=None, alias="sessionId"),
    user: UserRecord = Depends(require_student),
    container: AppContainer = Depends(get_container),
) -> list[Vote]:
    """Return the caller's votes, optionally for one session."""
    return container.vote_service.list_votes_by_user(user.id, session_id)


@router.get("/session/{session_id}", response_model=list[VoteResponse])
def list_session_votes(
    session_id: str,
    container: AppContainer = Depends(get_container),
) -> list[Vote]:
    return container.vote_service.list_votes_by_session(session_id)


@router.get("/session/{session_id}/results", response_model=list[VoteTallyResponse])
def session_results(
    session_id: str,
    container: AppContainer = Depends(get_container),
) -> list[VoteTally]:
    """Return vote counts per menu item, most voted first."""
    return container.vote_service.tally(session_id)
