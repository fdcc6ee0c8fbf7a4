"""Voting session endpoints."""

from fastapi import APIRouter, Depends, Response, status

from cafeteria_voting.api.dependencies import get_container, require_staff
from cafeteria_voting.api.models import (
    MenuItemResponse,
    SessionMenuItemRequest,
    SessionMenuItemResponse,
    VotingSessionCreateRequest,
    VotingSessionResponse,
    VotingSessionUpdateRequest,
)
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import MenuItem, SessionMenuItem, VotingSession

router = APIRouter(prefix="/api/voting-sessions", tags=["voting-sessions"])


@router.get("", response_model=list[VotingSessionResponse])
def list_voting_sessions(
    container: AppContainer = Depends(get_container),
) -> list[VotingSession]:
    return container.voting_session_service.list_voting_sessions()


@router.get("/active", response_model=list[VotingSessionResponse])
def list_active_voting_sessions(
    container: AppContainer = Depends(get_container),
) -> list[VotingSession]:
    return container.voting_session_service.list_active_voting_sessions()


@router.post(
    "",
    response_model=VotingSessionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
)
def create_voting_session(
    payload: VotingSessionCreateRequest,
    container: AppContainer = Depends(get_container),
) -> VotingSession:
    """Schedule a voting session. Staff only."""
    return container.voting_session_service.create_voting_session(
        payload.model_dump()
    )


@router.put(
    "/{session_id}",
    response_model=VotingSessionResponse,
    dependencies=[Depends(require_staff)],
)
def update_voting_session(
    session_id: str,
    payload: VotingSessionUpdateRequest,
    container: AppContainer = Depends(get_container),
) -> VotingSession:
    """Patch a session, e.g. to open or close voting. Staff only."""
    return container.voting_session_service.update_voting_session(
        session_id, payload.model_dump(exclude_unset=True)
    )


@router.get("/{session_id}/menu-items", response_model=list[MenuItemResponse])
def list_session_menu_items(
    session_id: str,
    container: AppContainer = Depends(get_container),
) -> list[MenuItem]:
    return container.voting_session_service.list_menu_items(session_id)


@router.post(
    "/{session_id}/menu-items",
    response_model=SessionMenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
)
def add_session_menu_item(
    session_id: str,
    payload: SessionMenuItemRequest,
    container: AppContainer = Depends(get_container),
) -> SessionMenuItem:
    """Offer a menu item in a session. Staff only."""
    return container.voting_session_service.add_menu_item(
        session_id, payload.menu_item_id
    )


@router.delete(
    "/{session_id}/menu-items/{menu_item_id}",
    dependencies=[Depends(require_staff)],
)
def remove_session_menu_item(
    session_id: str,
    menu_item_id: str,
    container: AppContainer = Depends(get_container),
) -> Response:
    container.voting_session_service.remove_menu_item(session_id, menu_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
