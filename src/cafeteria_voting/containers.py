"""Dependency container wiring for the application."""

from dataclasses import dataclass

from cafeteria_voting.adapters.json_document_store import JsonDocumentStore
from cafeteria_voting.adapters.json_menu_item_repository import (
    JsonMenuItemRepository,
)
from cafeteria_voting.adapters.json_user_repository import JsonUserRepository
from cafeteria_voting.adapters.json_vote_repository import JsonVoteRepository
from cafeteria_voting.adapters.json_voting_session_repository import (
    JsonVotingSessionRepository,
)
from cafeteria_voting.config import Settings
from cafeteria_voting.services.auth import StudentLoginService
from cafeteria_voting.services.identity import IdentityResolver
from cafeteria_voting.services.menu_items import MenuItemService
from cafeteria_voting.services.rate_limit import LoginRateLimiter
from cafeteria_voting.services.users import UserService
from cafeteria_voting.services.votes import VoteService
from cafeteria_voting.services.voting_sessions import VotingSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: JsonDocumentStore
    user_service: UserService
    menu_item_service: MenuItemService
    voting_session_service: VotingSessionService
    vote_service: VoteService
    rate_limiter: LoginRateLimiter
    student_login_service: StudentLoginService
    identity_resolver: IdentityResolver


def build_container(
    settings: Settings | None = None, rate_limiter: LoginRateLimiter | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = JsonDocumentStore.open(resolved_settings.data_file)
    user_repository = JsonUserRepository(store)
    menu_item_repository = JsonMenuItemRepository(store)
    voting_session_repository = JsonVotingSessionRepository(store)
    vote_repository = JsonVoteRepository(store)
    user_service = UserService(user_repository)
    menu_item_service = MenuItemService(menu_item_repository)
    voting_session_service = VotingSessionService(
        repository=voting_session_repository,
        menu_item_repository=menu_item_repository,
    )
    vote_service = VoteService(
        repository=vote_repository,
        session_repository=voting_session_repository,
        menu_item_repository=menu_item_repository,
    )
    resolved_rate_limiter = rate_limiter or LoginRateLimiter(
        window_seconds=resolved_settings.login_rate_limit_window_seconds,
        max_attempts=resolved_settings.login_rate_limit_max_attempts,
        max_keys=resolved_settings.login_rate_limit_max_keys,
    )
    student_login_service = StudentLoginService(
        user_service=user_service,
        rate_limiter=resolved_rate_limiter,
    )
    identity_resolver = IdentityResolver(
        user_service=user_service,
        mode=resolved_settings.auth_mode,
        anonymous_user_id=resolved_settings.anonymous_user_id,
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        user_service=user_service,
        menu_item_service=menu_item_service,
        voting_session_service=voting_session_service,
        vote_service=vote_service,
        rate_limiter=resolved_rate_limiter,
        student_login_service=student_login_service,
        identity_resolver=identity_resolver,
    )
