"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Header, Request

from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services import access
from cafeteria_voting.services.identity import ResolvedIdentity


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def resolve_identity(
    x_user_id: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> ResolvedIdentity:
    """Attach the caller's identity to the request."""
    return container.identity_resolver.resolve(x_user_id)


def require_staff(
    identity: ResolvedIdentity = Depends(resolve_identity),
) -> UserRecord:
    """Allow only staff callers."""
    return access.require_staff(identity.user)


def require_student(
    identity: ResolvedIdentity = Depends(resolve_identity),
) -> UserRecord:
    """Allow only student callers."""
    return access.require_student(identity.user)
