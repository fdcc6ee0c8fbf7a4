"""Admin API endpoints with simple token auth."""

from fastapi import APIRouter, Depends, Header, HTTPException, status

from cafeteria_voting.api.dependencies import get_container
from cafeteria_voting.api.models import UserResponse, UserUpsertRequest
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import UserRecord

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(container: AppContainer = Depends(get_container)) -> str | None:
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str | None = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not admin_token or not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
def list_users(
    container: AppContainer = Depends(get_container),
) -> dict[str, list[UserResponse]]:
    """Return every registered user."""
    return {
        "users": [
            UserResponse.model_validate(user, from_attributes=True)
            for user in container.user_service.list_users()
        ]
    }


@router.put(
    "/users", response_model=UserResponse, dependencies=[Depends(require_admin)]
)
def upsert_user(
    payload: UserUpsertRequest,
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Create a user, or merge the given fields into an existing one."""
    fields = payload.model_dump(exclude_unset=True, exclude={"id"})
    return container.user_service.upsert_user(fields, user_id=payload.id)
