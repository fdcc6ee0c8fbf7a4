"""Authentication endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Request

from cafeteria_voting.api.dependencies import get_container, resolve_identity
from cafeteria_voting.api.models import StudentLoginRequest, UserResponse
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.errors import BadRequestError
from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services.identity import ResolvedIdentity

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/user", response_model=UserResponse | None)
def current_user(
    identity: ResolvedIdentity = Depends(resolve_identity),
) -> UserRecord | None:
    """Return the user the request resolves to, or null."""
    return identity.user


@router.post("/student-login", response_model=UserResponse)
def student_login(
    payload: StudentLoginRequest,
    request: Request,
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Log a student in with student id and birth date."""
    if not payload.student_id or not payload.birth_date:
        raise BadRequestError("Student ID and birth date required")
    client_host = request.client.host if request.client else None
    return container.student_login_service.login(
        client_host=client_host,
        student_id=payload.student_id,
        birth_date=_parse_birth_date(payload.birth_date),
    )


def _parse_birth_date(raw: str) -> date:
    """Accept a plain date or the date part of an ISO timestamp."""
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError as exc:
        raise BadRequestError("Invalid birth date") from exc
