"""Role checks gating staff and student operations."""

from dataclasses import dataclass

from cafeteria_voting.domain.errors import ForbiddenError
from cafeteria_voting.domain.models import Role, UserRecord

_DENIAL_REASONS: dict[str, str] = {
    "staff": "Staff access required",
    "student": "Student access required",
}


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an access check."""

    allowed: bool
    reason: str | None = None


def check_role(user: UserRecord | None, role: Role) -> AccessDecision:
    """Allow only a resolved user holding the given role."""
    if user is None or user.role != role:
        return AccessDecision(allowed=False, reason=_DENIAL_REASONS[role])
    return AccessDecision(allowed=True)


def require_role(user: UserRecord | None, role: Role) -> UserRecord:
    """Return the user when allowed, otherwise raise ForbiddenError."""
    decision = check_role(user, role)
    if not decision.allowed or user is None:
        raise ForbiddenError(decision.reason)
    return user


def require_staff(user: UserRecord | None) -> UserRecord:
    return require_role(user, "staff")


def require_student(user: UserRecord | None) -> UserRecord:
    return require_role(user, "student")
