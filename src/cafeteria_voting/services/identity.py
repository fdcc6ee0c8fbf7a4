"""Resolve the caller of a request to a user record."""

from dataclasses import dataclass
from typing import Literal

from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services.users import UserService

ANONYMOUS_USER_ID = "anonymous"

AuthMode = Literal["anonymous", "header"]


@dataclass(frozen=True)
class ResolvedIdentity:
    """The caller id and the matching user, when one exists."""

    user_id: str
    user: UserRecord | None

    @property
    def is_anonymous(self) -> bool:
        return self.user is None


@dataclass
class IdentityResolver:
    """Maps an incoming request to a user.

    ``anonymous`` mode treats every caller as the fixed placeholder id and
    must only be used on trusted networks. ``header`` mode trusts the
    caller-supplied user id.
    """

    user_service: UserService
    mode: AuthMode = "anonymous"
    anonymous_user_id: str = ANONYMOUS_USER_ID

    def resolve(self, claimed_user_id: str | None = None) -> ResolvedIdentity:
        user_id = self.anonymous_user_id
        if self.mode == "header" and claimed_user_id:
            user_id = claimed_user_id
        return ResolvedIdentity(
            user_id=user_id, user=self.user_service.get_user(user_id)
        )
