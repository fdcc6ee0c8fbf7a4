"""Student login flow."""

import logging
from dataclasses import dataclass
from datetime import date

from cafeteria_voting.domain.errors import RateLimitedError
from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services.rate_limit import LoginRateLimiter
from cafeteria_voting.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class StudentLoginService:
    """Authenticates students by student id and birth date."""

    user_service: UserService
    rate_limiter: LoginRateLimiter

    def login(
        self, client_host: str | None, student_id: str, birth_date: date
    ) -> UserRecord:
        """Check the attempt budget, then match the credentials exactly."""
        key = self.rate_limiter.login_key(client_host, student_id)
        if not self.rate_limiter.check(key):
            logger.warning(
                "Student login rate limited",
                extra={"client_host": client_host, "student_id": student_id},
            )
            minutes = max(1, self.rate_limiter.window_seconds // 60)
            raise RateLimitedError(
                f"Too many login attempts. Please try again in {minutes} minutes."
            )
        return self.user_service.authenticate_student(student_id, birth_date)
