"""Tests for role checks."""

import pytest

from cafeteria_voting.domain.errors import ForbiddenError
from cafeteria_voting.domain.models import UserRecord
from cafeteria_voting.services.access import (
    check_role,
    require_staff,
    require_student,
)

STAFF = UserRecord(id="staff-1", role="staff")
STUDENT = UserRecord(id="student-1", role="student")


def test_check_role_allows_matching_role() -> None:
    decision = check_role(STAFF, "staff")

    assert decision.allowed
    assert decision.reason is None


def test_check_role_denies_other_role_with_reason() -> None:
    decision = check_role(STUDENT, "staff")

    assert not decision.allowed
    assert decision.reason == "Staff access required"


def test_check_role_denies_unresolved_user() -> None:
    assert not check_role(None, "student").allowed


def test_require_staff_and_student() -> None:
    assert require_staff(STAFF) == STAFF
    assert require_student(STUDENT) == STUDENT
    with pytest.raises(ForbiddenError, match="Student access required"):
        require_student(STAFF)
    with pytest.raises(ForbiddenError, match="Staff access required"):
        require_staff(None)
