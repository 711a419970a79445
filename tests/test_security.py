"""
Tests for user id resolution
"""

import pytest
from fastapi import HTTPException

from fixup.core.roles import UserRole
from fixup.core.security import resolve_user_id
from fixup.core.tokens import UserData

CUSTOMER = UserData(id="42", role=UserRole.CUSTOMER, verified=True)
MODERATOR = UserData(id="5", role=UserRole.MODERATOR, verified=True)


def test_me_resolves_to_caller():
    assert resolve_user_id("me", CUSTOMER) == 42


def test_own_id_resolves():
    assert resolve_user_id("42", CUSTOMER) == 42


def test_other_id_needs_listed_role():
    with pytest.raises(HTTPException) as exc:
        resolve_user_id("7", CUSTOMER, UserRole.ADMIN)

    assert exc.value.status_code == 403


def test_listed_role_reaches_other_user():
    assert resolve_user_id("7", MODERATOR, UserRole.ADMIN, UserRole.MODERATOR) == 7


def test_invalid_id():
    with pytest.raises(HTTPException) as exc:
        resolve_user_id("seven", MODERATOR, UserRole.MODERATOR)

    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid id parameter"


@pytest.mark.parametrize("user_id", ["99999999999999999999", " 7", "7_0"])
def test_id_must_be_plain_int64(user_id):
    with pytest.raises(HTTPException) as exc:
        resolve_user_id(user_id, MODERATOR, UserRole.MODERATOR)

    assert exc.value.status_code == 400
