"""
Tests for profile management
"""

import io
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from conftest import FakePgError
from fixup.core.hasher import PasswordMismatchError
from fixup.schemas.user import PasswordChange, UserUpdate
from fixup.services.errors import EmailTakenError, IncorrectPasswordError, NotFoundError
from fixup.services.user import UserService


@pytest.fixture
def parts():
    return {
        "repository": MagicMock(),
        "storage": MagicMock(),
        "invalidator": MagicMock(),
        "url_signer": MagicMock(),
        "hasher": MagicMock(),
    }


@pytest.fixture
def service(parts):
    return UserService(**parts)


def test_get_user_signs_picture_url(service, parts, user_entity):
    user_entity.picture = "pfp/abc"
    parts["repository"].get.return_value = user_entity
    parts["url_signer"].sign_url.return_value = "https://cdn/pfp/abc?Signature=x"

    user = service.get(42)

    assert user.picture_url == "https://cdn/pfp/abc?Signature=x"
    parts["url_signer"].sign_url.assert_called_once_with("pfp/abc")


def test_get_user_without_picture(service, parts, user_entity):
    parts["repository"].get.return_value = user_entity

    user = service.get(42)

    assert user.picture_url is None
    parts["url_signer"].sign_url.assert_not_called()


def test_get_missing_user(service, parts):
    parts["repository"].get.return_value = None

    with pytest.raises(NotFoundError, match="User not found"):
        service.get(42)


def test_update_personal_info(service, parts, user_entity):
    user_entity.first_name = "Nana"
    parts["repository"].update.return_value = user_entity

    info = service.update_personal_info(42, UserUpdate(first_name="Nana"))

    assert info.first_name == "Nana"
    parts["repository"].update.assert_called_once_with(42, {"first_name": "Nana"})


def test_update_personal_info_email_taken(service, parts):
    parts["repository"].update.side_effect = IntegrityError("UPDATE", {}, FakePgError("23505"))

    with pytest.raises(EmailTakenError):
        service.update_personal_info(42, UserUpdate(email="taken@example.com"))


def test_update_picture_replaces_old_one(service, parts, user_entity):
    user_entity.picture = "pfp/old"
    parts["repository"].get.return_value = user_entity
    parts["repository"].update_picture.return_value = True
    parts["storage"].put_object.return_value = "pfp/new"
    file = io.BytesIO(b"image")

    service.update_picture(42, file, "image/png")

    parts["storage"].put_object.assert_called_once_with(file, "pfp/", "image/png")
    parts["repository"].update_picture.assert_called_once_with(42, "pfp/new")
    parts["storage"].delete_object.assert_called_once_with("pfp/old")
    parts["invalidator"].invalidate_file.assert_called_once_with("pfp/old")


def test_first_picture_skips_cleanup(service, parts, user_entity):
    parts["repository"].get.return_value = user_entity
    parts["repository"].update_picture.return_value = True
    parts["storage"].put_object.return_value = "pfp/new"

    service.update_picture(42, io.BytesIO(b"image"), "image/jpeg")

    parts["storage"].delete_object.assert_not_called()
    parts["invalidator"].invalidate_file.assert_not_called()


def test_update_password(service, parts, user_entity):
    parts["repository"].get.return_value = user_entity
    parts["hasher"].hash_password.return_value = "new-hash"

    service.update_password(42, PasswordChange(old_password="Sup3r$ecret", new_password="N3w$ecret"))

    parts["hasher"].verify_password.assert_called_once_with("Sup3r$ecret", "stored-hash")
    parts["repository"].update_hash.assert_called_once_with(42, "new-hash")


def test_update_password_with_wrong_old_password(service, parts, user_entity):
    parts["repository"].get.return_value = user_entity
    parts["hasher"].verify_password.side_effect = PasswordMismatchError()

    with pytest.raises(IncorrectPasswordError):
        service.update_password(42, PasswordChange(old_password="Wr0ng$ecret", new_password="N3w$ecret"))

    parts["repository"].update_hash.assert_not_called()


def test_delete_user_removes_picture(service, parts, user_entity):
    user_entity.picture = "pfp/old"
    parts["repository"].get.return_value = user_entity
    parts["repository"].delete.return_value = True

    service.delete(42)

    parts["storage"].delete_object.assert_called_once_with("pfp/old")
    parts["invalidator"].invalidate_file.assert_called_once_with("pfp/old")
    parts["repository"].delete.assert_called_once_with(42)


def test_delete_missing_user(service, parts):
    parts["repository"].get.return_value = None

    with pytest.raises(NotFoundError):
        service.delete(42)

    parts["repository"].delete.assert_not_called()
