"""
Tests for /v1/users routes
"""

from datetime import datetime
from unittest.mock import ANY

from fixup.schemas.user import PersonalInfoResponse, UserResponse
from fixup.services.errors import EmailTakenError, IncorrectPasswordError, NotFoundError

PASSWORDS = {"old_password": "Sup3r$ecret", "new_password": "N3w$ecret1"}


def user_response(user_id="42"):
    return UserResponse(
        id=user_id,
        first_name="Nino",
        last_name="Beridze",
        phone_number="995555123456",
        email="nino@example.com",
        picture_url="https://cdn.example.com/pfp/abc?Signature=x",
        role="CUSTOMER",
        user_status=True,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
    )


def test_get_me(user_client, customer_headers):
    client, services = user_client
    services["user"].get.return_value = user_response()

    res = client.get("/v1/users/me", headers=customer_headers)

    assert res.status_code == 200
    assert res.json()["data"]["picture_url"].startswith("https://cdn.example.com/")
    services["user"].get.assert_called_once_with(42)


def test_get_self_by_id(user_client, unverified_headers):
    client, services = user_client
    services["user"].get.return_value = user_response()

    res = client.get("/v1/users/42", headers=unverified_headers)

    assert res.status_code == 200
    services["user"].get.assert_called_once_with(42)


def test_get_other_user_forbidden(user_client, customer_headers):
    client, services = user_client

    res = client.get("/v1/users/7", headers=customer_headers)

    assert res.status_code == 403
    assert res.json() == {"message": "Insufficient rights", "status": 403}
    services["user"].get.assert_not_called()


def test_admin_gets_other_user(user_client, admin_headers):
    client, services = user_client
    services["user"].get.return_value = user_response("7")

    res = client.get("/v1/users/7", headers=admin_headers)

    assert res.status_code == 200
    services["user"].get.assert_called_once_with(7)


def test_admin_gets_invalid_id(user_client, admin_headers):
    client, _ = user_client

    res = client.get("/v1/users/abc", headers=admin_headers)

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid id parameter"


def test_get_missing_user(user_client, admin_headers):
    client, services = user_client
    services["user"].get.side_effect = NotFoundError("User not found")

    res = client.get("/v1/users/7", headers=admin_headers)

    assert res.status_code == 404


def test_token_from_cookie(user_client, customer_headers):
    client, services = user_client
    services["user"].get.return_value = user_response()
    token = customer_headers["Authorization"].split(" ", 1)[1]
    client.cookies.set("access_token", token)

    res = client.get("/v1/users/me")

    assert res.status_code == 200


def test_update_user(user_client, customer_headers):
    client, services = user_client
    services["user"].update_personal_info.return_value = PersonalInfoResponse(
        first_name="Nana",
        last_name="Beridze",
        phone_number="995555123456",
        email="nino@example.com",
    )

    res = client.patch("/v1/users/me", json={"first_name": "Nana"}, headers=customer_headers)

    assert res.status_code == 200
    assert res.json()["data"]["first_name"] == "Nana"
    user_id, dto = services["user"].update_personal_info.call_args.args
    assert user_id == 42
    assert dto.model_dump(exclude_unset=True) == {"first_name": "Nana"}


def test_update_user_without_changes(user_client, customer_headers):
    client, services = user_client

    res = client.patch("/v1/users/me", json={}, headers=customer_headers)

    assert res.status_code == 400
    assert res.json()["message"] == "No changes"
    services["user"].update_personal_info.assert_not_called()


def test_update_user_email_taken(user_client, customer_headers):
    client, services = user_client
    services["user"].update_personal_info.side_effect = EmailTakenError()

    res = client.patch("/v1/users/me", json={"email": "taken@example.com"}, headers=customer_headers)

    assert res.status_code == 409
    assert res.json()["message"] == "User email is taken"


def test_update_user_requires_verification(user_client, unverified_headers):
    client, services = user_client

    res = client.patch("/v1/users/me", json={"first_name": "Nana"}, headers=unverified_headers)

    assert res.status_code == 403
    assert res.json()["message"] == "User is not verified"


def test_upload_picture(user_client, customer_headers):
    client, services = user_client

    res = client.patch(
        "/v1/users/me/pfp",
        files={"image": ("avatar.png", b"\x89PNG", "image/png")},
        headers=customer_headers,
    )

    assert res.status_code == 204
    services["user"].update_picture.assert_called_once_with(42, ANY, "image/png")


def test_upload_picture_wrong_type(user_client, customer_headers):
    client, services = user_client

    res = client.patch(
        "/v1/users/me/pfp",
        files={"image": ("avatar.gif", b"GIF89a", "image/gif")},
        headers=customer_headers,
    )

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid file type: image/gif, for file: avatar.gif"
    services["user"].update_picture.assert_not_called()


def test_upload_picture_without_file(user_client, customer_headers):
    client, services = user_client

    res = client.patch("/v1/users/me/pfp", headers=customer_headers)

    assert res.status_code == 400
    assert res.json()["message"] == "No file provided"


def test_change_password(user_client, customer_headers):
    client, services = user_client

    res = client.patch("/v1/users/me/change-password", json=PASSWORDS, headers=customer_headers)

    assert res.status_code == 204
    services["user"].update_password.assert_called_once()


def test_change_password_incorrect(user_client, customer_headers):
    client, services = user_client
    services["user"].update_password.side_effect = IncorrectPasswordError()

    res = client.patch("/v1/users/me/change-password", json=PASSWORDS, headers=customer_headers)

    assert res.status_code == 401
    assert res.json() == {"message": "Password is incorrect", "status": 401}


def test_admin_cannot_change_other_password(user_client, admin_headers):
    client, services = user_client

    res = client.patch("/v1/users/7/change-password", json=PASSWORDS, headers=admin_headers)

    assert res.status_code == 403
    services["user"].update_password.assert_not_called()


def test_delete_me(user_client, customer_headers):
    client, services = user_client

    res = client.delete("/v1/users/me", headers=customer_headers)

    assert res.status_code == 204
    services["user"].delete.assert_called_once_with(42)


def test_delete_missing_user(user_client, admin_headers):
    client, services = user_client
    services["user"].delete.side_effect = NotFoundError("User not found")

    res = client.delete("/v1/users/7", headers=admin_headers)

    assert res.status_code == 404
