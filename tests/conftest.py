"""
Pytest configuration and fixtures
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from fixup.api import deps
from fixup.core.roles import UserRole
from fixup.core.tokens import get_access_jwt_manager


def make_token(user_id="1", role=UserRole.ADMIN, verified=True):
    return get_access_jwt_manager().generate(user_id, role, verified)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


class FakePgError(Exception):
    def __init__(self, pgcode):
        super().__init__(pgcode)
        self.pgcode = pgcode


@pytest.fixture
def admin_headers():
    return bearer(make_token("1", UserRole.ADMIN, True))


@pytest.fixture
def customer_headers():
    return bearer(make_token("42", UserRole.CUSTOMER, True))


@pytest.fixture
def unverified_headers():
    return bearer(make_token("42", UserRole.CUSTOMER, False))


@pytest.fixture
def user_entity():
    """ORM-like user row."""
    return SimpleNamespace(
        id=42,
        first_name="Nino",
        last_name="Beridze",
        phone_number="995555123456",
        email="nino@example.com",
        picture=None,
        hash="stored-hash",
        role=UserRole.CUSTOMER,
        verified=False,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
    )


@pytest.fixture
def catalog_client():
    from fixup.catalog_main import app

    services = {
        "category_type": MagicMock(),
        "category": MagicMock(),
        "subcategory": MagicMock(),
    }
    app.dependency_overrides[deps.get_category_type_service] = lambda: services["category_type"]
    app.dependency_overrides[deps.get_category_service] = lambda: services["category"]
    app.dependency_overrides[deps.get_subcategory_service] = lambda: services["subcategory"]

    yield TestClient(app), services

    app.dependency_overrides.clear()


@pytest.fixture
def user_client():
    from fixup.user_main import app

    services = {"auth": MagicMock(), "user": MagicMock()}
    app.dependency_overrides[deps.get_auth_service] = lambda: services["auth"]
    app.dependency_overrides[deps.get_user_service] = lambda: services["user"]

    yield TestClient(app), services

    app.dependency_overrides.clear()
