"""Tests for the demo SessionService."""

import pytest

from src.core.entities import UserRole
from src.core.exceptions import AuthenticationError, PermissionDeniedError
from src.core.services.session import SessionService


@pytest.fixture
def sessions():
    return SessionService(password="password123")


class TestLogin:
    def test_admin_login(self, sessions):
        user = sessions.login("admin@inventory.com", "password123")
        assert user.role == UserRole.ADMIN
        assert user.is_admin

    def test_email_is_case_insensitive(self, sessions):
        user = sessions.login("  User@Inventory.com ", "password123")
        assert user.id == "2"

    def test_wrong_password(self, sessions):
        with pytest.raises(AuthenticationError):
            sessions.login("admin@inventory.com", "nope")

    def test_unknown_user(self, sessions):
        with pytest.raises(AuthenticationError):
            sessions.login("ghost@inventory.com", "password123")


class TestResolve:
    def test_known_email(self, sessions):
        assert sessions.resolve("user@inventory.com").role == UserRole.USER

    @pytest.mark.parametrize("email", [None, "", "ghost@inventory.com"])
    def test_rejects_missing_or_unknown(self, sessions, email):
        with pytest.raises(AuthenticationError):
            sessions.resolve(email)


class TestRequireAdmin:
    def test_admin_passes(self, admin_user):
        SessionService.require_admin(admin_user, "delete commodities")

    def test_regular_user_denied(self, regular_user):
        with pytest.raises(PermissionDeniedError):
            SessionService.require_admin(regular_user, "delete commodities")
