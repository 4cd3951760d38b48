"""Demo session handling.

Identifies the acting user for the dashboard. This is not real
authentication: users are a fixed list sharing one configured password.
"""

from collections.abc import Sequence

from src.config import get_logger
from src.core.entities.user import DEMO_USERS, User
from src.core.exceptions import AuthenticationError, PermissionDeniedError

logger = get_logger(__name__)


class SessionService:
    """Looks up demo users and enforces the admin gate."""

    def __init__(self, password: str, users: Sequence[User] = DEMO_USERS) -> None:
        self._password = password
        self._users = {u.email.lower(): u for u in users}

    def login(self, email: str, password: str) -> User:
        user = self._users.get(email.strip().lower())
        if user is None or password != self._password:
            logger.warning("login_failed", email=email)
            raise AuthenticationError()
        logger.info("login_succeeded", user_id=user.id, role=user.role.value)
        return user

    def resolve(self, email: str | None) -> User:
        """User for a session header value."""
        if not email:
            raise AuthenticationError("Missing session user")
        user = self._users.get(email.strip().lower())
        if user is None:
            raise AuthenticationError(f"Unknown session user: {email}")
        return user

    @staticmethod
    def require_admin(user: User, action: str) -> None:
        if not user.is_admin:
            logger.warning("permission_denied", user_id=user.id, action=action)
            raise PermissionDeniedError(action)
