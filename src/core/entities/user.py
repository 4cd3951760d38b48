"""Session user entity."""

from enum import Enum

from pydantic import BaseModel


class UserRole(str, Enum):
    """Roles known to the dashboard."""

    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    """The actor behind a session."""

    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


DEMO_USERS: list[User] = [
    User(id="1", name="Admin User", email="admin@inventory.com", role=UserRole.ADMIN),
    User(id="2", name="Regular User", email="user@inventory.com", role=UserRole.USER),
]
