"""In-memory user directory used for logging in.

Passwords are stored in plain text; these are demo accounts only.
"""

import hmac
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class UserRole(Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    OPERATOR = "operator"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    password: str = field(repr=False)
    name: str
    role: str
    created_at: datetime
    updated_at: datetime

    def public_profile(self) -> dict:
        """Everything except the password."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class UserDirectory:
    def __init__(self, users=()):
        self._users: dict[str, User] = {user.id: user for user in users}

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        email = email.lower()
        return next((user for user in self._users.values() if user.email.lower() == email), None)

    def validate_credentials(self, email: str, password: str) -> User | None:
        """Return the user when email and password match, else None."""
        user = self.find_by_email(email)
        if user is None:
            return None
        if not hmac.compare_digest(user.password.encode(), password.encode()):
            return None
        return user


def _demo_user(user_id, email, password, name, role, joined):
    return User(
        id=user_id,
        email=email,
        password=password,
        name=name,
        role=role.value,
        created_at=joined,
        updated_at=joined,
    )


DEMO_USERS = [
    _demo_user("1", "admin@warehouse.com", "admin123", "System Administrator", UserRole.ADMIN, datetime(2024, 1, 1, tzinfo=UTC)),
    _demo_user("2", "manager@warehouse.com", "manager123", "Warehouse Manager", UserRole.MANAGER, datetime(2024, 1, 15, tzinfo=UTC)),
    _demo_user("3", "operator@warehouse.com", "operator123", "Warehouse Operator", UserRole.OPERATOR, datetime(2024, 2, 1, tzinfo=UTC)),
    _demo_user("4", "demo@warehouse.com", "demo", "Demo User", UserRole.MANAGER, datetime(2024, 3, 1, tzinfo=UTC)),
]


def demo_directory() -> UserDirectory:
    return UserDirectory(DEMO_USERS)
