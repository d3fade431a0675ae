"""Identity provider port (abstract interface).

Defines the contract the rest of the system relies on to find out who is
making a request. Stock adjustments only need the resulting actor for
attribution; how the token was issued is the adapter's business.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class AuthError(Exception):
    """The presented credentials or token could not be accepted."""


@dataclass(frozen=True)
class ActorIdentity:
    """The authenticated user behind a request."""

    user_id: str
    email: str
    role: str

    def __str__(self) -> str:
        return self.email


class IdentityProvider(ABC):
    """Abstract identity provider interface."""

    @abstractmethod
    def authenticate(self, token: str) -> ActorIdentity:
        """Resolve a bearer token to an actor, or raise ``AuthError``."""
        ...
