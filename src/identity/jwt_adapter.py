"""JWT-backed identity provider.

Issues signed access tokens at login and turns them back into actors on
every request. Tokens carry the user id (``sub``), email and role.
"""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from identity.port import ActorIdentity, AuthError, IdentityProvider
from identity.users import User, UserDirectory


class JwtIdentityProvider(IdentityProvider):
    def __init__(
        self,
        directory: UserDirectory,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=8),
    ) -> None:
        self.directory = directory
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue_token(self, user: User | ActorIdentity) -> str:
        user_id = user.id if isinstance(user, User) else user.user_id
        claims = {
            "sub": user_id,
            "email": user.email,
            "role": user.role,
            "exp": datetime.now(UTC) + self._expires_in,
            "type": "access",
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def login(self, email: str, password: str) -> tuple[User, str]:
        user = self.directory.validate_credentials(email, password)
        if user is None:
            raise AuthError("Invalid email or password")
        return user, self.issue_token(user)

    def authenticate(self, token: str) -> ActorIdentity:
        if not token:
            raise AuthError("Missing token")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise AuthError("Invalid or expired token") from exc

        if payload.get("type") != "access" or not payload.get("sub"):
            raise AuthError("Invalid token payload")

        user = self.directory.find_by_id(payload["sub"])
        if user is None:
            raise AuthError("User not found")

        return ActorIdentity(user_id=user.id, email=user.email, role=user.role)
