"""Request dependencies resolving the caller's identity."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from identity.jwt_adapter import JwtIdentityProvider
from identity.port import ActorIdentity, AuthError

bearer_scheme = HTTPBearer(auto_error=False)


def get_identity_provider(request: Request) -> JwtIdentityProvider:
    return request.app.state.identity_provider


def current_actor(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    provider: JwtIdentityProvider = Depends(get_identity_provider),
) -> ActorIdentity:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return provider.authenticate(credentials.credentials)
    except AuthError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
