"""FastAPI endpoints for logging in and inspecting the current user."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from identity.api.dependencies import current_actor, get_identity_provider
from identity.api.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    TokenResponse,
    UserResponse,
)
from identity.jwt_adapter import JwtIdentityProvider
from identity.port import ActorIdentity, AuthError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, provider: JwtIdentityProvider = Depends(get_identity_provider)) -> LoginResponse:
    try:
        user, token = provider.login(body.email, body.password)
    except AuthError as exc:
        logger.info("login_failed", email=body.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    logger.info("login_succeeded", user_id=user.id, role=user.role)
    return LoginResponse(user=UserResponse(**user.public_profile()), token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout() -> MessageResponse:
    # Tokens are stateless; the client discards its copy.
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def me(
    actor: ActorIdentity = Depends(current_actor),
    provider: JwtIdentityProvider = Depends(get_identity_provider),
) -> UserResponse:
    user = provider.directory.find_by_id(actor.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse(**user.public_profile())


@router.post("/refresh", response_model=TokenResponse)
async def refresh(
    actor: ActorIdentity = Depends(current_actor),
    provider: JwtIdentityProvider = Depends(get_identity_provider),
) -> TokenResponse:
    return TokenResponse(token=provider.issue_token(actor))
