"""Authentication endpoints. Demo login: any non-empty email/password pair."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.core.deps import get_current_user
from dashboard.core.security import create_access_token
from dashboard.schemas.auth import CurrentUser, LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest):
    """Issue a JWT for any non-empty credential pair."""
    email = body.email.strip()
    if not email or not body.password.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please enter email and password",
        )
    logger.info("Login: %s", email)
    return TokenResponse(access_token=create_access_token(email), email=email)


@router.get("/me", response_model=CurrentUser)
async def get_me(current_user: CurrentUser = Depends(get_current_user)):
    return current_user
