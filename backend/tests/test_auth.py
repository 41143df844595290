"""Unit tests for auth: token utils, demo login and the current-user dependency."""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from dashboard.core.config import settings
from dashboard.core.security import create_access_token, decode_access_token


# ── JWT ────────────────────────────────────────────

def test_create_and_decode_token():
    token = create_access_token("ops@example.com")
    payload = decode_access_token(token)
    assert payload["sub"] == "ops@example.com"
    assert "exp" in payload


def test_expired_token():
    token = create_access_token("ops@example.com", expires_delta=timedelta(seconds=-1))
    with pytest.raises(Exception):
        decode_access_token(token)


# ── Login ──────────────────────────────────────────

@pytest.mark.asyncio
async def test_login_accepts_any_non_empty_pair():
    from dashboard.api.auth import login
    from dashboard.schemas.auth import LoginRequest

    result = await login(LoginRequest(email=" anyone ", password="x"))

    assert result.email == "anyone"
    assert result.token_type == "bearer"
    assert decode_access_token(result.access_token)["sub"] == "anyone"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [("", "secret"), ("user@example.com", ""), ("   ", "secret"), ("user@example.com", "  ")],
)
async def test_login_rejects_empty_fields(email, password):
    from dashboard.api.auth import login
    from dashboard.schemas.auth import LoginRequest

    with pytest.raises(HTTPException) as exc_info:
        await login(LoginRequest(email=email, password=password))

    assert exc_info.value.status_code == 401


# ── Current user dependency ────────────────────────

@pytest.mark.asyncio
async def test_get_current_user_from_token():
    from dashboard.core.deps import get_current_user

    user = await get_current_user(token=create_access_token("ops@example.com"))
    assert user.email == "ops@example.com"


@pytest.mark.asyncio
async def test_get_current_user_rejects_bad_token():
    from dashboard.core.deps import get_current_user

    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(token="not-a-jwt")
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user_rejects_token_without_subject():
    from dashboard.core.deps import get_current_user

    token = jwt.encode({"foo": "bar"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(token=token)
    assert exc_info.value.status_code == 401
