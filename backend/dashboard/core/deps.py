"""Dependency injection: auth check and access to the app-scoped services."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from dashboard.core.security import decode_access_token
from dashboard.schemas.auth import CurrentUser
from dashboard.services.display_mode import DisplayModeResolver
from dashboard.services.inventory_store import InventoryStore
from dashboard.services.system_signal import ManualSystemSignalSource

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


async def get_current_user(token: str = Depends(oauth2_scheme)) -> CurrentUser:
    """Decode JWT and return CurrentUser. Raises 401 on invalid/expired token."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise credentials_exception
    email = payload.get("sub")
    if not email:
        raise credentials_exception
    return CurrentUser(email=email)


def get_inventory_store(request: Request) -> InventoryStore:
    return request.app.state.inventory_store


def get_display_mode_resolver(request: Request) -> DisplayModeResolver:
    return request.app.state.display_mode_resolver


def get_signal_source(request: Request) -> ManualSystemSignalSource:
    return request.app.state.signal_source
