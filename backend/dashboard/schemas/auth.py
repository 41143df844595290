"""Auth request/response schemas."""

from pydantic import BaseModel


# ── Login ──────────────────────────────────────────
class LoginRequest(BaseModel):
    # Demo login: any non-empty pair is accepted, so no format checks here.
    email: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    email: str


# ── Current User ───────────────────────────────────
class CurrentUser(BaseModel):
    email: str
