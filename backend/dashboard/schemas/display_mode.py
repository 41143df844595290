"""Display mode request/response schemas."""

from pydantic import BaseModel

from dashboard.models.display_mode import DisplayPreference, EffectiveMode


class DisplayModeResponse(BaseModel):
    preference: DisplayPreference
    system_signal: EffectiveMode
    effective_mode: EffectiveMode
    label: str
    palette: dict[str, dict[str, str]]


class PreferenceUpdate(BaseModel):
    # Plain str so an unknown value reaches the resolver and its own error.
    preference: str


class SystemSignalUpdate(BaseModel):
    prefers_dark: bool
