"""
Display mode endpoints.

Public (no token): the login page shows the same mode toggle as the
dashboard.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard.core.deps import get_display_mode_resolver, get_signal_source
from dashboard.core.errors import InvalidPreferenceError
from dashboard.models.display_mode import PALETTES, PREFERENCE_LABELS
from dashboard.schemas.display_mode import (
    DisplayModeResponse,
    PreferenceUpdate,
    SystemSignalUpdate,
)
from dashboard.services.display_mode import DisplayModeResolver
from dashboard.services.system_signal import ManualSystemSignalSource

router = APIRouter(prefix="/display-mode", tags=["display-mode"])


def _snapshot(resolver: DisplayModeResolver) -> DisplayModeResponse:
    effective = resolver.get_effective_mode()
    return DisplayModeResponse(
        preference=resolver.preference,
        system_signal=resolver.system_signal,
        effective_mode=effective,
        label=PREFERENCE_LABELS[resolver.preference],
        palette=PALETTES[effective],
    )


@router.get("", response_model=DisplayModeResponse)
async def get_display_mode(resolver: DisplayModeResolver = Depends(get_display_mode_resolver)):
    return _snapshot(resolver)


@router.put("", response_model=DisplayModeResponse)
async def set_display_mode(
    body: PreferenceUpdate,
    resolver: DisplayModeResolver = Depends(get_display_mode_resolver),
):
    try:
        resolver.set_preference(body.preference)
    except InvalidPreferenceError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _snapshot(resolver)


@router.post("/cycle", response_model=DisplayModeResponse)
async def cycle_display_mode(resolver: DisplayModeResolver = Depends(get_display_mode_resolver)):
    """Toggle button: system -> light -> dark -> system."""
    resolver.cycle()
    return _snapshot(resolver)


@router.post("/system-signal", response_model=DisplayModeResponse)
async def report_system_signal(
    body: SystemSignalUpdate,
    source: ManualSystemSignalSource = Depends(get_signal_source),
    resolver: DisplayModeResolver = Depends(get_display_mode_resolver),
):
    """The browser reports a prefers-color-scheme change."""
    source.set_prefers_dark(body.prefers_dark)
    return _snapshot(resolver)
