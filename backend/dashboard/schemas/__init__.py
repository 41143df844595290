from dashboard.schemas.auth import LoginRequest, TokenResponse, CurrentUser
from dashboard.schemas.item import ItemFields, ItemResponse, ItemListResponse, StatusCounts
from dashboard.schemas.display_mode import DisplayModeResponse, PreferenceUpdate, SystemSignalUpdate
from dashboard.schemas.dashboard import DashboardSummary

__all__ = [
    "LoginRequest", "TokenResponse", "CurrentUser",
    "ItemFields", "ItemResponse", "ItemListResponse", "StatusCounts",
    "DisplayModeResponse", "PreferenceUpdate", "SystemSignalUpdate",
    "DashboardSummary",
]
