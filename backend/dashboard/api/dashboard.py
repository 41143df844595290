"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from dashboard.core.deps import get_current_user, get_inventory_store
from dashboard.schemas.auth import CurrentUser
from dashboard.schemas.dashboard import DashboardSummary
from dashboard.services.dashboard import build_summary
from dashboard.services.inventory_store import InventoryStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    return build_summary(store)
