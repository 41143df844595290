"""Item management endpoints over the in-memory inventory store."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from dashboard.core.deps import get_current_user, get_inventory_store
from dashboard.core.errors import ItemNotFoundError
from dashboard.schemas.auth import CurrentUser
from dashboard.schemas.item import ItemFields, ItemListResponse, ItemResponse
from dashboard.services.dashboard import status_counts
from dashboard.services.export import items_to_csv
from dashboard.services.inventory_store import InventoryStore

router = APIRouter(prefix="/items", tags=["items"])


def _not_found(e: ItemNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=ItemListResponse)
async def list_items(
    search: str = "",
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    """Items matching ``search`` in name or category, in insertion order."""
    items = store.search(search)
    return ItemListResponse(
        items=[ItemResponse.model_validate(item) for item in items],
        total=len(items),
        counts=status_counts(store),
    )


@router.get("/export")
async def export_items(
    search: str = "",
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    """Download the (filtered) item table as CSV."""
    return Response(
        content=items_to_csv(store.search(search)),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="items.csv"'},
    )


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    try:
        return ItemResponse.model_validate(store.get(item_id))
    except ItemNotFoundError as e:
        raise _not_found(e)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    body: ItemFields,
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    return ItemResponse.model_validate(store.add(body.model_dump()))


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: int,
    body: ItemFields,
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    """Full replace of name, category, price and stock."""
    try:
        return ItemResponse.model_validate(store.update(item_id, body.model_dump()))
    except ItemNotFoundError as e:
        raise _not_found(e)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    # Deleting an unknown id is not an error
    store.remove(item_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_items(
    current_user: CurrentUser = Depends(get_current_user),
    store: InventoryStore = Depends(get_inventory_store),
):
    store.clear()
