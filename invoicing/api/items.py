# invoicing/api/items.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from invoicing.db.store import ItemStore
from invoicing.dependencies import get_item_store
from invoicing.models.invoices import InvoiceItem
from invoicing.models.items import ItemIn, ItemOut, ItemUpdate
from invoicing.totals import line_from_catalog

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=List[ItemOut])
def list_items(store: ItemStore = Depends(get_item_store)) -> List[ItemOut]:
    return store.list()


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: int, store: ItemStore = Depends(get_item_store)) -> ItemOut:
    item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.get("/{item_id}/line-item", response_model=InvoiceItem)
def catalog_line_item(
    item_id: int,
    quantity: float = Query(1, ge=1, allow_inf_nan=False),
    store: ItemStore = Depends(get_item_store),
) -> InvoiceItem:
    """
    An invoice line pre-filled from the catalog item, ready to be edited.
    """
    item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return line_from_catalog(item, quantity)


@router.post("", response_model=ItemOut, status_code=201)
def create_item(payload: ItemIn, store: ItemStore = Depends(get_item_store)) -> ItemOut:
    return store.create(payload)


@router.put("/{item_id}", response_model=ItemOut)
def update_item(
    item_id: int,
    payload: ItemUpdate,
    store: ItemStore = Depends(get_item_store),
) -> ItemOut:
    item = store.update(item_id, payload)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.delete("/{item_id}", status_code=204, response_class=Response)
def delete_item(item_id: int, store: ItemStore = Depends(get_item_store)) -> Response:
    store.delete(item_id)
    return Response(status_code=204)
