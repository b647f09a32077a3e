"""
Windshield record routes.
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_store
from ..db import InventoryStore, StockUpdate, WindshieldCreate

router = APIRouter(prefix="/windshields", tags=["windshields"])


@router.post("", status_code=201)
async def create_windshield(data: WindshieldCreate, store: InventoryStore = Depends(get_store)):
    """Create a windshield record."""
    record_id = await store.create_windshield_record(
        data.type,
        data.year,
        data.stock,
        data.brand_id,
        data.model_id
    )
    return {"id": record_id}


@router.put("/{windshield_id}/stock")
async def update_stock(
    windshield_id: int,
    data: StockUpdate,
    store: InventoryStore = Depends(get_store)
):
    """
    Overwrite the stock of a record.
    Unknown ids are not an error; "updated" is 0 in that case.
    """
    updated = await store.update_stock(windshield_id, data.stock)
    return {"updated": updated}
