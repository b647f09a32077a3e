"""
Vehicle model routes.
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_store
from ..db import InventoryStore, VehicleModelCreate, VehicleModelWithBrand, WindshieldRecord

router = APIRouter(prefix="/models", tags=["models"])


@router.get("", response_model=List[VehicleModelWithBrand])
async def list_models_by_brand_name(
    brand_name: str = Query(...),
    store: InventoryStore = Depends(get_store)
):
    """List models whose brand has the given name."""
    return await store.get_models_by_brand_name(brand_name)


@router.post("", status_code=201)
async def create_model(data: VehicleModelCreate, store: InventoryStore = Depends(get_store)):
    """Create a model under an existing brand."""
    model_id = await store.create_model(data.name, data.brand_id)
    return {"id": model_id}


@router.get("/{model_id}/windshields", response_model=List[WindshieldRecord])
async def list_model_windshields(model_id: int, store: InventoryStore = Depends(get_store)):
    """List the windshield records of a model."""
    return await store.get_windshields_by_model_id(model_id)
