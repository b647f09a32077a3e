"""
Brand routes.
"""

from typing import List
from fastapi import APIRouter, Depends

from ..dependencies import get_store
from ..db import Brand, BrandCreate, InventoryStore, VehicleModel

router = APIRouter(prefix="/brands", tags=["brands"])


@router.get("", response_model=List[Brand])
async def list_brands(store: InventoryStore = Depends(get_store)):
    """List all brands."""
    return await store.get_all_brands()


@router.post("", status_code=201)
async def create_brand(data: BrandCreate, store: InventoryStore = Depends(get_store)):
    """Create a brand. Duplicate names give 409."""
    brand_id = await store.create_brand(data.name)
    return {"id": brand_id}


@router.get("/{brand_id}/models", response_model=List[VehicleModel])
async def list_brand_models(brand_id: int, store: InventoryStore = Depends(get_store)):
    """List the models of a brand. Unknown brands give an empty list."""
    return await store.get_models_by_brand_id(brand_id)
