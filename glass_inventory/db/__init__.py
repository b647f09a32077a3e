"""
Database package - SQLite only.
"""

from .errors import (
    InventoryError, StoreConnectionError, MigrationError, DuplicateError,
    NotFoundError, StorageError, InvalidRecordError
)
from .models import (
    WindshieldType, Brand, VehicleModel, VehicleModelWithBrand, WindshieldRecord,
    BrandCreate, VehicleModelCreate, WindshieldCreate, StockUpdate
)
from .sqlite import InventoryStore, open_store

__all__ = [
    "InventoryStore",
    "open_store",
    "WindshieldType",
    "Brand",
    "VehicleModel",
    "VehicleModelWithBrand",
    "WindshieldRecord",
    "BrandCreate",
    "VehicleModelCreate",
    "WindshieldCreate",
    "StockUpdate",
    "InventoryError",
    "StoreConnectionError",
    "MigrationError",
    "DuplicateError",
    "NotFoundError",
    "StorageError",
    "InvalidRecordError",
]
