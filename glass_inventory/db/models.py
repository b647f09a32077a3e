"""
Pydantic models for inventory entities.
Row models mirror the SQLite tables; *Create models validate API input.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class WindshieldType(str, Enum):
    """Glass part position. L/R = left/right, F/B = front/back."""
    LFDOOR = "LFDOOR"
    RFDOOR = "RFDOOR"
    LBDOOR = "LBDOOR"
    RBDOOR = "RBDOOR"
    WINDSHIELD = "WINDSHIELD"
    LFVENT = "LFVENT"
    RFVENT = "RFVENT"
    LBVENT = "LBVENT"
    RBVENT = "RBVENT"
    LBQUARTER = "LBQUARTER"
    RBQUARTER = "RBQUARTER"
    BACK = "BACK"


class Brand(BaseModel):
    """A vehicle manufacturer."""
    id: int
    name: str


class VehicleModel(BaseModel):
    """A vehicle line belonging to one brand."""
    id: int
    name: str
    brand_id: int


class VehicleModelWithBrand(VehicleModel):
    """A vehicle model joined with its brand's name."""
    brand_name: str


class WindshieldRecord(BaseModel):
    """Stock entry for one glass part of one vehicle model."""
    model_config = ConfigDict(protected_namespaces=())

    id: int
    type: WindshieldType
    year: str  # free text, e.g. "2015" or "2015-2019"
    stock: int
    brand_id: int
    model_id: int


class BrandCreate(BaseModel):
    """Input for creating a brand."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)


class VehicleModelCreate(BaseModel):
    """Input for creating a vehicle model."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    brand_id: int


class WindshieldCreate(BaseModel):
    """Input for creating a windshield record."""
    model_config = ConfigDict(protected_namespaces=())

    type: WindshieldType
    year: str
    stock: int = Field(default=0, ge=0)
    brand_id: int
    model_id: int


class StockUpdate(BaseModel):
    """Input for overwriting a record's stock."""
    stock: int = Field(ge=0)
