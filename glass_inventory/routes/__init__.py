"""
Routes package.
"""

from .brands import router as brands_router
from .models import router as models_router
from .windshields import router as windshields_router

__all__ = [
    "brands_router",
    "models_router",
    "windshields_router",
]
