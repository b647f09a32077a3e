"""
FastAPI dependency injection.
The store is opened once on startup and handed to routes through get_store.
"""

from typing import Optional

from .config import settings
from .db import InventoryStore, open_store


# Global instance (initialized on startup)
_store: Optional[InventoryStore] = None


async def init_dependencies():
    """Open and migrate the store. Called on app startup."""
    global _store

    store = await open_store(settings.database_driver, settings.database_path)
    try:
        await store.migrate()
    except Exception:
        await store.close()
        raise
    _store = store


async def close_dependencies():
    """Close the store. Called on app shutdown."""
    global _store
    if _store:
        await _store.close()
        _store = None


def get_store() -> InventoryStore:
    """Get the store instance."""
    if _store is None:
        raise RuntimeError("Store not initialized")
    return _store
