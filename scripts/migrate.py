#!/usr/bin/env python3
"""
Create the inventory schema in the configured database.
Run once after deployment: cd /path/to/app && python scripts/migrate.py

Exits with status 1 if the database cannot be opened or the schema fails.
"""

import asyncio
import logging
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from glass_inventory.config import settings
from glass_inventory.db import InventoryError, open_store
from glass_inventory.logging_setup import configure_logging

logger = logging.getLogger(__name__)


async def main() -> int:
    configure_logging(settings.log_level, settings.log_file)
    logger.info(f"Migrating {settings.database_path}...")

    try:
        store = await open_store(settings.database_driver, settings.database_path)
    except InventoryError as e:
        logger.error(f"Cannot open database: {e}")
        return 1

    try:
        await store.migrate()
    except InventoryError as e:
        logger.error(f"Migration failed: {e}")
        return 1
    finally:
        await store.close()

    logger.info("Migration complete")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
