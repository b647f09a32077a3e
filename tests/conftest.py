"""
Shared fixtures. Store calls are async, so each test drives one event loop
through asyncio.run and does all of its work inside it.
"""

import asyncio
import os
import sqlite3

import pytest

# Keep test runs from writing a log file into the working tree.
os.environ.setdefault("LOG_FILE", "")

from glass_inventory.db import InventoryStore


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "inventory.db")


@pytest.fixture()
def with_store(db_path):
    """Run `scenario(store)` against a freshly migrated store and return its result."""
    def run(scenario):
        async def main():
            async with InventoryStore(db_path) as store:
                await store.migrate()
                return await scenario(store)
        return asyncio.run(main())
    return run


def count_rows(db_path: str, table: str) -> int:
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


def table_names(db_path: str) -> set:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()
