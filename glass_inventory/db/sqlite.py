"""
SQLite inventory store.
One parameterized statement per operation, no abstraction layers.
"""

import logging
import os
from typing import Any, List, Optional, Sequence, Union

import aiosqlite

from .errors import (
    DuplicateError, InvalidRecordError, MigrationError,
    StorageError, StoreConnectionError
)
from .models import (
    Brand, VehicleModel, VehicleModelWithBrand, WindshieldRecord, WindshieldType
)

logger = logging.getLogger(__name__)

SUPPORTED_DRIVERS = ("sqlite", "sqlite3")

CREATE_BRAND_TABLE = """
    CREATE TABLE IF NOT EXISTS brand (
        id INTEGER PRIMARY KEY NOT NULL,
        name TEXT UNIQUE NOT NULL
    )
"""

CREATE_MODEL_TABLE = """
    CREATE TABLE IF NOT EXISTS model (
        id INTEGER PRIMARY KEY NOT NULL,
        name TEXT UNIQUE NOT NULL,
        brand_id INTEGER NOT NULL,
        UNIQUE(id, brand_id),
        FOREIGN KEY (brand_id) REFERENCES brand(id) ON DELETE CASCADE
    )
"""

CREATE_WINDSHIELD_TABLE = """
    CREATE TABLE IF NOT EXISTS windshield (
        id INTEGER PRIMARY KEY NOT NULL,
        type TEXT NOT NULL,
        year TEXT NOT NULL,
        stock INTEGER NOT NULL,
        brand_id INTEGER NOT NULL,
        model_id INTEGER NOT NULL,
        UNIQUE(id, model_id),
        FOREIGN KEY (model_id) REFERENCES model(id) ON DELETE CASCADE,
        FOREIGN KEY (brand_id) REFERENCES brand(id) ON DELETE CASCADE
    )
"""

# Order matters: each table references the ones before it.
SCHEMA = (
    ("brand", CREATE_BRAND_TABLE),
    ("model", CREATE_MODEL_TABLE),
    ("windshield", CREATE_WINDSHIELD_TABLE),
)


def _is_unique_violation(error: aiosqlite.IntegrityError) -> bool:
    """True if the integrity error came from a UNIQUE constraint."""
    # sqlite_errorname only exists on Python 3.11+
    name = getattr(error, "sqlite_errorname", None)
    if name is not None:
        return name == "SQLITE_CONSTRAINT_UNIQUE"
    return str(error).startswith("UNIQUE constraint failed")


class InventoryStore:
    """SQLite store for brands, vehicle models and windshield records."""

    def __init__(
        self,
        datasource: str,
        driver: str = "sqlite",
        log: Optional[logging.Logger] = None
    ):
        self.datasource = datasource
        self.driver = driver
        self.log = log or logger
        self._connection: Optional[aiosqlite.Connection] = None

    async def __aenter__(self) -> "InventoryStore":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create the database connection."""
        if self._connection is not None:
            return self._connection

        if self.driver not in SUPPORTED_DRIVERS:
            raise StoreConnectionError(f"Unsupported driver: {self.driver}")

        if os.path.isdir(self.datasource):
            raise StoreConnectionError(f"Path points to a directory, expected file: {self.datasource}")

        is_uri = self.datasource.startswith("file:")
        if not is_uri and self.datasource != ":memory:":
            try:
                os.makedirs(os.path.dirname(self.datasource) or ".", exist_ok=True)
            except OSError as e:
                raise StoreConnectionError(f"Cannot open {self.datasource}: {e}") from e

        try:
            # isolation_level=None: autocommit, transactions only where we BEGIN explicitly
            connection = await aiosqlite.connect(
                self.datasource, isolation_level=None, uri=is_uri
            )
        except aiosqlite.Error as e:
            raise StoreConnectionError(f"Cannot open {self.datasource}: {e}") from e

        try:
            connection.row_factory = aiosqlite.Row
            await connection.execute("PRAGMA foreign_keys = ON")
        except aiosqlite.Error as e:
            await connection.close()
            raise StoreConnectionError(f"Cannot open {self.datasource}: {e}") from e

        self._connection = connection
        return connection

    async def open(self) -> None:
        """Open the connection eagerly so connection problems surface here."""
        await self._get_connection()

    async def close(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    # ===== Schema =====

    async def migrate(self) -> None:
        """
        Create all tables in one transaction.

        Raises MigrationError if any statement fails; the transaction is
        rolled back so no partial schema is left behind.
        """
        conn = await self._get_connection()

        try:
            # Has no effect inside a transaction, so it runs first.
            await conn.execute("PRAGMA foreign_keys = ON")
            self.log.info("setting pragma")

            await conn.execute("BEGIN")
            for table, statement in SCHEMA:
                await conn.execute(statement)
                self.log.info(f"setting {table} table")
            await conn.execute("COMMIT")
        except aiosqlite.Error as e:
            self.log.error(f"Migration failed: {e}")
            if conn.in_transaction:
                await conn.execute("ROLLBACK")
            raise MigrationError(str(e)) from e

    # ===== Helper Methods =====

    async def _insert(self, sql: str, params: Sequence[Any]) -> int:
        """Run an INSERT and return the new row id."""
        conn = await self._get_connection()
        try:
            cursor = await conn.execute(sql, params)
        except aiosqlite.IntegrityError as e:
            if _is_unique_violation(e):
                raise DuplicateError() from e
            raise StorageError(str(e)) from e
        except aiosqlite.Error as e:
            raise StorageError(str(e)) from e
        return cursor.lastrowid

    async def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[aiosqlite.Row]:
        conn = await self._get_connection()
        try:
            cursor = await conn.execute(sql, params)
            return list(await cursor.fetchall())
        except aiosqlite.Error as e:
            raise StorageError(str(e)) from e

    @staticmethod
    def _check_year(year: str) -> str:
        if not isinstance(year, str):
            raise InvalidRecordError(f"Year must be text, got {year!r}")
        return year

    @staticmethod
    def _check_stock(stock: int) -> int:
        if isinstance(stock, bool) or not isinstance(stock, int):
            raise InvalidRecordError(f"Stock must be an integer, got {stock!r}")
        if stock < 0:
            raise InvalidRecordError(f"Stock cannot be negative: {stock}")
        return stock

    # ===== Create Operations =====

    async def create_brand(self, name: str) -> int:
        return await self._insert("INSERT INTO brand (name) VALUES (?)", (name,))

    async def create_model(self, name: str, brand_id: int) -> int:
        # A missing brand is a foreign key failure -> StorageError
        return await self._insert(
            "INSERT INTO model (name, brand_id) VALUES (?, ?)",
            (name, brand_id)
        )

    async def create_windshield_record(
        self,
        part_type: Union[WindshieldType, str],
        year: str,
        stock: int,
        brand_id: int,
        model_id: int
    ) -> int:
        """Insert a windshield record after validating part type and stock."""
        try:
            kind = WindshieldType(part_type)
        except ValueError as e:
            raise InvalidRecordError(f"Unknown windshield type: {part_type!r}") from e
        self._check_year(year)
        self._check_stock(stock)

        return await self._insert(
            """
            INSERT INTO windshield (type, year, stock, brand_id, model_id)
            VALUES (?, ?, ?, ?, ?)
            """,
            (kind.value, year, stock, brand_id, model_id)
        )

    # ===== Update Operations =====

    async def update_stock(self, windshield_id: int, stock: int) -> int:
        """
        Overwrite the stock of a windshield record.

        Returns the number of rows changed. An unknown id changes nothing
        and is not an error.
        """
        self._check_stock(stock)
        conn = await self._get_connection()
        try:
            cursor = await conn.execute(
                "UPDATE windshield SET stock = ? WHERE id = ?",
                (stock, windshield_id)
            )
        except aiosqlite.Error as e:
            raise StorageError(str(e)) from e
        return cursor.rowcount

    # ===== Query Operations =====

    async def get_all_brands(self) -> List[Brand]:
        rows = await self._fetch_all("SELECT id, name FROM brand ORDER BY id")
        return [Brand(**dict(row)) for row in rows]

    async def get_models_by_brand_id(self, brand_id: int) -> List[VehicleModel]:
        rows = await self._fetch_all(
            "SELECT id, name, brand_id FROM model WHERE brand_id = ? ORDER BY id",
            (brand_id,)
        )
        return [VehicleModel(**dict(row)) for row in rows]

    async def get_models_by_brand_name(self, name: str) -> List[VehicleModelWithBrand]:
        rows = await self._fetch_all(
            """
            SELECT m.id, m.name, m.brand_id, b.name AS brand_name
            FROM model m
            JOIN brand b ON m.brand_id = b.id
            WHERE b.name = ?
            ORDER BY m.id
            """,
            (name,)
        )
        return [VehicleModelWithBrand(**dict(row)) for row in rows]

    async def get_windshields_by_model_id(self, model_id: int) -> List[WindshieldRecord]:
        rows = await self._fetch_all(
            """
            SELECT id, type, year, stock, brand_id, model_id
            FROM windshield WHERE model_id = ? ORDER BY id
            """,
            (model_id,)
        )
        return [WindshieldRecord(**dict(row)) for row in rows]


async def open_store(
    driver: str,
    datasource: str,
    log: Optional[logging.Logger] = None
) -> InventoryStore:
    """Create a store and open its connection. Raises StoreConnectionError."""
    store = InventoryStore(datasource, driver=driver, log=log)
    await store.open()
    return store
