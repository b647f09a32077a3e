"""
Exceptions raised by the inventory store.
"""


class InventoryError(Exception):
    """Base exception for inventory store errors."""
    pass


class StoreConnectionError(InventoryError):
    """The backing database could not be opened."""
    pass


class MigrationError(InventoryError):
    """Schema setup failed. Callers should treat this as fatal."""
    pass


class DuplicateError(InventoryError):
    """Insert violated a unique constraint."""

    def __init__(self, message: str = "record already exists"):
        super().__init__(message)


class NotFoundError(InventoryError):
    """Row does not exist. Reserved: lookups return empty lists instead."""

    def __init__(self, message: str = "row not exists"):
        super().__init__(message)


class StorageError(InventoryError):
    """Any other failure reported by the database engine."""
    pass


class InvalidRecordError(InventoryError, ValueError):
    """Input rejected before it reached the database."""
    pass
