"""
Inventory store exceptions.
"""


class InventoryStoreError(Exception):
    """Base exception for the inventory store"""

    pass


class StorageError(InventoryStoreError):
    """A data file could not be created, read or written"""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class DocumentParseError(StorageError):
    """A data file exists but does not hold a JSON object"""

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(f"Could not parse '{path}': {reason}", path=path)
