"""
Inventory store core module.

Defines data models, exceptions and interfaces.
"""

from .models import (
    Document,
    GameMode,
    ProfileKey,
    Location,
    PlayerProfile,
    SaveResult,
)
from .exceptions import (
    InventoryStoreError,
    StorageError,
    DocumentParseError,
)
from .interfaces import (
    PlayerSerializer,
    LocationSerializer,
    DataSource,
)

__all__ = [
    # Models
    "Document",
    "GameMode",
    "ProfileKey",
    "Location",
    "PlayerProfile",
    "SaveResult",
    # Exceptions
    "InventoryStoreError",
    "StorageError",
    "DocumentParseError",
    # Interfaces
    "PlayerSerializer",
    "LocationSerializer",
    "DataSource",
]
