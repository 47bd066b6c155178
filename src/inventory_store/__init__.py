"""
Per-player inventory store

Persists player profiles, logout locations and per-world last locations as
JSON files, with a bounded cache in front of profile reads.

Components:
- core: models, interfaces, exceptions
- storage: file layout and the flat-file data source
- profile: profile document cache
- serialization: default player and location serializers
- config: settings model and YAML loader
"""

from .core.models import (
    Document,
    GameMode,
    ProfileKey,
    Location,
    PlayerProfile,
    SaveResult,
)
from .core.exceptions import (
    InventoryStoreError,
    StorageError,
    DocumentParseError,
)
from .core.interfaces import DataSource, PlayerSerializer, LocationSerializer
from .config import StoreConfig, load_config
from .profile.cache import ProfileCache
from .serialization import JsonLocationSerializer, JsonPlayerSerializer
from .storage.flat_file import FlatFileDataSource
from .factory import create_data_source

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
    "DataSource",
    "PlayerSerializer",
    "LocationSerializer",
    # Config
    "StoreConfig",
    "load_config",
    # Components
    "ProfileCache",
    "JsonLocationSerializer",
    "JsonPlayerSerializer",
    "FlatFileDataSource",
    "create_data_source",
]
