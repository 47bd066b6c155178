"""
Storage module.

JSON file layout, document I/O and the flat-file data source.
"""

from .flat_file import FlatFileDataSource
from .paths import (
    game_mode_suffix,
    profile_path,
    logout_path,
    locations_path,
)

__all__ = [
    "FlatFileDataSource",
    "game_mode_suffix",
    "profile_path",
    "logout_path",
    "locations_path",
]
