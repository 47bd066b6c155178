"""
Data file layout.

    {data_root}/
    └── {player uuid}/
        ├── {group}.json              (survival)
        ├── {group}_adventure.json
        ├── {group}_creative.json
        ├── {group}_spectator.json
        ├── last-logout.json
        └── last-locations.json
"""

from pathlib import Path
from uuid import UUID

from ..core.models import GameMode, ProfileKey

LOGOUT_FILE_NAME = "last-logout.json"
LOCATIONS_FILE_NAME = "last-locations.json"

_GAME_MODE_SUFFIXES = {
    GameMode.ADVENTURE: "_adventure",
    GameMode.CREATIVE: "_creative",
    GameMode.SPECTATOR: "_spectator",
    GameMode.SURVIVAL: "",
}


def game_mode_suffix(game_mode: GameMode) -> str:
    """File name suffix for a game mode; survival has none."""
    return _GAME_MODE_SUFFIXES[game_mode]


def player_dir(data_root: Path, player_uuid: UUID) -> Path:
    return Path(data_root) / str(player_uuid)


def profile_path(data_root: Path, key: ProfileKey) -> Path:
    """Data file for a profile key. Pure, touches nothing on disk."""
    file_name = f"{key.group_name}{game_mode_suffix(key.game_mode)}.json"
    return player_dir(data_root, key.uuid) / file_name


def logout_path(data_root: Path, player_uuid: UUID) -> Path:
    return player_dir(data_root, player_uuid) / LOGOUT_FILE_NAME


def locations_path(data_root: Path, player_uuid: UUID) -> Path:
    return player_dir(data_root, player_uuid) / LOCATIONS_FILE_NAME
