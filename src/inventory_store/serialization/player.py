"""
Player profile serializer.

The data sections are copied as-is; they must already hold JSON values.
"""

from typing import Any, Dict
from uuid import UUID

from ..core.models import GameMode, PlayerProfile
from .location import JsonLocationSerializer


class JsonPlayerSerializer:
    """Converts ``PlayerProfile`` objects to and from documents."""

    def __init__(self, location_serializer: JsonLocationSerializer | None = None):
        self._location_serializer = location_serializer or JsonLocationSerializer()

    def serialize(self, profile: PlayerProfile) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "uuid": str(profile.uuid),
            "name": profile.name,
            "game_mode": profile.game_mode.value,
            "inventory": profile.inventory,
            "ender_chest": profile.ender_chest,
            "stats": profile.stats,
        }
        if profile.location is not None:
            data["location"] = self._location_serializer.serialize(profile.location)
        return data

    def deserialize(self, data: Dict[str, Any]) -> PlayerProfile:
        """
        Create a profile from a document.

        Raises:
            ValueError: If uuid, name or game mode are missing or malformed
        """
        try:
            location_data = data.get("location")
            return PlayerProfile(
                uuid=UUID(data["uuid"]),
                name=data["name"],
                game_mode=GameMode.from_string(data.get("game_mode", "survival")),
                location=(
                    self._location_serializer.deserialize(location_data)
                    if location_data
                    else None
                ),
                inventory=data.get("inventory", {}),
                ender_chest=data.get("ender_chest", {}),
                stats=data.get("stats", {}),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid player document: {e!r}") from e
