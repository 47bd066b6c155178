"""
Location serializer.

Document shape::

    {"world": {"name": "world"}, "x": 1.5, "y": 64.0, "z": -3.0,
     "pitch": 0.0, "yaw": 90.0}
"""

from typing import Any, Dict

from ..core.models import Location


class JsonLocationSerializer:
    """Converts ``Location`` objects to and from documents."""

    def serialize(self, location: Location) -> Dict[str, Any]:
        return {
            "world": {"name": location.world},
            "x": location.x,
            "y": location.y,
            "z": location.z,
            "pitch": location.pitch,
            "yaw": location.yaw,
        }

    def deserialize(self, data: Dict[str, Any]) -> Location:
        """
        Create a location from a document.

        Raises:
            ValueError: If the world or a coordinate is missing or malformed
        """
        try:
            world = data["world"]
            world_name = world["name"] if isinstance(world, dict) else world
            return Location(
                world=str(world_name),
                x=float(data["x"]),
                y=float(data["y"]),
                z=float(data["z"]),
                yaw=float(data.get("yaw", 0.0)),
                pitch=float(data.get("pitch", 0.0)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid location document: {e!r}") from e
