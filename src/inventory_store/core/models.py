"""
Inventory store data models.

Profile keys, game modes, locations and the player profile handed to the
store by the host. Serialized documents are plain ``dict`` objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict
from uuid import UUID


# A parsed JSON object
Document = Dict[str, Any]


class GameMode(Enum):
    """Game modes that select a separate profile file."""

    ADVENTURE = "adventure"
    CREATIVE = "creative"
    SPECTATOR = "spectator"
    SURVIVAL = "survival"

    @classmethod
    def from_string(cls, value: str) -> "GameMode":
        """Create a GameMode from a string (case-insensitive)."""
        value_lower = value.lower()
        for mode in cls:
            if mode.value == value_lower:
                return mode
        raise ValueError(f"Unknown game mode: {value!r}")


@dataclass(frozen=True)
class ProfileKey:
    """Identifies one profile file: player, game mode and inventory group."""

    uuid: UUID
    game_mode: GameMode
    group_name: str

    def __str__(self) -> str:
        return f"{self.uuid}:{self.group_name}:{self.game_mode.value}"


@dataclass(frozen=True)
class Location:
    """A position in a named world."""

    world: str
    x: float
    y: float
    z: float
    yaw: float = 0.0
    pitch: float = 0.0


@dataclass
class PlayerProfile:
    """
    Inventory and state of one player in one (group, game mode) context.

    The data sections (``inventory``, ``ender_chest``, ``stats`` and so on) are
    opaque to the store; only the serializer looks inside them.
    """

    uuid: UUID
    name: str
    game_mode: GameMode = GameMode.SURVIVAL
    location: Location | None = None
    inventory: Dict[str, Any] = field(default_factory=dict)
    ender_chest: Dict[str, Any] = field(default_factory=dict)
    stats: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a write operation."""

    ok: bool
    path: Path
    error: BaseException | None = None

    @classmethod
    def success(cls, path: Path) -> "SaveResult":
        return cls(ok=True, path=path)

    @classmethod
    def failure(cls, path: Path, error: BaseException) -> "SaveResult":
        return cls(ok=False, path=path, error=error)

    def __bool__(self) -> bool:
        return self.ok
