"""
Inventory store interfaces.

Protocols keep the store independent of concrete serializer and domain
object implementations.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from .models import Document, Location, PlayerProfile, ProfileKey, SaveResult


@runtime_checkable
class PlayerSerializer(Protocol):
    """Turns a player profile into a document."""

    def serialize(self, profile: PlayerProfile) -> Document:
        ...


@runtime_checkable
class LocationSerializer(Protocol):
    """Converts locations to and from documents."""

    def serialize(self, location: Location) -> Document:
        ...

    def deserialize(self, data: Document) -> Location:
        ...


@runtime_checkable
class DataSource(Protocol):
    """
    Per-player profile persistence.

    Writes report their outcome through ``SaveResult``; reads return ``None``
    when nothing has been stored yet.
    """

    def save_player(self, key: ProfileKey, profile: PlayerProfile) -> SaveResult:
        """
        Save a profile for the given key.

        Args:
            key: Player, game mode and group of the profile
            profile: Profile to serialize and store
        """
        ...

    def get_player(self, key: ProfileKey) -> Document | None:
        """
        Load the stored document for the given key.

        Returns:
            The profile document, or None if no profile was saved
        """
        ...

    def save_logout(self, profile: PlayerProfile) -> SaveResult:
        """Store the location the player logged out at."""
        ...

    def get_logout(self, player_uuid: UUID) -> Location | None:
        """Load the last logout location, if any."""
        ...

    def save_location(self, player: PlayerProfile, location: Location) -> SaveResult:
        """Store the last location for the location's world, keeping other worlds."""
        ...

    def get_location(self, player_uuid: UUID, world: str) -> Location | None:
        """Load the last location in a world, if any."""
        ...
