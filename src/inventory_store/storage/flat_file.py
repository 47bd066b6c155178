"""
Flat-file data source

Stores each player's profiles, logout location and per-world last locations
as JSON files under ``{data_root}/{uuid}/`` (see ``paths``).

No locking is done here. The host serializes events per player, so two calls
never touch the same player's files at once. If that ever stops being true,
concurrent ``save_location`` calls for one player can lose an update.
"""

from pathlib import Path
from uuid import UUID

from loguru import logger

from ..core.exceptions import DocumentParseError, StorageError
from ..core.interfaces import LocationSerializer, PlayerSerializer
from ..core.models import Document, Location, PlayerProfile, ProfileKey, SaveResult
from ..profile.cache import ProfileCache
from ..serialization import JsonLocationSerializer, JsonPlayerSerializer
from .documents import (
    create_file_if_not_exists,
    parse_document,
    read_document,
    read_text,
    write_document,
)
from .paths import locations_path, logout_path, profile_path

LOCATIONS_KEY = "locations"


class FlatFileDataSource:
    """
    JSON file backed profile store

    Features:
    - Profile reads go through a ``ProfileCache``; a successful save drops
      the cached entry for its key
    - Writes never raise: they log and return a ``SaveResult``
    - Last locations are merged per world rather than overwritten
    """

    def __init__(
        self,
        data_root: str | Path,
        player_serializer: PlayerSerializer | None = None,
        location_serializer: LocationSerializer | None = None,
        cache: ProfileCache | None = None,
        pretty_print: bool = False,
    ):
        """
        Args:
            data_root: Directory holding one sub-directory per player
            player_serializer: Turns profiles into documents
            location_serializer: Converts locations to and from documents
            cache: Profile document cache owned by this store
            pretty_print: Indent written JSON
        """
        self._data_root = Path(data_root)
        self._player_serializer = player_serializer or JsonPlayerSerializer()
        self._location_serializer = location_serializer or JsonLocationSerializer()
        self._cache = cache if cache is not None else ProfileCache()
        self._pretty_print = pretty_print

    @property
    def data_root(self) -> Path:
        return self._data_root

    @property
    def cache(self) -> ProfileCache:
        return self._cache

    def save_player(self, key: ProfileKey, profile: PlayerProfile) -> SaveResult:
        """
        Save a profile to the file for its key.

        The file is created first if needed. When creation fails nothing is
        written. On success the cached document for ``key`` is dropped.
        """
        path = profile_path(self._data_root, key)
        logger.debug(f"Saving data for player '{profile.name}' in file '{path}'")

        try:
            create_file_if_not_exists(path)
        except OSError as e:
            logger.opt(exception=e).error(f"Error creating file '{path}'")
            return SaveResult.failure(path, e)

        try:
            data = self._player_serializer.serialize(profile)
            write_document(path, data, self._pretty_print)
        except Exception as e:
            logger.opt(exception=e).error(
                f"Could not write data for player '{profile.name}' to file '{path}'"
            )
            return SaveResult.failure(path, e)

        self._cache.invalidate(key)
        return SaveResult.success(path)

    def get_player(self, key: ProfileKey) -> Document | None:
        """
        Load the document stored for a profile key.

        Returns:
            The document, or None if the player never saved this profile

        Raises:
            DocumentParseError: If the file exists but is not a JSON object
        """
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return cached

        path = profile_path(self._data_root, key)

        # Never been in this group with this game mode
        if not path.exists():
            return None

        try:
            document = read_document(path)
        except DocumentParseError as e:
            logger.error(f"Corrupted profile file '{path}': {e.reason}")
            raise
        except OSError as e:
            logger.opt(exception=e).error(f"Could not read profile file '{path}'")
            return None

        self._cache.put(key, document)
        logger.debug(f"Loaded from file: {key}")
        return document

    def save_logout(self, profile: PlayerProfile) -> SaveResult:
        """Store the player's current location as their logout location."""
        path = logout_path(self._data_root, profile.uuid)

        try:
            if profile.location is None:
                raise ValueError("profile has no location")
            create_file_if_not_exists(path)
            data = self._location_serializer.serialize(profile.location)
            write_document(path, data, self._pretty_print)
        except Exception as e:
            logger.opt(exception=e).error(
                f"Error writing logout location for '{profile.name}' to '{path}'"
            )
            return SaveResult.failure(path, e)

        return SaveResult.success(path)

    def get_logout(self, player_uuid: UUID) -> Location | None:
        path = logout_path(self._data_root, player_uuid)

        # Probably the first login
        if not path.exists():
            return None

        try:
            return self._location_serializer.deserialize(read_document(path))
        except (OSError, StorageError, ValueError) as e:
            logger.opt(exception=e).error(
                f"Could not read logout location from '{path}'"
            )
            return None

    def save_location(self, player: PlayerProfile, location: Location) -> SaveResult:
        """
        Record the player's last location in ``location.world``.

        Entries for other worlds are kept. This is a read-modify-write of
        ``last-locations.json`` without any locking.
        """
        path = locations_path(self._data_root, player.uuid)
        world = location.world

        try:
            create_file_if_not_exists(path)
            data = self._location_serializer.serialize(location)

            root = self._read_locations_root(path)
            locations = root.get(LOCATIONS_KEY)
            if not isinstance(locations, dict):
                locations = {}

            # Remove first so the new entry is always appended last
            locations.pop(world, None)
            locations[world] = data
            root[LOCATIONS_KEY] = locations

            write_document(path, root, self._pretty_print)
        except Exception as e:
            logger.opt(exception=e).error(
                f"Error writing last location for '{player.name}' to '{path}'"
            )
            return SaveResult.failure(path, e)

        logger.debug(f"Saved last location of '{player.name}' in world '{world}'")
        return SaveResult.success(path)

    def get_location(self, player_uuid: UUID, world: str) -> Location | None:
        path = locations_path(self._data_root, player_uuid)

        # No other worlds visited yet
        if not path.exists():
            return None

        try:
            root = read_document(path)
        except (OSError, StorageError) as e:
            logger.opt(exception=e).error(
                f"Could not read last locations from '{path}'"
            )
            return None

        locations = root.get(LOCATIONS_KEY)
        if not isinstance(locations, dict):
            return None

        data = locations.get(world)
        if not isinstance(data, dict):
            return None

        try:
            return self._location_serializer.deserialize(data)
        except ValueError as e:
            logger.opt(exception=e).error(
                f"Invalid location for world '{world}' in '{path}'"
            )
            return None

    def _read_locations_root(self, path: Path) -> Document:
        """
        Read the current last-locations document.

        A freshly created (empty) file counts as an empty document, and so
        does a corrupted one, which is logged and then overwritten.
        """
        try:
            text = read_text(path)
            if not text.strip():
                return {}
            return parse_document(text, path)
        except DocumentParseError as e:
            logger.warning(f"Discarding unreadable last locations in '{path}': {e.reason}")
            return {}
