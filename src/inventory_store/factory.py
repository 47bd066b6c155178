from loguru import logger

from .config.models import StoreConfig
from .core.interfaces import LocationSerializer, PlayerSerializer
from .profile.cache import ProfileCache
from .storage.flat_file import FlatFileDataSource


def create_data_source(
    config: StoreConfig,
    player_serializer: PlayerSerializer | None = None,
    location_serializer: LocationSerializer | None = None,
) -> FlatFileDataSource:
    """
    Build a flat-file data source with its own profile cache.

    Args:
        config: Store settings
        player_serializer: Overrides the default profile serializer
        location_serializer: Overrides the default location serializer
    """
    cache = ProfileCache(
        max_entries=config.cache_max_entries,
        expire_after_access_seconds=config.cache_expiry_seconds,
    )
    logger.info(
        f"Initializing flat-file data source in '{config.data_root}' "
        f"(cache: {config.cache_max_entries} entries, "
        f"{config.cache_expiry_minutes} min)"
    )
    return FlatFileDataSource(
        data_root=config.data_root,
        player_serializer=player_serializer,
        location_serializer=location_serializer,
        cache=cache,
        pretty_print=config.pretty_print,
    )
