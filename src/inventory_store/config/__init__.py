from .models import StoreConfig
from .utils import read_yaml, validate_config, load_config

__all__ = [
    "StoreConfig",
    "read_yaml",
    "validate_config",
    "load_config",
]
