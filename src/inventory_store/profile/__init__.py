"""
Profile caching module.
"""

from .cache import ProfileCache

__all__ = [
    "ProfileCache",
]
