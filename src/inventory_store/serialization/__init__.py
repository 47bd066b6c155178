"""
Default serializers for players and locations.
"""

from .location import JsonLocationSerializer
from .player import JsonPlayerSerializer

__all__ = [
    "JsonLocationSerializer",
    "JsonPlayerSerializer",
]
