from uuid import uuid4

import pytest

from inventory_store.core.models import GameMode, ProfileKey
from inventory_store.profile.cache import ProfileCache


def make_key(group: str = "default") -> ProfileKey:
    return ProfileKey(uuid4(), GameMode.SURVIVAL, group)


class TestProfileCache:
    """ProfileCache tests"""

    def test_get_missing(self, cache):
        assert cache.get(make_key()) is None
        assert cache.get_stats()["misses"] == 1

    def test_put_and_get(self, cache):
        key = make_key()
        cache.put(key, {"name": "Steve"})

        assert cache.get(key) == {"name": "Steve"}
        assert cache.get_stats()["hits"] == 1
        assert len(cache) == 1

    def test_put_replaces(self, cache):
        key = make_key()
        cache.put(key, {"v": 1})
        cache.put(key, {"v": 2})

        assert cache.get(key) == {"v": 2}
        assert len(cache) == 1

    def test_expires_after_idle_time(self, cache, clock):
        key = make_key()
        cache.put(key, {"v": 1})

        clock.advance(600)

        assert cache.get(key) is None
        assert cache.get_stats()["expirations"] == 1
        assert len(cache) == 0

    def test_access_resets_expiry(self, cache, clock):
        """Expiry counts from the last access, not from insertion"""
        key = make_key()
        cache.put(key, {"v": 1})

        clock.advance(500)
        assert cache.get(key) is not None
        clock.advance(500)
        assert cache.get(key) is not None
        clock.advance(599)
        assert cache.get(key) is not None
        clock.advance(600)
        assert cache.get(key) is None

    def test_lru_eviction(self, clock):
        cache = ProfileCache(max_entries=2, expire_after_access_seconds=600, clock=clock)
        first, second, third = make_key("a"), make_key("b"), make_key("c")
        cache.put(first, {"k": "a"})
        cache.put(second, {"k": "b"})

        # Touch first so second is least recently used
        cache.get(first)
        cache.put(third, {"k": "c"})

        assert cache.get(second) is None
        assert cache.get(first) == {"k": "a"}
        assert cache.get(third) == {"k": "c"}
        assert cache.get_stats()["evictions"] == 1

    def test_zero_expiry_disables_caching(self, clock):
        cache = ProfileCache(max_entries=5, expire_after_access_seconds=0, clock=clock)
        key = make_key()
        cache.put(key, {"v": 1})
        assert cache.get(key) is None

    def test_invalidate_and_clear(self, cache):
        key, other = make_key("a"), make_key("b")
        cache.put(key, {})
        cache.put(other, {})

        assert cache.invalidate(key) is True
        assert cache.invalidate(key) is False
        assert key not in cache
        assert cache.clear() == 1
        assert len(cache) == 0

    def test_membership_does_not_touch_entry(self, cache, clock):
        """An `in` check leaves statistics and the expiry clock alone"""
        key = make_key()
        cache.put(key, {"v": 1})

        clock.advance(500)
        assert key in cache
        assert make_key("other") not in cache
        stats = cache.get_stats()
        assert stats["hits"] == 0
        assert stats["misses"] == 0

        # Still measured from the put, not from the membership check
        clock.advance(100)
        assert key not in cache
        assert cache.get(key) is None

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            ProfileCache(max_entries=0)
