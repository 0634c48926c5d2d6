"""Unit tests for TTLCache."""

from services.cache import DEFAULT_TTL_SECONDS, TTLCache


class TestTTLCache:
    def test_get_miss(self, cache):
        """Unknown keys come back as None."""
        assert cache.get("nonexistent") is None

    def test_set_and_get(self, cache):
        cache.set("key1", ["a", "b"])
        cache.set("key2", {"nested": "dict"})

        assert cache.get("key1") == ["a", "b"]
        assert cache.get("key2") == {"nested": "dict"}

    def test_empty_list_is_a_hit(self, cache):
        """A cached empty listing is still a value, not a miss."""
        cache.set("users:all", [])
        assert cache.get("users:all") == []

    def test_expires_after_ttl(self, cache, clock):
        cache.set("expires", "value")

        clock.advance(59.9)
        assert cache.get("expires") == "value"

        clock.advance(0.1)
        assert cache.get("expires") is None

    def test_expired_entry_dropped_on_read(self, cache, clock):
        """Expiry is lazy: the entry lingers until someone reads it."""
        cache.set("expires", "value")
        clock.advance(120)

        assert len(cache) == 1
        assert cache.get("expires") is None
        assert len(cache) == 0

    def test_set_overwrites_and_resets_expiry(self, cache, clock):
        cache.set("key", "old")
        clock.advance(50)
        cache.set("key", "new")
        clock.advance(50)

        assert cache.get("key") == "new"

    def test_delete(self, cache):
        cache.set("to_delete", "value")
        cache.delete("to_delete")
        assert cache.get("to_delete") is None

        # Deleting a missing key is a no-op
        cache.delete("nonexistent")

    def test_clear(self, cache):
        for i in range(5):
            cache.set(f"key{i}", f"value{i}")

        cache.clear()

        assert len(cache) == 0
        assert cache.get("key0") is None

    def test_default_ttl_is_thirty_minutes(self):
        cache = TTLCache()
        assert cache.ttl_seconds == DEFAULT_TTL_SECONDS == 1800
