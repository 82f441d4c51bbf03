"""Tests for the session version cache."""

import threading

import semantic_version

from lintversion.versioning.cache import NOT_FOUND, VersionCache
from lintversion.versioning.models import WILDCARD


class TestVersionCache:
    def test_starts_empty(self, cache):
        assert cache.get_detected("react", "/repo") is None
        assert cache.has_warned("react") is False
        assert cache.get_default("react") is None

    def test_detected_entries_are_keyed_by_directory(self, cache):
        cache.set_detected("react", "/repo/a", "16.8.0")
        cache.set_detected("react", "/repo/b", NOT_FOUND)

        assert cache.get_detected("react", "/repo/a") == "16.8.0"
        assert cache.get_detected("react", "/repo/b") is NOT_FOUND
        assert cache.get_detected("flow-bin", "/repo/a") is None

    def test_reset_warning_flag(self, cache):
        cache.mark_warned("react")
        cache.mark_warned("flow-bin")
        cache.reset_warning_flag()
        assert not cache.has_warned("react")
        assert not cache.has_warned("flow-bin")

    def test_resets_are_independent(self, cache):
        cache.set_detected("react", "/repo", "16.8.0")
        cache.mark_warned("react")
        cache.set_default("react", WILDCARD)

        cache.reset_detected_version()
        assert cache.get_detected("react", "/repo") is None
        assert cache.has_warned("react")
        assert cache.get_default("react") is WILDCARD

        cache.reset_default_version()
        assert cache.get_default("react") is None
        assert cache.has_warned("react")

    def test_clear(self, cache):
        cache.set_detected("react", "/repo", "16.8.0")
        cache.mark_warned("react")
        cache.set_default("react", semantic_version.Version("16.0.0"))
        cache.clear()
        assert cache.stats() == {
            "detected_entries": 0,
            "not_found_entries": 0,
            "warned_packages": [],
            "default_entries": 0,
        }

    def test_stats(self, cache):
        cache.set_detected("react", "/a", "1.0.0")
        cache.set_detected("react", "/b", NOT_FOUND)
        cache.mark_warned("react")
        stats = cache.stats()
        assert stats["detected_entries"] == 2
        assert stats["not_found_entries"] == 1
        assert stats["warned_packages"] == ["react"]


def test_concurrent_writers():
    cache = VersionCache()

    def worker(n):
        for i in range(100):
            cache.set_detected("react", f"/repo/{n}/{i}", "1.0.0")
            cache.mark_warned(f"pkg-{n}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    stats = cache.stats()
    assert stats["detected_entries"] == 400
    assert len(stats["warned_packages"]) == 4
