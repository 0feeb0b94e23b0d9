from __future__ import annotations

import pytest

from attendance_dashboard.attendance.cache import QueryCache


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_fetches_once_per_key_and_scope():
    cache = QueryCache()
    calls = []

    def fetch():
        calls.append(1)
        return ("a",)

    assert cache.get_or_fetch("attendance", fetch, scope="u1") == ("a",)
    assert cache.get_or_fetch("attendance", fetch, scope="u1") == ("a",)
    cache.get_or_fetch("attendance", fetch, scope="u2")

    assert len(calls) == 2


def test_invalidate_drops_key_for_every_scope():
    cache = QueryCache()
    cache.get_or_fetch("attendance", lambda: 1, scope="u1")
    cache.get_or_fetch("attendance", lambda: 1, scope="u2")
    cache.get_or_fetch("employees", lambda: 1, scope="u1")

    cache.invalidate("attendance")

    assert not cache.is_cached("attendance", scope="u1")
    assert not cache.is_cached("attendance", scope="u2")
    assert cache.is_cached("employees", scope="u1")
    assert cache.invalidations["attendance"] == 1


def test_errors_are_not_cached():
    cache = QueryCache()

    def boom():
        raise RuntimeError("backend down")

    with pytest.raises(RuntimeError):
        cache.get_or_fetch("attendance", boom)

    assert not cache.is_cached("attendance")
    assert cache.get_or_fetch("attendance", lambda: "ok") == "ok"


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = QueryCache(ttl_seconds=30, clock=clock)
    cache.get_or_fetch("employees", lambda: "first")

    clock.now += 29
    assert cache.get_or_fetch("employees", lambda: "second") == "first"

    clock.now += 2
    assert cache.get_or_fetch("employees", lambda: "second") == "second"


def test_fetch_overlapping_an_invalidation_is_not_stored():
    cache = QueryCache()

    def fetch_while_mutated():
        cache.invalidate("attendance")
        return "stale"

    assert cache.get_or_fetch("attendance", fetch_while_mutated) == "stale"
    assert not cache.is_cached("attendance")


def test_drop_scope_only_forgets_that_user():
    cache = QueryCache()
    cache.get_or_fetch("attendance", lambda: 1, scope="u1")
    cache.get_or_fetch("attendance", lambda: 1, scope="u2")

    cache.drop_scope("u1")

    assert not cache.is_cached("attendance", scope="u1")
    assert cache.is_cached("attendance", scope="u2")


def test_zero_ttl_stores_nothing():
    cache = QueryCache(ttl_seconds=0)
    calls = []

    def fetch():
        calls.append(1)
        return len(calls)

    assert cache.get_or_fetch("attendance", fetch, scope="u1") == 1
    assert cache.get_or_fetch("attendance", fetch, scope="u1") == 2
    assert not cache.is_cached("attendance", scope="u1")
    assert cache.enabled is False

    cache.invalidate("attendance")
    assert cache.invalidations["attendance"] == 1
