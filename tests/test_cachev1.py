import time

from testtalk.cachev1 import Cache


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def test_get_before_expiry():
    clock = FakeClock()
    cache = Cache(1.0, clock)
    cache.set("greeting", "hello")
    clock.advance(0.99)
    assert cache.get("greeting") == "hello"
    clock.advance(0.02)
    assert cache.get("greeting") is None


def test_set_resets_expiry():
    clock = FakeClock()
    cache = Cache(1.0, clock)
    cache.set("key", "v1")
    clock.advance(0.99)
    cache.set("key", "v2")
    clock.advance(0.99)
    assert cache.get("key") == "v2"


def test_get_after_expiry():
    clock = FakeClock()
    cache = Cache(1.0, clock)
    cache.set("answer", 42)
    clock.advance(1.1)
    assert cache.get("answer") is None


def test_entry_present_exactly_at_expiry():
    clock = FakeClock()
    cache = Cache(1.0, clock)
    cache.set("k", "v")
    clock.advance(1.0)
    assert cache.get("k") == "v"


def test_expired_entry_stays_gone():
    clock = FakeClock()
    cache = Cache(1.0, clock)
    cache.set("k", "v")
    clock.advance(2.0)
    assert cache.get("k") is None
    clock.now = 0.0
    assert cache.get("k") is None


def test_missing_key():
    cache = Cache(1.0, FakeClock())
    assert cache.get("absent") is None


def test_get_before_and_after_expiry_real_clock():
    cache = Cache(0.2)
    cache.set("greeting", "hello")
    assert cache.get("greeting") == "hello"
    time.sleep(0.3)
    assert cache.get("greeting") is None