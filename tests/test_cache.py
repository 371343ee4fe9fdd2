from studio.services import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = TTLCache(default_ttl=300, clock=clock)
    cache.put("templates", ["a"])

    clock.now = 299
    assert cache.get("templates") == ["a"]
    clock.now = 300
    assert cache.get("templates") is None


def test_put_overrides_ttl():
    clock = FakeClock()
    cache = TTLCache(default_ttl=300, clock=clock)
    cache.put("short", 1, ttl=5)

    clock.now = 6
    assert cache.get("short") is None


def test_invalidate_one_or_all():
    cache = TTLCache(default_ttl=60)
    cache.put("a", 1)
    cache.put("b", 2)

    cache.invalidate("a")
    assert cache.get("a") is None
    assert cache.get("b") == 2

    cache.invalidate()
    assert cache.get("b") is None
