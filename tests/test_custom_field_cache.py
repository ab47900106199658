from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

from app.mappers.custom_field_cache import CustomFieldCache


class _FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class _CountingLoader:
    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, broker_id: int) -> dict[str, str]:
        self.calls.append(broker_id)
        return {"Region": str(broker_id)}


class TestCustomFieldCache(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = _FakeClock()
        self.loader = _CountingLoader()
        self.cache = CustomFieldCache(ttl_seconds=60, clock=self.clock)

    def test_zero_ttl_always_loads(self) -> None:
        cache = CustomFieldCache(ttl_seconds=0, clock=self.clock)

        cache.get_or_load(1, self.loader)
        cache.get_or_load(1, self.loader)

        self.assertFalse(cache.enabled)
        self.assertEqual(self.loader.calls, [1, 1])

    def test_entry_served_until_expiry(self) -> None:
        self.cache.get_or_load(1, self.loader)
        self.clock.now += 59
        self.cache.get_or_load(1, self.loader)
        self.assertEqual(self.loader.calls, [1])

        self.clock.now += 2
        self.cache.get_or_load(1, self.loader)
        self.assertEqual(self.loader.calls, [1, 1])

    def test_entries_are_per_broker(self) -> None:
        self.assertEqual(self.cache.get_or_load(1, self.loader), {"Region": "1"})
        self.assertEqual(self.cache.get_or_load(2, self.loader), {"Region": "2"})
        self.assertEqual(self.loader.calls, [1, 2])

    def test_callers_get_independent_copies(self) -> None:
        first = self.cache.get_or_load(1, self.loader)
        first["Injected"] = "9"

        self.assertEqual(self.cache.get_or_load(1, self.loader), {"Region": "1"})

    def test_invalidate_one_broker(self) -> None:
        self.cache.get_or_load(1, self.loader)
        self.cache.get_or_load(2, self.loader)

        self.cache.invalidate(1)
        self.cache.get_or_load(1, self.loader)
        self.cache.get_or_load(2, self.loader)

        self.assertEqual(self.loader.calls, [1, 2, 1])

    def test_invalidate_everything(self) -> None:
        self.cache.get_or_load(1, self.loader)
        self.cache.get_or_load(2, self.loader)

        self.cache.invalidate()
        self.cache.get_or_load(1, self.loader)
        self.cache.get_or_load(2, self.loader)

        self.assertEqual(self.loader.calls, [1, 2, 1, 2])

    def test_concurrent_readers_see_consistent_fields(self) -> None:
        cache = CustomFieldCache(ttl_seconds=60)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: cache.get_or_load(5, self.loader), range(50)))

        self.assertTrue(all(result == {"Region": "5"} for result in results))
        self.assertGreaterEqual(len(self.loader.calls), 1)


if __name__ == "__main__":
    unittest.main()
