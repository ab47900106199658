"""
app/mappers/custom_field_cache.py

Process-wide TTL cache for broker custom field definitions.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class _Entry:
    expires_at: float
    fields: dict[str, str]


class CustomFieldCache:
    """
    Read-mostly cache of display label -> field column per broker.

    Safe to share between concurrent imports. Loads happen outside the lock,
    so two imports racing on a cold key may both query the source; the last
    one to finish wins.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = max(0.0, ttl_seconds)
        self._clock = clock
        self._entries: dict[int, _Entry] = {}
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._ttl_seconds > 0

    def get_or_load(
        self,
        broker_id: int,
        loader: Callable[[int], Mapping[str, str]],
    ) -> dict[str, str]:
        if not self.enabled:
            return dict(loader(broker_id))

        with self._lock:
            entry = self._entries.get(broker_id)
            if entry is not None and entry.expires_at > self._clock():
                return dict(entry.fields)

        fields = dict(loader(broker_id))
        with self._lock:
            self._entries[broker_id] = _Entry(
                expires_at=self._clock() + self._ttl_seconds,
                fields=fields,
            )
        return dict(fields)

    def invalidate(self, broker_id: int | None = None) -> None:
        """
        Drop one broker's entry, or everything when broker_id is None.
        """

        with self._lock:
            if broker_id is None:
                self._entries.clear()
            else:
                self._entries.pop(broker_id, None)
