from __future__ import annotations

import math
import time
from collections import OrderedDict
from typing import Callable, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_MAX_SIZE = 50

_MISSING = object()


class LRUCache(Generic[K, V]):
    """In-memory LRU cache with a uniform per-entry TTL.

    Expiry is lazy: an expired entry stays in place until ``get``/``has``
    touches it, so ``size`` reports physical occupancy rather than the
    number of live entries. Operations never yield, which makes the cache
    safe inside a single asyncio loop; threads need an external lock.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        if ttl is not None and ttl < 0:
            raise ValueError(f"ttl must be non-negative, got {ttl}")
        self.max_size = max_size
        self.ttl = math.inf if ttl is None else float(ttl)
        self._clock = clock
        self._data: OrderedDict[K, tuple[float, V]] = OrderedDict()

    def get(self, key: K, default: V | None = None) -> V | None:
        item = self._data.get(key)
        if item is None:
            return default
        expires_at, value = item
        if self._clock() > expires_at:
            del self._data[key]
            return default
        self._data.move_to_end(key)
        return value

    def set(self, key: K, value: V) -> None:
        now = self._clock()
        # Drop the old entry first so an overwrite never evicts a third key.
        self._data.pop(key, None)
        if len(self._data) >= self.max_size and self._data:
            self._data.popitem(last=False)
        self._data[key] = (now + self.ttl, value)

    def has(self, key: K) -> bool:
        item = self._data.get(key)
        if item is None:
            return False
        if self._clock() > item[0]:
            del self._data[key]
            return False
        return True

    def delete(self, key: K) -> bool:
        return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[K]:
        return list(self._data)

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"LRUCache(size={len(self._data)}, max_size={self.max_size}, ttl={self.ttl})"
