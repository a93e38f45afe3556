"""Prototype pattern applied to two bounded caches: least recently and least frequently used."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict

MISSING = -1


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class CachePrototype(ABC):
    """A cache that can produce a new cache configured like itself."""

    @abstractmethod
    def clone(self) -> CachePrototype:
        """Return a new, empty cache with the same settings."""


class LRUCache(CachePrototype):
    """Evicts the entry that was used least recently once capacity is reached."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for key and mark it as most recent, or -1 if absent."""
        if key not in self._items:
            return MISSING
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store value under key, evicting the least recently used entry if full."""
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        if self.capacity == 0:
            return
        if len(self._items) >= self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def clone(self) -> LRUCache:
        """Return a new, empty cache with the same capacity."""
        return LRUCache(self.capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items


class LFUCache(CachePrototype):
    """Evicts the least frequently used entry; ties go to the least recently used."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._min_freq = 0
        self._values: dict[int, int] = {}
        self._freqs: dict[int, int] = {}
        # frequency -> keys in order of last use, oldest first
        self._buckets: dict[int, dict[int, None]] = {}

    def _touch(self, key: int) -> None:
        freq = self._freqs[key]
        bucket = self._buckets[freq]
        del bucket[key]
        if not bucket:
            del self._buckets[freq]
            if self._min_freq == freq:
                self._min_freq += 1
        freq += 1
        self._freqs[key] = freq
        self._buckets.setdefault(freq, {})[key] = None

    def _evict(self) -> None:
        bucket = self._buckets[self._min_freq]
        victim = next(iter(bucket))
        del bucket[victim]
        if not bucket:
            del self._buckets[self._min_freq]
        del self._values[victim]
        del self._freqs[victim]

    def get(self, key: int) -> int:
        """Return the value for key and count the use, or -1 if absent."""
        if key not in self._values:
            return MISSING
        self._touch(key)
        return self._values[key]

    def put(self, key: int, value: int) -> None:
        """Store value under key, evicting the least frequently used entry if full."""
        if self.capacity == 0:
            return
        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return
        if len(self._values) >= self.capacity:
            self._evict()
        self._values[key] = value
        self._freqs[key] = 1
        self._buckets.setdefault(1, {})[key] = None
        self._min_freq = 1

    def clone(self) -> LFUCache:
        """Return a new, empty cache with the same capacity."""
        copy = LFUCache(self.capacity)
        copy._min_freq = self._min_freq
        return copy

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


def main(argv: list[str] | None = None) -> int:
    first_lru = LRUCache(2)
    first_lfu = LFUCache(2)

    first_lru.put(1, 10)
    first_lru.put(2, 20)
    first_lru.put(3, 30)
    print(f"Try to get key 1: {first_lru.get(1)}")

    first_lru.clone()
    second_lfu = first_lfu.clone()

    second_lfu.put(1, 2)
    second_lfu.put(2, 3)
    print(f"Try to get key 1: {second_lfu.get(1)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())