"""A single process-wide leaderboard kept sorted by score."""

from __future__ import annotations

import bisect
import sys
import threading
from collections.abc import Iterator


class GlobalLeaderboard:
    """The one leaderboard; constructing it always gives back the same object."""

    _instance: GlobalLeaderboard | None = None
    _lock = threading.Lock()

    _entries: list[tuple[str, int]]
    _entries_lock: threading.Lock

    def __new__(cls) -> GlobalLeaderboard:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._entries = []
                    instance._entries_lock = threading.Lock()
                    cls._instance = instance
        return cls._instance

    def __copy__(self) -> GlobalLeaderboard:
        raise TypeError("the global leaderboard cannot be copied")

    def __deepcopy__(self, memo: dict) -> GlobalLeaderboard:
        raise TypeError("the global leaderboard cannot be copied")

    def insert(self, username: str, score: int) -> None:
        """Add a score; entries stay ordered by score, ties in insertion order."""
        with self._entries_lock:
            bisect.insort_right(self._entries, (username, score), key=lambda entry: entry[1])

    def lookup(self, username: str) -> int:
        """Return the lowest score recorded for the user, or -1 if there is none."""
        with self._entries_lock:
            return next((score for name, score in self._entries if name == username), -1)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        with self._entries_lock:
            return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def get_leaderboard() -> GlobalLeaderboard:
    """Return the shared leaderboard."""
    return GlobalLeaderboard()


def main(argv: list[str] | None = None) -> int:
    leaderboard = get_leaderboard()
    for name, score in (("Alice", 100), ("Bob", 150), ("Charlie", 120)):
        leaderboard.insert(name, score)
        print(f"{name}'s score: {leaderboard.lookup(name)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())