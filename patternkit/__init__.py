"""Runnable examples of creational and structural design patterns."""

__version__ = "0.1.0"

__all__ = [
    "alerts",
    "caches",
    "characters",
    "game_objects",
    "leaderboard",
    "signals",
    "smart_home",
]