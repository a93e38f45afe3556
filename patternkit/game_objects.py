"""Abstract factory that produces game objects such as vehicles and characters."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

PROMPT = "Please enter the type of object you would like to create for the game: {vehicle, character} "


@dataclass
class Position:
    """A point on the game board."""

    x: int = 0
    y: int = 0


class GameObject:
    """Something with a name that sits at a position and can move."""

    def __init__(self, x: int, y: int, name: str) -> None:
        self.name = name
        self.pos = Position(x, y)

    def render(self) -> str:
        """Return the text shown for this object."""
        return f"Name: {self.name} X: {self.pos.x} Y: {self.pos.y}"

    def move(self, offset_x: int, offset_y: int) -> None:
        self.pos.x += offset_x
        self.pos.y += offset_y

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.pos.x}, y={self.pos.y}, name={self.name!r})"


class VehicleObject(GameObject):
    """A drivable game object."""


class CharacterObject(GameObject):
    """A playable or non-playable character."""


class GameObjectFactory(ABC):
    """Creates one family of game objects."""

    @abstractmethod
    def create_game_object(self) -> GameObject:
        """Return a fresh game object at the origin."""


class VehicleFactory(GameObjectFactory):
    def create_game_object(self) -> VehicleObject:
        return VehicleObject(0, 0, "Vehicle")


class CharacterFactory(GameObjectFactory):
    def create_game_object(self) -> CharacterObject:
        return CharacterObject(0, 0, "Character")


def factory_for(kind: str) -> GameObjectFactory:
    """Pick a factory by name; anything other than 'vehicle' yields characters."""
    if kind == "vehicle":
        return VehicleFactory()
    return CharacterFactory()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        kind = args[0]
    else:
        kind = input(PROMPT).strip()
    game_object = factory_for(kind).create_game_object()
    game_object.move(10, 10)
    print(game_object.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())