"""Builder and director for assembling heroes and villains."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Position:
    """A point on the game board."""

    x: int = 0
    y: int = 0


@dataclass
class Hero:
    """The player's character."""

    name: str = ""
    lives: int = 0
    power: int = 0
    position: Position = field(default_factory=Position)

    def move(self, offset_x: int, offset_y: int) -> None:
        self.position.x += offset_x
        self.position.y += offset_y

    def heal(self) -> None:
        self.lives += 1

    def attack(self, villain: Villain) -> None:
        villain.take_damage()

    def take_damage(self) -> None:
        self.lives -= 1

    def represent(self) -> str:
        return f"{self.name} Lives:  {self.lives}"


@dataclass
class Villain:
    """An opponent of the hero."""

    name: str = ""
    lives: int = 0
    power: int = 0
    position: Position = field(default_factory=Position)

    def move(self, offset_x: int, offset_y: int) -> None:
        self.position.x += offset_x
        self.position.y += offset_y

    def attack(self, hero: Hero) -> None:
        hero.take_damage()

    def take_damage(self) -> None:
        self.lives -= 1

    def represent(self) -> str:
        return f"{self.name} Lives: {self.lives}"


class Builder(ABC):
    """Assembles one product step by step; build() hands it over and starts afresh."""

    def __init__(self) -> None:
        self._product: Hero | Villain
        self.reset()

    @abstractmethod
    def reset(self) -> None:
        """Start a new, blank product."""

    def set_name(self, name: str) -> Builder:
        self._product.name = name
        return self

    def set_lives(self, lives: int) -> Builder:
        self._product.lives = lives
        return self

    def set_power(self, power: int) -> Builder:
        self._product.power = power
        return self

    def build(self) -> Hero | Villain:
        product = self._product
        self.reset()
        return product


class HeroBuilder(Builder):
    def reset(self) -> None:
        self._product = Hero()

    def build(self) -> Hero:
        product = super().build()
        assert isinstance(product, Hero)
        return product


class VillainBuilder(Builder):
    def reset(self) -> None:
        self._product = Villain()

    def build(self) -> Villain:
        product = super().build()
        assert isinstance(product, Villain)
        return product


class Director:
    """Knows the recipes for the standard hero and villain."""

    def construct_hero(self, builder: HeroBuilder) -> None:
        builder.reset()
        builder.set_lives(100)
        builder.set_name("Hero")
        builder.set_power(75)

    def construct_villain(self, builder: VillainBuilder) -> None:
        builder.reset()
        builder.set_lives(25)
        builder.set_name("Bad Guy")
        builder.set_power(10)


def main(argv: list[str] | None = None) -> int:
    director = Director()

    hero_builder = HeroBuilder()
    director.construct_hero(hero_builder)
    hero = hero_builder.build()

    villain_builder = VillainBuilder()
    director.construct_villain(villain_builder)
    villain = villain_builder.build()

    print(hero.represent())
    print(villain.represent())

    hero.attack(villain)
    print(villain.represent())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())