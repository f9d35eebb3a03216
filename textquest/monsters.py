"""Monsters the player fights."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .items import AttackBoost, HealthPotion, Item

logger = logging.getLogger(__name__)

DROP_CHANCE = 0.3


class Monster:
    """A foe with a name, health and attack."""

    is_boss = False

    def __init__(
        self,
        name: str,
        health: int,
        attack: int,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.name = name
        self.health = health
        self.attack = attack
        self._rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"health={self.health}, attack={self.attack})"
        )

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` health, never dropping below zero."""
        self.health = max(self.health - damage, 0)
        logger.info(
            "%s took %d damage. Remaining health: %d", self.name, damage, self.health
        )

    def drop_item(self) -> Optional[Item]:
        """Return the loot left behind, if any."""
        return None

    def _maybe_drop(self, item_type: type[Item]) -> Optional[Item]:
        if self._rng.random() < DROP_CHANCE:
            item = item_type()
            logger.info("%s dropped %s!", self.name, item.name)
            return item
        return None


def _roll(rng: random.Random, level: int, low: int, high: int) -> int:
    return rng.randint(level * low, level * high)


class Goblin(Monster):
    """Weak monster that sometimes drops a health potion."""

    def __init__(self, level: int, *, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        super().__init__(
            "Goblin", _roll(rng, level, 20, 30), _roll(rng, level, 5, 10), rng=rng
        )

    def drop_item(self) -> Optional[Item]:
        return self._maybe_drop(HealthPotion)


class Orc(Monster):
    """Sturdier monster that sometimes drops an attack boost."""

    def __init__(self, level: int, *, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        super().__init__(
            "Orc", _roll(rng, level, 22, 32), _roll(rng, level, 6, 12), rng=rng
        )

    def drop_item(self) -> Optional[Item]:
        return self._maybe_drop(AttackBoost)


class Troll(Monster):
    """Toughest regular monster; sometimes drops a health potion."""

    def __init__(self, level: int, *, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        super().__init__(
            "Troll", _roll(rng, level, 25, 35), _roll(rng, level, 7, 13), rng=rng
        )

    def drop_item(self) -> Optional[Item]:
        return self._maybe_drop(HealthPotion)


class BossMonster(Monster):
    """The final dragon; always drops an attack boost."""

    is_boss = True

    def __init__(self, level: int, *, rng: Optional[random.Random] = None) -> None:
        super().__init__("Dragon", 400 + level * 5, 40 + level * 2, rng=rng)

    def drop_item(self) -> Optional[Item]:
        logger.info("%s dropped an attack boost!", self.name)
        return AttackBoost()