"""Consumable items a character can carry and use."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .character import Character

logger = logging.getLogger(__name__)

HEAL_AMOUNT = 50
ATTACK_BOOST_AMOUNT = 10


class Item(ABC):
    """Something a character can use once from the inventory."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @abstractmethod
    def use(self, character: Character) -> None:
        """Apply the item's effect to ``character``."""


class HealthPotion(Item):
    """Restores health, never beyond the character's maximum."""

    def __init__(self) -> None:
        super().__init__("Health Potion")

    def use(self, character: Character) -> None:
        character.health = min(character.health + HEAL_AMOUNT, character.max_health)
        logger.info(
            "%s used %s. %s health: %d",
            character.name,
            self.name,
            character.name,
            character.health,
        )


class AttackBoost(Item):
    """Permanently raises the character's attack."""

    def __init__(self) -> None:
        super().__init__("Attack Boost")

    def use(self, character: Character) -> None:
        character.attack += ATTACK_BOOST_AMOUNT
        logger.info(
            "Attack increased by %d! Current attack: %d",
            ATTACK_BOOST_AMOUNT,
            character.attack,
        )