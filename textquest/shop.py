"""The shop where the player trades gold for items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .items import AttackBoost, HealthPotion, Item

if TYPE_CHECKING:
    from .character import Character

logger = logging.getLogger(__name__)

POTION_PRICE = 15
DEFAULT_PRICE = 20
SELL_PRICE = 10


class ShopError(Exception):
    """A shop transaction could not be completed."""


class InsufficientGoldError(ShopError):
    """The player cannot afford the chosen item."""


class Shop:
    """Sells a health potion and an attack boost."""

    def __init__(self) -> None:
        self.items: list[Item] = [HealthPotion(), AttackBoost()]

    @staticmethod
    def price(index: int) -> int:
        """Price of the item at ``index``."""
        return POTION_PRICE if index == 0 else DEFAULT_PRICE

    def display_items(self) -> list[str]:
        """Log and return the numbered list of wares."""
        lines = ["--- Shop ---"]
        lines.extend(
            f"{number}. {item.name}" for number, item in enumerate(self.items, start=1)
        )
        for line in lines:
            logger.info(line)
        return lines

    def buy_item(self, index: int, player: Character) -> Item:
        """Sell the item at ``index`` to ``player`` and return it."""
        if not 0 <= index < len(self.items):
            logger.warning("Invalid shop index: %d", index)
            raise IndexError(f"invalid shop index: {index}")
        price = self.price(index)
        if player.gold < price:
            logger.warning("Not enough gold.")
            raise InsufficientGoldError(
                f"{self.items[index].name} costs {price} gold, player has {player.gold}"
            )
        player.gold -= price
        item = self.items[index]
        player.inventory.append(item)
        logger.info("Bought %s.", item.name)
        return item

    def sell_item(self, index: int, player: Character) -> Item:
        """Buy back the player's inventory item at ``index`` and return it."""
        if not 0 <= index < len(player.inventory):
            logger.warning("Invalid inventory index: %d", index)
            raise IndexError(f"invalid inventory index: {index}")
        player.gold += SELL_PRICE
        item = player.inventory.pop(index)
        logger.info("Sold %s for %d gold.", item.name, SELL_PRICE)
        return item