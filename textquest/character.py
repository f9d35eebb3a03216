"""The player character."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .items import Item
from .shop import Shop

logger = logging.getLogger(__name__)

MAX_LEVEL = 10
EXPERIENCE_PER_LEVEL = 100


@dataclass
class Character:
    """A named adventurer with stats, gold and an inventory."""

    name: str
    level: int = 1
    health: int = 100
    max_health: int = 100
    attack: int = 10
    experience: int = 0
    gold: int = 0
    inventory: list[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        logger.info(
            "Character %s created! Level: %d, Health: %d, Attack: %d",
            self.name,
            self.level,
            self.health,
            self.attack,
        )

    def display_status(self) -> str:
        """Log and return a one-line summary of the character."""
        status = (
            f"Name: {self.name} | Level: {self.level} | "
            f"Health: {self.health}/{self.max_health} | Attack: {self.attack} | "
            f"Experience: {self.experience} | Gold: {self.gold}"
        )
        logger.info(status)
        return status

    def level_up(self) -> None:
        """Spend experience to gain a level; nothing happens at the level cap."""
        if self.level >= MAX_LEVEL:
            return
        self.experience -= EXPERIENCE_PER_LEVEL
        self.level += 1
        self.max_health += self.level * 20
        self.attack += self.level * 5
        self.health = self.max_health
        logger.info(
            "Level up! Level: %d | Health: %d | Attack: %d",
            self.level,
            self.max_health,
            self.attack,
        )

    def use_item(self, index: int) -> Item:
        """Use the inventory item at ``index`` and remove it."""
        if not 0 <= index < len(self.inventory):
            logger.warning("Invalid inventory index: %d", index)
            raise IndexError(f"invalid inventory index: {index}")
        item = self.inventory[index]
        item.use(self)
        del self.inventory[index]
        return item

    def visit_shop(self) -> list[str]:
        """Show the shop's wares."""
        return Shop().display_items()

    def show_inventory(self) -> list[str]:
        """Log and return the inventory listing."""
        lines = ["--- Inventory ---"]
        if not self.inventory:
            lines.append(" (empty)")
        else:
            lines.extend(
                f"{number}. {item.name}"
                for number, item in enumerate(self.inventory, start=1)
            )
        for line in lines:
            logger.info(line)
        return lines