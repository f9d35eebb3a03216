"""Battle loop, shop visits and the command that plays a whole game."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Sequence
from typing import Optional

from .character import MAX_LEVEL, EXPERIENCE_PER_LEVEL, Character
from .items import Item
from .monsters import BossMonster, Goblin, Monster, Orc, Troll
from .shop import Shop, ShopError

logger = logging.getLogger(__name__)

EXPERIENCE_REWARD = 50
GOLD_REWARD_RANGE = (10, 20)

_MONSTER_TYPES: tuple[type[Monster], ...] = (Goblin, Orc, Troll)


class GameManager:
    """Creates monsters, runs battles and offers the shop between fights."""

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        input_func: Callable[[str], str] = input,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._input = input_func

    def generate_monster(self, level: int) -> Monster:
        """Return a random regular monster scaled to ``level``."""
        monster_type = _MONSTER_TYPES[self._rng.randint(0, len(_MONSTER_TYPES) - 1)]
        return monster_type(level, rng=self._rng)

    def generate_boss_monster(self, level: int) -> BossMonster:
        """Return the final boss scaled to ``level``."""
        return BossMonster(level, rng=self._rng)

    def battle(self, player: Character, enemy: Monster) -> bool:
        """Fight until one side falls; return True if the enemy was defeated."""
        kind = "Boss monster" if enemy.is_boss else "Monster"
        logger.info(
            "%s %s appears! Health: %d, Attack: %d",
            kind,
            enemy.name,
            enemy.health,
            enemy.attack,
        )
        while player.health > 0 and enemy.health > 0:
            enemy.take_damage(player.attack)
            logger.info(
                "%s attacks %s! %s health: %d",
                player.name,
                enemy.name,
                enemy.name,
                enemy.health,
            )
            if enemy.health <= 0:
                self._reward(player, enemy)
                return True

            previous = player.health
            player.health = max(player.health - enemy.attack, 0)
            suffix = f" -> {player.health}" if previous != player.health else ""
            logger.info(
                "%s attacks %s! %s health: %d%s",
                enemy.name,
                player.name,
                player.name,
                player.health,
                suffix,
            )
            if player.health <= 0:
                return False
        return enemy.health <= 0

    def _reward(self, player: Character, enemy: Monster) -> None:
        logger.info("%s defeated!", enemy.name)
        if enemy.is_boss:
            logger.info(
                "Congratulations! You defeated the boss %s and cleared the game!",
                enemy.name,
            )
        gold = self._rng.randint(*GOLD_REWARD_RANGE)
        player.experience += EXPERIENCE_REWARD
        player.gold += gold
        logger.info(
            "%s gained %d EXP and %d gold. EXP: %d/%d, Gold: %d",
            player.name,
            EXPERIENCE_REWARD,
            gold,
            player.experience,
            EXPERIENCE_PER_LEVEL,
            player.gold,
        )
        while player.experience >= EXPERIENCE_PER_LEVEL and player.level < MAX_LEVEL:
            player.level_up()

    def visit_shop(self, player: Character) -> Optional[Item]:
        """Offer the shop; return the item bought, or None."""
        answer = self._input("Visit the shop? (Y/N): ")
        if answer.casefold() != "y":
            return None
        shop = Shop()
        shop.display_items()
        logger.info("Gold: %d", player.gold)
        choice_text = self._input("Choose an item number to buy: ")
        try:
            choice = int(choice_text.strip())
        except ValueError:
            choice = 0
        try:
            return shop.buy_item(choice - 1, player)
        except (IndexError, ShopError):
            return None

    def display_inventory(self, player: Character) -> list[str]:
        """Show the player's inventory."""
        return player.show_inventory()

    def run(self, player: Character) -> bool:
        """Play until the player dies or faces the boss; return True on a clear."""
        while player.health > 0 and player.level < MAX_LEVEL:
            enemy = self.generate_monster(player.level)
            self.battle(player, enemy)
            self.visit_shop(player)

        cleared = False
        if player.level >= MAX_LEVEL:
            boss = self.generate_boss_monster(player.level)
            cleared = self.battle(player, boss)

        logger.info("The game has ended.")
        return cleared


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a character name and play one game."""
    parser = argparse.ArgumentParser(
        prog="textquest", description="A small text role-playing game."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        name = input("Enter your character's name: ")
        player = Character(name)
        player.display_status()
        GameManager(rng=random.Random(args.seed)).run(player)
    except (EOFError, KeyboardInterrupt):
        logger.info("The game has ended.")
        return 1
    return 0