# textquest

A small turn-based role-playing game played in the terminal.

You name your hero and then fight randomly chosen monsters: goblins, orcs and trolls. Their health and attack are rolled from ranges that grow with your level. Each victory earns 50 experience and 10–20 gold. Every 100 experience buys a level. A level-up raises maximum health by 20 × the new level and attack by 5 × the new level, and it fully heals you.

After every battle the game offers the shop. The shop sells two items:

| # | Item          | Price | Effect                              |
|---|---------------|-------|-------------------------------------|
| 1 | Health Potion | 15    | restores 50 health, up to the max   |
| 2 | Attack Boost  | 20    | adds 10 to attack                   |

When you reach level 10 the Dragon appears. Defeat it to clear the game. If your health falls to zero, the game ends.

## Installation

```
pip install .
```

## Playing

```
textquest
textquest --seed 42
```

The game first asks for your character's name. After each fight it asks `Visit the shop? (Y/N):`. Answer `Y` (in either case), then enter the number of the item you want. If the number is invalid or you cannot afford the item, nothing is bought.

`--seed` makes the monster rolls and gold rewards repeatable. The game reports its progress through the `logging` module at INFO level. Ending input with Ctrl-D or Ctrl-C stops the game with exit status 1.

## Using it as a library

The parts of the game can be used on their own:

```python
from textquest.character import Character
from textquest.monsters import Goblin
from textquest.shop import Shop, InsufficientGoldError
from textquest.game import GameManager

hero = Character("Ari")
manager = GameManager()
won = manager.battle(hero, Goblin(hero.level))   # True if the goblin fell
print(hero.display_status())

shop = Shop()
shop.display_items()
try:
    shop.buy_item(0, hero)                        # Health Potion, 15 gold
except InsufficientGoldError:
    pass
hero.show_inventory()
if hero.inventory:
    hero.use_item(0)
```

- `textquest.items`: `Item` (abstract), `HealthPotion` and `AttackBoost`. Each has a `use(character)` method.
- `textquest.character`: `Character`, a dataclass. It holds `name`, `level`, `health`, `max_health`, `attack`, `experience`, `gold` and `inventory`. Its methods are `display_status()`, `level_up()`, `use_item(index)`, `visit_shop()` and `show_inventory()`. `use_item` raises `IndexError` for a bad index.
- `textquest.monsters`: `Monster`, `Goblin`, `Orc`, `Troll` and `BossMonster`. Each takes a level and an optional `rng=random.Random(...)`. They provide `take_damage(damage)` and `drop_item()`. Goblins and trolls drop a Health Potion 30% of the time, and orcs drop an Attack Boost 30% of the time. The Dragon always drops an Attack Boost.
- `textquest.shop`: `Shop`, with `display_items()`, `buy_item(index, player)` and `sell_item(index, player)`. Selling pays 10 gold. `buy_item` raises `IndexError` for a bad index and `InsufficientGoldError` (a `ShopError`) when gold is short.
- `textquest.game`: `GameManager`. It takes optional `rng` and `input_func` arguments. Its methods are `generate_monster(level)`, `generate_boss_monster(level)`, `battle(player, enemy)`, `visit_shop(player)`, `display_inventory(player)` and `run(player)`. `run` plays a whole game and returns `True` if the Dragon was defeated. `main(argv=None)` is the `textquest` command.

## What it does not do

- The interactive game only lets you buy. It never asks you to use or sell an item. `Character.use_item` and `Shop.sell_item` are available only from code.
- Battles do not collect loot. `drop_item()` exists on every monster, but the battle loop never calls it.
- There is no saving or loading of a game.

## Running the tests

```
pip install .[test]
pytest
```