import random

import pytest

from textquest.items import AttackBoost, HealthPotion
from textquest.monsters import BossMonster, Goblin, Monster, Orc, Troll


class _FixedRng:
    def __init__(self, value, pick_high=False):
        self.value = value
        self.pick_high = pick_high

    def random(self):
        return self.value

    def randint(self, low, high):
        return high if self.pick_high else low


def test_take_damage_reduces_health():
    monster = Monster("Slime", 30, 5)
    monster.take_damage(12)
    assert monster.health == 30 - 12


def test_take_damage_clamps_at_zero():
    monster = Monster("Slime", 30, 5)
    monster.take_damage(100)
    assert monster.health == 0


def test_base_monster_drops_nothing_and_is_not_boss():
    monster = Monster("Slime", 30, 5)
    assert monster.drop_item() is None
    assert monster.is_boss is False


@pytest.mark.parametrize(
    "cls, name, low, high",
    [
        (Goblin, "Goblin", (20, 5), (30, 10)),
        (Orc, "Orc", (22, 6), (32, 12)),
        (Troll, "Troll", (25, 7), (35, 13)),
    ],
)
def test_stats_follow_level_ranges(cls, name, low, high):
    lowest = cls(1, rng=_FixedRng(0.0))
    highest = cls(1, rng=_FixedRng(0.0, pick_high=True))
    assert lowest.name == name
    assert (lowest.health, lowest.attack) == low
    assert (highest.health, highest.attack) == high


@pytest.mark.parametrize("cls", [Goblin, Orc, Troll])
def test_random_stats_stay_in_range(cls):
    rng = random.Random(7)
    bounds = {Goblin: (20, 30, 5, 10), Orc: (22, 32, 6, 12), Troll: (25, 35, 7, 13)}
    hl, hh, al, ah = bounds[cls]
    for level in range(1, 11):
        monster = cls(level, rng=rng)
        assert level * hl <= monster.health <= level * hh
        assert level * al <= monster.attack <= level * ah


@pytest.mark.parametrize(
    "cls, item_type, item_name",
    [
        (Goblin, HealthPotion, "Health Potion"),
        (Orc, AttackBoost, "Attack Boost"),
        (Troll, HealthPotion, "Health Potion"),
    ],
)
def test_drop_below_chance(cls, item_type, item_name):
    monster = cls(1, rng=_FixedRng(0.1))
    dropped = monster.drop_item()
    assert type(dropped) is item_type
    assert dropped.name == item_name


@pytest.mark.parametrize("cls", [Goblin, Orc, Troll])
@pytest.mark.parametrize("roll", [0.3, 0.9])
def test_no_drop_at_or_above_chance(cls, roll):
    monster = cls(1, rng=_FixedRng(roll))
    assert monster.drop_item() is None


def test_regular_monsters_are_not_bosses():
    assert [cls(1).is_boss for cls in (Goblin, Orc, Troll)] == [False, False, False]


def test_boss_stats_and_flag():
    boss = BossMonster(0)
    assert boss.name == "Dragon"
    assert (boss.health, boss.attack) == (400, 40)
    assert boss.is_boss is True


def test_boss_grows_with_level():
    assert BossMonster(10).health > BossMonster(0).health
    assert BossMonster(10).attack > BossMonster(0).attack


def test_boss_always_drops_attack_boost():
    boss = BossMonster(10, rng=_FixedRng(0.99))
    dropped = boss.drop_item()
    assert type(dropped) is AttackBoost
    assert dropped.name == "Attack Boost"


def test_boss_takes_damage_with_floor():
    boss = BossMonster(0)
    boss.take_damage(1000)
    assert boss.health == 0