"""
Tests for level-scaled monster generation.
"""

import pytest
from core.constants import Difficulty, MonsterType
from core.rng import ScriptedRandom, SeededRandom
from monsters.monster_factory import (
    BAND_ARCHETYPES,
    BAND_BOSSES,
    build_monster,
    create_monster_for_level,
    is_boss_level,
    level_band,
)


@pytest.mark.parametrize(
    "level, band",
    [(1, 0), (10, 0), (11, 1), (20, 1), (21, 2), (30, 2), (31, 3), (99, 3), (0, 0)],
)
def test_level_band(level, band):
    assert level_band(level) == band


@pytest.mark.parametrize(
    "level, boss_name",
    [
        (10, "Goblin Warlord"),
        (20, "Bone Tyrant"),
        (30, "Elemental Titan"),
        (40, "Ancient Dragon"),
        (50, "Ancient Dragon"),
    ],
)
def test_every_tenth_level_is_a_boss(level, boss_name):
    rng = ScriptedRandom([])
    monster = create_monster_for_level(level, rng)
    assert monster.monster_type == MonsterType.BOSS
    assert monster.is_boss
    assert monster.name == boss_name
    # Bosses are fixed, nothing is drawn.
    assert rng.consumed == 0


@pytest.mark.parametrize("level", [1, 5, 9, 11, 15, 19, 21, 29, 31, 45])
def test_other_levels_never_spawn_a_boss(level):
    assert not is_boss_level(level)
    for seed in range(10):
        monster = create_monster_for_level(level, SeededRandom(seed))
        assert monster.monster_type != MonsterType.BOSS


def test_first_band_is_always_basic():
    rng = ScriptedRandom([0.0])
    monster = create_monster_for_level(1, rng)
    assert monster.name == "Goblin"
    assert monster.monster_type == MonsterType.BASIC
    assert monster.max_health == 30
    assert monster.current_health == 30
    assert rng.consumed == 1


@pytest.mark.parametrize("level", [0, -5])
def test_levels_below_one_are_clamped(level, mocker):
    mock_warning = mocker.patch("core.error_handling.log_warning")
    monster = create_monster_for_level(level, ScriptedRandom([0.0]))
    mock_warning.assert_called_once()
    assert monster.name == "Goblin"
    assert monster.level == 1
    assert monster.experience_reward == 40


def test_regular_monsters_grow_within_their_band():
    monster = create_monster_for_level(5, ScriptedRandom([0.4]))
    assert monster.name == "Wolf"
    assert monster.max_health == 26 + 8 * 4
    assert monster.attack == 9 + 2 * 4
    assert monster.defense == 1 + 4
    assert monster.experience_reward == 80


def test_elite_promotion():
    monster = create_monster_for_level(11, ScriptedRandom([0.0, 0.1]))
    assert monster.name == "Elite Orc"
    assert monster.monster_type == MonsterType.ELITE
    assert monster.max_health == 135
    assert monster.attack == 30
    assert monster.special_attack_chance == pytest.approx(0.30)
    assert monster.experience_reward == 210


@pytest.mark.parametrize(
    "roll, tier",
    [
        (0.01, MonsterType.LEGENDARY),
        (0.2, MonsterType.ELITE),
        (0.5, MonsterType.BASIC),
    ],
)
def test_deepest_band_tiers(roll, tier):
    monster = create_monster_for_level(31, ScriptedRandom([0.0, roll]))
    assert monster.monster_type == tier
    if tier == MonsterType.LEGENDARY:
        assert monster.name == "Legendary Demon"
        assert monster.max_health == 600
        assert monster.attack == 89


def test_boss_scaling():
    boss = create_monster_for_level(10, ScriptedRandom([]))
    assert boss.max_health == 100 + 20 * 10
    assert boss.attack == 14 + 4 * 10
    assert boss.defense == 6 + 2 * 10
    assert boss.experience_reward == 390


def test_difficulty_scales_monsters():
    goblin = BAND_ARCHETYPES[0][0]
    easy = build_monster(goblin, 1, difficulty=Difficulty.EASY)
    normal = build_monster(goblin, 1, difficulty=Difficulty.NORMAL)
    hard = build_monster(goblin, 1, difficulty=Difficulty.HARD)
    assert easy.max_health < normal.max_health < hard.max_health
    assert easy.attack < normal.attack < hard.attack
    assert easy.attack == 6
    assert hard.attack == 9
    assert normal.max_health == 30


def test_boss_difficulty():
    easy = build_monster(BAND_BOSSES[1], 20, MonsterType.BOSS, Difficulty.EASY)
    hard = build_monster(BAND_BOSSES[1], 20, MonsterType.BOSS, Difficulty.HARD)
    assert easy.max_health < hard.max_health


def test_generated_monsters_are_fresh():
    first = create_monster_for_level(3, ScriptedRandom([0.0]))
    second = create_monster_for_level(3, ScriptedRandom([0.0]))
    first.take_damage(10)
    assert second.current_health == second.max_health
    assert first.special_abilities is not second.special_abilities
