"""
Monster special attack gate.

A monster decides on each attack whether to use its special attack. The gate
is stateful: after a special attack the monster waits out a cooldown, then
rolls against its special attack chance adjusted by its behavior, its health
and, for bosses, the length of the fight.
"""

from typing import Any

from catchery import log_debug

from core.config import DEFAULT_BALANCE, BalanceConfig
from core.constants import MonsterBehavior
from core.rng import RandomSource

DEFAULT_SPECIAL_ABILITY = "Special Attack"


def special_attack_probability(monster: Any, config: BalanceConfig = DEFAULT_BALANCE) -> float:
    """
    Computes the chance that a monster uses its special attack right now.

    Args:
        monster (Any):
            The monster deciding.
        config (BalanceConfig):
            The balance configuration holding the bonuses.

    Returns:
        float:
            A probability in [0, 1].

    """
    chance = monster.special_attack_chance
    if monster.behavior == MonsterBehavior.AGGRESSIVE:
        chance += config.aggressive_special_bonus
    elif monster.behavior == MonsterBehavior.CUNNING:
        if monster.health_ratio < config.cunning_health_threshold:
            chance += config.cunning_special_bonus
    if monster.is_boss and monster.turns_in_combat > config.boss_turn_threshold:
        chance += config.boss_special_bonus
    return max(0.0, min(1.0, chance))


def use_special_attack(
    monster: Any, rng: RandomSource, config: BalanceConfig = DEFAULT_BALANCE
) -> bool:
    """
    Decides whether a monster uses its special attack on this attack.

    An active cooldown is consumed by one turn and refuses the special. When
    no cooldown is active the monster rolls, and on success the cooldown is
    reset to its maximum.

    Args:
        monster (Any):
            The monster deciding.
        rng (RandomSource):
            The random source to roll with.
        config (BalanceConfig):
            The balance configuration.

    Returns:
        bool:
            True if the special attack is used.

    """
    if monster.special_attack_cooldown > 0:
        monster.special_attack_cooldown -= 1
        return False
    if rng.random() < special_attack_probability(monster, config):
        monster.special_attack_cooldown = config.special_attack_cooldown
        log_debug(f"{monster.name} readies its special attack.")
        return True
    return False


def choose_special_ability(monster: Any, rng: RandomSource) -> str:
    """
    Picks the name of the special ability a monster announces.

    Args:
        monster (Any):
            The monster using its special attack.
        rng (RandomSource):
            The random source, only drawn from when there is a choice.

    Returns:
        str:
            The ability name.

    """
    if not monster.special_abilities:
        return DEFAULT_SPECIAL_ABILITY
    if len(monster.special_abilities) == 1:
        return monster.special_abilities[0]
    return rng.choice(monster.special_abilities)
