"""
Derived statistics of combatants.

Derived stats are never stored: each function recomputes its value from the
base stats, level, class template, equipment and active status effects of a
combatant. Calling any of them twice without an intervening mutation returns
the same value.
"""

from typing import Any

from core.constants import EquipmentSlot, StatName

# Character sheet figures, combat rolls use the balance configuration.
SHEET_BASE_HIT_CHANCE = 0.75
SHEET_MAX_HIT_CHANCE = 0.95
SHEET_MAX_CRITICAL_CHANCE = 0.50


def temporary_modifiers(combatant: Any) -> dict[StatName, int]:
    """
    Returns the additive stat modifiers granted by active status effects.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        dict[StatName, int]: Modifier per stat, stats without one are absent.

    """
    return combatant.status_effects.modifiers()


def _modifier(combatant: Any, stat: StatName) -> int:
    return temporary_modifiers(combatant).get(stat, 0)


def attack_power(combatant: Any) -> int:
    """
    Computes the total attack power of a combatant.

    Sums base attack, level scaling, the equipped weapon, status modifiers
    and the class threshold bonus. Monsters have no level or class terms.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        int: The attack power, at least 1.

    """
    total = combatant.attack
    total += combatant.equipment_bonus(EquipmentSlot.WEAPON)
    total += _modifier(combatant, StatName.ATTACK)
    template = combatant.class_template
    if template is not None:
        total += combatant.level * template.attack_per_level
        total += template.attack_threshold_bonus(combatant.level)
    return max(1, total)


def defense_power(combatant: Any) -> int:
    """
    Computes the total defense power of a combatant.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        int: The defense power, at least 0.

    """
    total = combatant.defense
    total += combatant.equipment_bonus(EquipmentSlot.ARMOR)
    total += _modifier(combatant, StatName.DEFENSE)
    template = combatant.class_template
    if template is not None:
        total += combatant.level * template.defense_per_level
        total += template.defense_threshold_bonus(combatant.level)
    return max(0, total)


def magic_power(combatant: Any) -> int:
    """
    Computes the total magic power of a combatant.

    Only magical accessories contribute to magic power.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        int: The magic power, at least 0.

    """
    total = combatant.magic
    total += combatant.equipment_bonus(EquipmentSlot.ACCESSORY)
    total += _modifier(combatant, StatName.MAGIC)
    template = combatant.class_template
    if template is not None:
        total += combatant.level * template.magic_per_level
        total += template.magic_threshold_bonus(combatant.level)
    return max(0, total)


def accuracy_rating(combatant: Any) -> int:
    return max(0, combatant.accuracy + _modifier(combatant, StatName.ACCURACY))


def critical_rating(combatant: Any) -> int:
    return max(0, combatant.critical_chance + _modifier(combatant, StatName.CRITICAL_CHANCE))


def block_rating(combatant: Any) -> int:
    return max(0, combatant.block_chance + _modifier(combatant, StatName.BLOCK_CHANCE))


def agility_rating(combatant: Any) -> int:
    return max(0, combatant.agility + _modifier(combatant, StatName.AGILITY))


def luck_rating(combatant: Any) -> int:
    return max(0, combatant.luck + _modifier(combatant, StatName.LUCK))


def hit_chance(combatant: Any) -> float:
    """
    Returns the hit chance shown on the character sheet.

    Monsters store their accuracy as a probability and report it as is.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        float: A probability in [0, 1].

    """
    if combatant.class_template is None:
        return max(0.0, min(1.0, float(combatant.accuracy)))
    return min(
        SHEET_MAX_HIT_CHANCE,
        SHEET_BASE_HIT_CHANCE + accuracy_rating(combatant) / 100,
    )


def critical_hit_chance(combatant: Any) -> float:
    """
    Returns the critical hit chance shown on the character sheet.

    Args:
        combatant (Any): The combatant to inspect.

    Returns:
        float: A probability in [0, 0.5].

    """
    return min(
        SHEET_MAX_CRITICAL_CHANCE,
        (luck_rating(combatant) + critical_rating(combatant)) / 200,
    )
