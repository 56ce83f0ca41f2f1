"""
Core system module for the dungeon engine.

This module contains the fundamental components shared by every other
package: game constants and enumerations, the injectable random source,
balance configuration, clamping and console utilities, and error handling.
"""

from .config import (
    DEFAULT_BALANCE,
    BalanceConfig,
    DifficultyModifiers,
    load_balance_config,
)
from .constants import (
    AttackResult,
    AttackType,
    Difficulty,
    EquipmentSlot,
    ItemType,
    MonsterBehavior,
    MonsterFamily,
    MonsterType,
    NiceEnum,
    PlayerClass,
    StatName,
)
from .error_handling import (
    GameException,
    InvalidEquipSlot,
    ensure_int_in_range,
    ensure_non_negative_int,
    require_enum_type,
)
from .rng import (
    RandomSource,
    ScriptedRandom,
    SeededRandom,
)
from .utils import (
    ccapture,
    clamp_damage,
    clamp_health,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from config.py
    "DEFAULT_BALANCE",
    "BalanceConfig",
    "DifficultyModifiers",
    "load_balance_config",
    # Import from constants.py
    "AttackResult",
    "AttackType",
    "Difficulty",
    "EquipmentSlot",
    "ItemType",
    "MonsterBehavior",
    "MonsterFamily",
    "MonsterType",
    "NiceEnum",
    "PlayerClass",
    "StatName",
    # Import from error_handling.py
    "GameException",
    "InvalidEquipSlot",
    "ensure_int_in_range",
    "ensure_non_negative_int",
    "require_enum_type",
    # Import from rng.py
    "RandomSource",
    "ScriptedRandom",
    "SeededRandom",
    # Import from utils.py
    "ccapture",
    "clamp_damage",
    "clamp_health",
    "cprint",
    "crule",
    "make_bar",
]
