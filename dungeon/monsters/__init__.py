"""
Monsters module: level-scaled monster generation and the special attack
gate.
"""

from .monster_ai import (
    choose_special_ability,
    special_attack_probability,
    use_special_attack,
)
from .monster_factory import (
    BAND_ARCHETYPES,
    BAND_BOSSES,
    MonsterArchetype,
    build_monster,
    create_monster_for_level,
    is_boss_level,
    level_band,
)

__all__ = [
    "choose_special_ability",
    "special_attack_probability",
    "use_special_attack",
    "BAND_ARCHETYPES",
    "BAND_BOSSES",
    "MonsterArchetype",
    "build_monster",
    "create_monster_for_level",
    "is_boss_level",
    "level_band",
]
