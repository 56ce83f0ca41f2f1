"""
Character module: class templates, the combatant base, players, monsters,
inventory management and derived stats.
"""

from .character_class import (
    CLASS_TEMPLATES,
    CharacterClass,
    SpecialAbility,
    StatRange,
    get_class_template,
)
from .character_inventory import CharacterInventory
from .combatant import Combatant
from .monster import Monster, describe_monster
from .player import Player, create_player, spell_mana_cost

__all__ = [
    "CLASS_TEMPLATES",
    "CharacterClass",
    "SpecialAbility",
    "StatRange",
    "get_class_template",
    "CharacterInventory",
    "Combatant",
    "Monster",
    "describe_monster",
    "Player",
    "create_player",
    "spell_mana_cost",
]
