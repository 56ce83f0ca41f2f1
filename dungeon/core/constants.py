"""
Constants and enumerations for the engine.

Defines global constants and the enumerations for player classes, attack
types, attack results, item types, equipment slots, stats and the monster
taxonomy used throughout the engine.
"""

from enum import Enum
from typing import Any

# Hard cap applied to every damage value.
MAX_DAMAGE = 1_000_000

# Maximum number of items a player can carry (equipped items excluded).
MAX_INVENTORY_SIZE = 20

# Experience needed to go from level 1 to level 2.
BASE_EXPERIENCE_THRESHOLD = 100

# Multiplicative growth of the experience threshold at each level-up.
EXPERIENCE_GROWTH_RATE = 1.2

# Turns a monster waits after using its special attack.
SPECIAL_ATTACK_COOLDOWN = 3

# Monster level bands, a boss guards every n-th level.
BOSS_LEVEL_INTERVAL = 10


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class PlayerClass(NiceEnum):
    """Defines the classes a player can pick at character selection."""

    WARRIOR = "WARRIOR"
    MAGE = "MAGE"
    ROGUE = "ROGUE"
    PALADIN = "PALADIN"
    ARCHER = "ARCHER"
    NECROMANCER = "NECROMANCER"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this class."""
        return {
            PlayerClass.WARRIOR: "⚔️",
            PlayerClass.MAGE: "🔮",
            PlayerClass.ROGUE: "🗡️",
            PlayerClass.PALADIN: "🛡️",
            PlayerClass.ARCHER: "🏹",
            PlayerClass.NECROMANCER: "💀",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this class."""
        return {
            PlayerClass.WARRIOR: "bold red",
            PlayerClass.MAGE: "bold blue",
            PlayerClass.ROGUE: "bold green",
            PlayerClass.PALADIN: "bold yellow",
            PlayerClass.ARCHER: "bold cyan",
            PlayerClass.NECROMANCER: "bold magenta",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies class color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class AttackType(NiceEnum):
    """Selects which damage formula and side effects an attack uses."""

    NORMAL = "NORMAL"
    HEAVY = "HEAVY"
    QUICK = "QUICK"
    MAGIC = "MAGIC"
    SPECIAL_ABILITY = "SPECIAL_ABILITY"
    DEFENSIVE_STANCE = "DEFENSIVE_STANCE"

    @classmethod
    def coerce(cls, value: Any) -> "AttackType":
        """
        Converts a value to an AttackType, falling back to NORMAL.

        Args:
            value (Any): An AttackType, or its name/value as a string.

        Returns:
            AttackType: The matching attack type, or NORMAL if unknown.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        return cls.NORMAL


class AttackResult(NiceEnum):
    """The outcome kind of a single attack resolution."""

    MISS = "MISS"
    HIT = "HIT"
    CRITICAL_HIT = "CRITICAL_HIT"
    BLOCKED = "BLOCKED"
    # Reserved, not produced by the current attack types.
    PARRIED = "PARRIED"
    COUNTERED = "COUNTERED"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this result."""
        return {
            AttackResult.MISS: "💨",
            AttackResult.HIT: "⚔️",
            AttackResult.CRITICAL_HIT: "💥",
            AttackResult.BLOCKED: "🛡️",
            AttackResult.PARRIED: "🤺",
            AttackResult.COUNTERED: "🔁",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this result."""
        return {
            AttackResult.MISS: "dim white",
            AttackResult.HIT: "bold white",
            AttackResult.CRITICAL_HIT: "bold red",
            AttackResult.BLOCKED: "bold cyan",
        }.get(self, "white")

    @property
    def colored_name(self) -> str:
        return f"[{self.color}]{self.display_name}[/]"


class StatName(NiceEnum):
    """Stat keys used by temporary modifiers."""

    ATTACK = "ATTACK"
    DEFENSE = "DEFENSE"
    MAGIC = "MAGIC"
    AGILITY = "AGILITY"
    LUCK = "LUCK"
    ACCURACY = "ACCURACY"
    CRITICAL_CHANCE = "CRITICAL_CHANCE"
    BLOCK_CHANCE = "BLOCK_CHANCE"


class ItemType(NiceEnum):
    """Defines the kinds of items a player can carry."""

    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    ACCESSORY = "ACCESSORY"
    CONSUMABLE = "CONSUMABLE"
    KEY_ITEM = "KEY_ITEM"


class EquipmentSlot(NiceEnum):
    """Defines the equipment slots of a player."""

    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    ACCESSORY = "ACCESSORY"

    @property
    def item_type(self) -> ItemType:
        """Returns the item type accepted by this slot."""
        return ItemType[self.value]


class MonsterType(NiceEnum):
    """Defines the tier of a monster."""

    BASIC = "BASIC"
    ELITE = "ELITE"
    BOSS = "BOSS"
    LEGENDARY = "LEGENDARY"

    @property
    def color(self) -> str:
        """Returns the color string associated with this tier."""
        return {
            MonsterType.BASIC: "white",
            MonsterType.ELITE: "bold yellow",
            MonsterType.BOSS: "bold red",
            MonsterType.LEGENDARY: "bold magenta",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies tier color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class MonsterFamily(NiceEnum):
    """Monster taxonomy used for flavor and special attack effects."""

    GOBLIN = "GOBLIN"
    BEAST = "BEAST"
    UNDEAD = "UNDEAD"
    ARACHNID = "ARACHNID"
    ELEMENTAL = "ELEMENTAL"
    DEMON = "DEMON"
    DRAGON = "DRAGON"
    ABERRATION = "ABERRATION"


class MonsterBehavior(NiceEnum):
    """Behavior tag driving how eagerly a monster uses its special attack."""

    AGGRESSIVE = "AGGRESSIVE"
    DEFENSIVE = "DEFENSIVE"
    CUNNING = "CUNNING"


class Difficulty(NiceEnum):
    """Game difficulty, scales generated monsters."""

    EASY = "EASY"
    NORMAL = "NORMAL"
    HARD = "HARD"
