"""
Character class templates.

A CharacterClass is plain data: the starting stats of a class, the ranges
rolled at each level-up, its combat probabilities and its special ability.
Adding a class means adding a template, resolution code never branches on the
class itself.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.constants import PlayerClass, StatName
from core.rng import RandomSource
from effects.status_effect import StatusEffect


class StatRange(BaseModel):
    """A half-open integer range [low, high) rolled at level-up."""

    low: int = Field(
        ge=0,
        description="Smallest value of the range.",
    )
    high: int = Field(
        description="Exclusive upper bound of the range.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.high <= self.low:
            raise ValueError(f"Empty stat range [{self.low}, {self.high}).")

    def roll(self, rng: RandomSource) -> int:
        """
        Draws a value from the range.

        Single-value ranges return their value without drawing.

        Args:
            rng (RandomSource): The random source to draw from.

        Returns:
            int: A value in [low, high).

        """
        if self.is_fixed:
            return self.low
        return rng.randint(self.low, self.high - 1)

    @property
    def is_fixed(self) -> bool:
        return self.high - self.low == 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value < self.high


def _fixed(value: int) -> StatRange:
    return StatRange(low=value, high=value + 1)


def _span(low: int, high: int) -> StatRange:
    return StatRange(low=low, high=high)


class SpecialAbility(BaseModel):
    """The class special ability used by SPECIAL_ABILITY attacks."""

    name: str = Field(
        description="Name announced when the ability is used.",
    )
    multiplier: float = Field(
        gt=0,
        description="Multiplier applied to the scaling stat.",
    )
    scaling_stat: StatName = Field(
        StatName.ATTACK,
        description="Either ATTACK or MAGIC, the power the multiplier applies to.",
    )
    self_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Effects always applied to the user.",
    )
    target_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Effects always applied to the target.",
    )
    random_target_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="One of these, picked at random, is applied to the target.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.scaling_stat not in (StatName.ATTACK, StatName.MAGIC):
            raise ValueError(f"{self.name} cannot scale with {self.scaling_stat}.")


class CharacterClass(BaseModel):
    """
    Represents a player class with its starting stats and growth.
    """

    player_class: PlayerClass = Field(
        description="The class this template describes.",
    )

    # Starting stats.
    base_health: int = Field(gt=0)
    base_attack: int = Field(ge=0)
    base_defense: int = Field(ge=0)
    base_magic: int = Field(ge=0)
    base_agility: int = Field(ge=0)
    base_luck: int = Field(ge=0)
    base_accuracy: int = Field(ge=0)
    base_critical: int = Field(ge=0)
    base_block: int = Field(ge=0)

    # Level-up gains.
    health_gain: StatRange
    attack_gain: StatRange
    defense_gain: StatRange
    magic_gain: StatRange
    agility_gain: StatRange
    luck_gain: StatRange
    mana_gain: StatRange

    # Combat probabilities.
    critical_hit_chance: float = Field(
        0.15,
        ge=0,
        le=1,
        description="Chance of a critical hit when attacking.",
    )
    block_probability: float = Field(
        0.10,
        ge=0,
        le=1,
        description="Chance of halving the damage of a monster attack.",
    )
    dodge_bonus: float = Field(
        0.0,
        ge=0,
        le=1,
        description="Flat bonus added to the dodge chance against monsters.",
    )

    # Level scaling of derived stats.
    attack_per_level: int = Field(2, ge=0)
    defense_per_level: int = Field(1, ge=0)
    magic_per_level: int = Field(2, ge=0)

    special_ability: SpecialAbility
    starting_spells: list[str] = Field(
        default_factory=list,
        description="Spells known at character creation.",
    )

    @property
    def name(self) -> str:
        return self.player_class.display_name

    def attack_threshold_bonus(self, level: int) -> int:
        """Returns the extra attack granted by the class at a given level."""
        if self.player_class == PlayerClass.WARRIOR and level >= 5:
            return level // 3
        return 0

    def defense_threshold_bonus(self, level: int) -> int:
        """Returns the extra defense granted by the class at a given level."""
        if self.player_class == PlayerClass.WARRIOR and level >= 3:
            return level // 4
        return 0

    def magic_threshold_bonus(self, level: int) -> int:
        """Returns the extra magic granted by the class at a given level."""
        if self.player_class == PlayerClass.MAGE:
            return level // 2
        return 0


CLASS_TEMPLATES: dict[PlayerClass, CharacterClass] = {
    PlayerClass.WARRIOR: CharacterClass(
        player_class=PlayerClass.WARRIOR,
        base_health=120,
        base_attack=15,
        base_defense=8,
        base_magic=5,
        base_agility=8,
        base_luck=6,
        base_accuracy=85,
        base_critical=15,
        base_block=25,
        health_gain=_span(20, 30),
        attack_gain=_span(3, 6),
        defense_gain=_span(2, 4),
        magic_gain=_span(0, 2),
        agility_gain=_fixed(1),
        luck_gain=_fixed(1),
        mana_gain=_fixed(2),
        block_probability=0.25,
        special_ability=SpecialAbility(
            name="Berserker Strike",
            multiplier=2.5,
            self_effects=[StatusEffect.RAGE],
        ),
    ),
    PlayerClass.MAGE: CharacterClass(
        player_class=PlayerClass.MAGE,
        base_health=80,
        base_attack=8,
        base_defense=5,
        base_magic=18,
        base_agility=12,
        base_luck=10,
        base_accuracy=90,
        base_critical=10,
        base_block=5,
        health_gain=_span(10, 18),
        attack_gain=_span(1, 3),
        defense_gain=_span(1, 2),
        magic_gain=_span(4, 8),
        agility_gain=_fixed(2),
        luck_gain=_fixed(2),
        mana_gain=_fixed(8),
        special_ability=SpecialAbility(
            name="Arcane Blast",
            multiplier=3.0,
            scaling_stat=StatName.MAGIC,
            random_target_effects=[
                StatusEffect.BURN,
                StatusEffect.FREEZE,
                StatusEffect.STUN,
            ],
        ),
        starting_spells=["Fireball", "Heal"],
    ),
    PlayerClass.ROGUE: CharacterClass(
        player_class=PlayerClass.ROGUE,
        base_health=100,
        base_attack=12,
        base_defense=12,
        base_magic=10,
        base_agility=15,
        base_luck=12,
        base_accuracy=95,
        base_critical=25,
        base_block=15,
        health_gain=_span(15, 23),
        attack_gain=_span(2, 5),
        defense_gain=_span(2, 4),
        magic_gain=_span(1, 3),
        agility_gain=_fixed(3),
        luck_gain=_fixed(3),
        mana_gain=_fixed(3),
        critical_hit_chance=0.25,
        dodge_bonus=0.15,
        special_ability=SpecialAbility(
            name="Poison Strike",
            multiplier=1.8,
            target_effects=[StatusEffect.POISON],
        ),
    ),
    PlayerClass.PALADIN: CharacterClass(
        player_class=PlayerClass.PALADIN,
        base_health=130,
        base_attack=12,
        base_defense=10,
        base_magic=8,
        base_agility=6,
        base_luck=8,
        base_accuracy=80,
        base_critical=12,
        base_block=30,
        health_gain=_span(25, 37),
        attack_gain=_span(2, 4),
        defense_gain=_span(3, 5),
        magic_gain=_span(2, 4),
        agility_gain=_fixed(1),
        luck_gain=_fixed(2),
        mana_gain=_fixed(6),
        special_ability=SpecialAbility(
            name="Holy Smite",
            multiplier=2.0,
            self_effects=[StatusEffect.BLESSED],
        ),
        starting_spells=["Holy Strike", "Divine Heal"],
    ),
    PlayerClass.ARCHER: CharacterClass(
        player_class=PlayerClass.ARCHER,
        base_health=90,
        base_attack=18,
        base_defense=6,
        base_magic=6,
        base_agility=18,
        base_luck=14,
        base_accuracy=98,
        base_critical=20,
        base_block=10,
        health_gain=_span(12, 18),
        attack_gain=_span(4, 7),
        defense_gain=_span(1, 2),
        magic_gain=_span(1, 2),
        agility_gain=_fixed(4),
        luck_gain=_fixed(3),
        mana_gain=_fixed(2),
        special_ability=SpecialAbility(
            name="Piercing Volley",
            multiplier=2.2,
            self_effects=[StatusEffect.HASTE],
        ),
    ),
    PlayerClass.NECROMANCER: CharacterClass(
        player_class=PlayerClass.NECROMANCER,
        base_health=70,
        base_attack=6,
        base_defense=4,
        base_magic=20,
        base_agility=10,
        base_luck=15,
        base_accuracy=88,
        base_critical=18,
        base_block=8,
        health_gain=_span(8, 14),
        attack_gain=_span(1, 3),
        defense_gain=_span(0, 1),
        magic_gain=_span(5, 9),
        agility_gain=_fixed(2),
        luck_gain=_fixed(3),
        mana_gain=_fixed(10),
        special_ability=SpecialAbility(
            name="Soul Rend",
            multiplier=2.5,
            scaling_stat=StatName.MAGIC,
            target_effects=[StatusEffect.CURSED],
        ),
        starting_spells=["Dark Bolt", "Life Drain"],
    ),
}


def get_class_template(player_class: PlayerClass) -> CharacterClass:
    """
    Returns the template of a player class.

    Args:
        player_class (PlayerClass): The class to look up.

    Returns:
        CharacterClass: The class template.

    """
    return CLASS_TEMPLATES[player_class]
