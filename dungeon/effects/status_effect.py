"""
Status effect catalog.

Every status effect is a plain enumeration member paired with a table entry
holding its data: default duration, per-turn magnitude, how the magnitude is
read, and the stat modifiers it grants while active. Resolution code reads
the table; it never branches on individual effects for tick behavior.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.constants import NiceEnum, StatName


class EffectKind(NiceEnum):
    """How the per-turn magnitude of an effect is interpreted."""

    # Magnitude is hit points lost (negative) or gained (positive) each turn.
    HIT_POINTS = "HIT_POINTS"
    # Magnitude feeds stat modifiers, hit points are untouched.
    STAT_MODIFIER = "STAT_MODIFIER"
    # No magnitude, the effect is read by combat rolls and action checks.
    CONTROL = "CONTROL"


class StatusEffect(NiceEnum):
    """The canonical status effects."""

    POISON = "POISON"
    BURN = "BURN"
    FREEZE = "FREEZE"
    STUN = "STUN"
    RAGE = "RAGE"
    BLESSED = "BLESSED"
    CURSED = "CURSED"
    HASTE = "HASTE"
    SHIELD = "SHIELD"
    REGENERATION = "REGENERATION"

    @property
    def definition(self) -> "StatusEffectDefinition":
        """Returns the table entry of this effect."""
        return STATUS_EFFECT_TABLE[self]

    @property
    def duration(self) -> int:
        """Returns the default duration of this effect, in turns."""
        return self.definition.duration

    @property
    def damage_per_turn(self) -> int:
        """Returns the per-turn magnitude of this effect."""
        return self.definition.magnitude

    @property
    def emoji(self) -> str:
        return self.definition.emoji

    @property
    def color(self) -> str:
        return self.definition.color

    @property
    def colored_name(self) -> str:
        return f"[{self.color}]{self.display_name}[/]"


class StatusEffectDefinition(BaseModel):
    """Data attached to a status effect."""

    effect: StatusEffect = Field(
        description="The effect this entry describes.",
    )
    duration: int = Field(
        gt=0,
        description="Default duration in turns when the effect is applied.",
    )
    magnitude: int = Field(
        0,
        description="Per-turn magnitude, its meaning depends on the kind.",
    )
    kind: EffectKind = Field(
        description="How the magnitude is interpreted.",
    )
    modifiers: dict[StatName, int] = Field(
        default_factory=dict,
        description="Additive stat modifiers granted while the effect is active.",
    )
    emoji: str = Field(
        "❔",
        description="Emoji used when printing the effect.",
    )
    color: str = Field(
        "dim white",
        description="Rich color used when printing the effect.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.kind == EffectKind.HIT_POINTS and self.magnitude == 0:
            raise ValueError(f"{self.effect} ticks hit points but has no magnitude.")
        if self.kind == EffectKind.CONTROL and self.magnitude != 0:
            raise ValueError(f"{self.effect} is a control effect with a magnitude.")

    @property
    def ticks_hit_points(self) -> bool:
        return self.kind == EffectKind.HIT_POINTS


def _entry(effect: StatusEffect, **kwargs: Any) -> StatusEffectDefinition:
    return StatusEffectDefinition(effect=effect, **kwargs)


STATUS_EFFECT_TABLE: dict[StatusEffect, StatusEffectDefinition] = {
    entry.effect: entry
    for entry in (
        _entry(
            StatusEffect.POISON,
            duration=3,
            magnitude=-5,
            kind=EffectKind.HIT_POINTS,
            emoji="🤢",
            color="bold green",
        ),
        _entry(
            StatusEffect.BURN,
            duration=2,
            magnitude=-8,
            kind=EffectKind.HIT_POINTS,
            emoji="🔥",
            color="bold red",
        ),
        _entry(
            StatusEffect.FREEZE,
            duration=1,
            kind=EffectKind.CONTROL,
            emoji="🧊",
            color="bold cyan",
        ),
        _entry(
            StatusEffect.STUN,
            duration=1,
            kind=EffectKind.CONTROL,
            emoji="⚡",
            color="bold yellow",
        ),
        _entry(
            StatusEffect.RAGE,
            duration=3,
            magnitude=10,
            kind=EffectKind.STAT_MODIFIER,
            modifiers={StatName.ATTACK: 10},
            emoji="😡",
            color="bold red",
        ),
        _entry(
            StatusEffect.BLESSED,
            duration=5,
            magnitude=5,
            kind=EffectKind.HIT_POINTS,
            emoji="✨",
            color="bold yellow",
        ),
        _entry(
            StatusEffect.CURSED,
            duration=4,
            magnitude=-10,
            kind=EffectKind.STAT_MODIFIER,
            modifiers={StatName.ATTACK: -10},
            emoji="💀",
            color="bold magenta",
        ),
        _entry(
            StatusEffect.HASTE,
            duration=3,
            kind=EffectKind.CONTROL,
            emoji="💨",
            color="bold cyan",
        ),
        _entry(
            StatusEffect.SHIELD,
            duration=2,
            kind=EffectKind.CONTROL,
            modifiers={StatName.DEFENSE: 15},
            emoji="🛡️",
            color="bold blue",
        ),
        _entry(
            StatusEffect.REGENERATION,
            duration=4,
            magnitude=3,
            kind=EffectKind.HIT_POINTS,
            emoji="💚",
            color="bold green",
        ),
    )
}

# Effects that cost the holder its turn.
INCAPACITATING_EFFECTS: frozenset[StatusEffect] = frozenset(
    {StatusEffect.STUN, StatusEffect.FREEZE}
)
