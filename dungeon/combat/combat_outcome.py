"""
Combat outcome module for the engine.

A CombatOutcome is the immutable record of a single attack resolution,
returned by the combat engine to its caller.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.constants import AttackResult, AttackType
from effects.status_effect import StatusEffect


class CombatOutcome(BaseModel):
    """The result of a single attack."""

    model_config = ConfigDict(frozen=True)

    result: AttackResult = Field(
        description="The kind of outcome.",
    )
    attack_type: AttackType = Field(
        AttackType.NORMAL,
        description="The attack type that was resolved.",
    )
    damage: int = Field(
        0,
        ge=0,
        description="Damage dealt to the defender.",
    )
    applied_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Status effects applied to the defender.",
    )
    self_effects: list[StatusEffect] = Field(
        default_factory=list,
        description="Status effects applied to the attacker.",
    )
    description: str = Field(
        "",
        description="Human readable summary of the attack.",
    )
    target_defeated: bool = Field(
        False,
        description="Whether the defender is dead after the attack.",
    )
    special_attack_used: bool = Field(
        False,
        description="Whether a special ability was used.",
    )
    ability_name: str | None = Field(
        None,
        description="Name of the special ability used, if any.",
    )

    @property
    def landed(self) -> bool:
        """Whether the attack connected with the defender."""
        return self.result in (
            AttackResult.HIT,
            AttackResult.CRITICAL_HIT,
        ) or (self.result == AttackResult.BLOCKED and self.damage > 0)

    @classmethod
    def miss(
        cls, description: str, attack_type: AttackType = AttackType.NORMAL
    ) -> "CombatOutcome":
        """Builds a zero-damage MISS outcome."""
        return cls(
            result=AttackResult.MISS,
            attack_type=attack_type,
            description=description,
        )
