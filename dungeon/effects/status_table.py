"""
Status effect application and per-turn processing.

Applying an effect refreshes its duration, ticking an effect applies its
per-turn hit point change and consumes one turn. Both operate on any
combatant owning a StatusLedger.
"""

from typing import Any

from catchery import log_debug, log_warning
from pydantic import BaseModel, Field

from .status_effect import StatusEffect


class EffectMessage(BaseModel):
    """Describes something a status effect did during a tick."""

    effect: StatusEffect = Field(
        description="The effect that produced this message.",
    )
    target: str = Field(
        description="Name of the combatant holding the effect.",
    )
    amount: int = Field(
        0,
        description="Hit points lost (negative) or gained (positive).",
    )
    expired: bool = Field(
        False,
        description="Whether the effect ran out on this tick.",
    )
    description: str = Field(
        "",
        description="Human readable summary of the event.",
    )


def apply_status_effect(
    combatant: Any, effect: StatusEffect, duration: int | None = None
) -> bool:
    """
    Applies a status effect to a combatant.

    Re-applying an active effect refreshes its duration to the larger of the
    current and the new one.

    Args:
        combatant (Any):
            The combatant receiving the effect.
        effect (StatusEffect):
            The effect to apply.
        duration (int | None):
            Duration in turns, the effect's default if None.

    Returns:
        bool:
            True if the effect is active after the call, False if it was
            rejected (dead combatant or non-positive duration).

    """
    if not combatant.is_alive():
        log_debug(f"{combatant.name} is dead, {effect.display_name} not applied.")
        return False
    if duration is not None and duration <= 0:
        log_warning(
            f"Rejected {effect.display_name} with non-positive duration",
            {"target": combatant.name, "effect": effect.name, "duration": duration},
        )
        return False
    remaining = combatant.status_effects.apply(effect, duration)
    log_debug(f"{combatant.name} is affected by {effect.display_name} ({remaining} turns).")
    return True


def tick_status_effects(combatant: Any) -> list[EffectMessage]:
    """
    Processes one turn of every status effect of a combatant.

    Hit point effects heal or damage the holder by their magnitude, then every
    effect loses one turn and is removed when it reaches zero.
    A dead holder takes no damage or healing, but its effects still run out.

    Args:
        combatant (Any):
            The combatant whose effects are processed.

    Returns:
        list[EffectMessage]:
            One message per heal, damage and expiry, in application order.

    """
    messages: list[EffectMessage] = []
    for effect in combatant.status_effects:
        definition = effect.definition
        if definition.ticks_hit_points and combatant.is_alive():
            if definition.magnitude < 0:
                amount = -combatant.take_damage(-definition.magnitude)
                description = (
                    f"{combatant.name} takes {-amount} damage from {effect.display_name}."
                )
            else:
                amount = combatant.heal(definition.magnitude)
                description = (
                    f"{combatant.name} recovers {amount} health from {effect.display_name}."
                )
            messages.append(
                EffectMessage(
                    effect=effect,
                    target=combatant.name,
                    amount=amount,
                    description=description,
                )
            )
        if combatant.status_effects.decrement(effect) == 0:
            messages.append(
                EffectMessage(
                    effect=effect,
                    target=combatant.name,
                    expired=True,
                    description=f"{effect.display_name} wears off {combatant.name}.",
                )
            )
    return messages
