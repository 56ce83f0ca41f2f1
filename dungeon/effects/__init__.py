"""
Status effects: the effect catalog, the per-combatant ledger and the
apply/tick processing.
"""

from .status_effect import (
    INCAPACITATING_EFFECTS,
    STATUS_EFFECT_TABLE,
    EffectKind,
    StatusEffect,
    StatusEffectDefinition,
)
from .status_ledger import StatusLedger
from .status_table import EffectMessage, apply_status_effect, tick_status_effects

__all__ = [
    "INCAPACITATING_EFFECTS",
    "STATUS_EFFECT_TABLE",
    "EffectKind",
    "StatusEffect",
    "StatusEffectDefinition",
    "StatusLedger",
    "EffectMessage",
    "apply_status_effect",
    "tick_status_effects",
]
