"""
Combat module: attack resolution, outcomes and their narrative output.
"""

from .combat_engine import MAGIC_ATTACK_EFFECTS, CombatEngine
from .combat_log import (
    format_effect_message,
    format_level_up,
    format_outcome,
    format_status_line,
    is_noteworthy,
    print_effect_messages,
    print_level_up,
    print_outcome,
    print_round_summary,
)
from .combat_outcome import CombatOutcome

__all__ = [
    "MAGIC_ATTACK_EFFECTS",
    "CombatEngine",
    "format_effect_message",
    "format_level_up",
    "format_outcome",
    "format_status_line",
    "is_noteworthy",
    "print_effect_messages",
    "print_level_up",
    "print_outcome",
    "print_round_summary",
    "CombatOutcome",
]
