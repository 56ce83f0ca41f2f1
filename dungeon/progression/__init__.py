"""
Progression module: experience intake, level-ups and snapshot restore.
"""

from .progression_engine import (
    LevelUpResult,
    PlayerSnapshot,
    StatGains,
    experience_reward_for_level,
    experience_threshold_for_level,
    grant_experience,
    level_up,
    next_threshold,
    restore_from_snapshot,
    snapshot_player,
)

__all__ = [
    "LevelUpResult",
    "PlayerSnapshot",
    "StatGains",
    "experience_reward_for_level",
    "experience_threshold_for_level",
    "grant_experience",
    "level_up",
    "next_threshold",
    "restore_from_snapshot",
    "snapshot_player",
]
