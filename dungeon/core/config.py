"""
Balance configuration module for the engine.

Holds the tunable balance constants used by combat resolution and monster
generation. The defaults reproduce the stock game balance; alternative
tunings can be loaded from a JSON file.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from core.constants import SPECIAL_ATTACK_COOLDOWN, Difficulty


class DifficultyModifiers(BaseModel):
    """Multipliers applied to freshly generated monsters."""

    health_multiplier: float = Field(
        1.0,
        gt=0,
        description="Multiplier applied to monster health.",
    )
    attack_multiplier: float = Field(
        1.0,
        gt=0,
        description="Multiplier applied to monster attack.",
    )
    defense_bonus: float = Field(
        0.0,
        ge=0,
        description="Fractional bonus added to monster defense.",
    )


def _default_difficulties() -> dict[Difficulty, DifficultyModifiers]:
    return {
        Difficulty.EASY: DifficultyModifiers(
            health_multiplier=0.80, attack_multiplier=0.85, defense_bonus=0.10
        ),
        Difficulty.NORMAL: DifficultyModifiers(),
        Difficulty.HARD: DifficultyModifiers(
            health_multiplier=1.20, attack_multiplier=1.15, defense_bonus=0.0
        ),
    }


class BalanceConfig(BaseModel):
    """
    Tunable balance constants.

    None of these are correctness invariants: tests should assert ranges and
    monotonicity for anything they drive, not exact values.
    """

    # Player accuracy.
    base_hit_chance: float = Field(0.85, ge=0, le=1)
    agility_hit_factor: float = Field(0.002, ge=0)
    haste_accuracy_bonus: float = Field(0.15, ge=0)
    cursed_accuracy_penalty: float = Field(0.20, ge=0)
    shield_evasion_bonus: float = Field(0.25, ge=0)

    # Critical hits.
    rage_critical_bonus: float = Field(0.20, ge=0)
    critical_multiplier: float = Field(2.0, ge=1)

    # Attack types.
    heavy_multiplier: float = Field(1.5, gt=0)
    heavy_stun_chance: float = Field(0.30, ge=0, le=1)
    quick_multiplier: float = Field(0.8, gt=0)
    magic_effect_chance: float = Field(0.40, ge=0, le=1)

    # Damage variance, as a fraction around 1.0.
    damage_variance: float = Field(0.15, ge=0, lt=1)

    # Player evasion and mitigation against monsters.
    agility_dodge_factor: float = Field(0.001, ge=0)
    haste_dodge_bonus: float = Field(0.20, ge=0)
    shield_guard_bonus: int = Field(10, ge=0)
    shield_block_bonus: float = Field(0.30, ge=0)

    # Monster special attack gate.
    special_attack_cooldown: int = Field(SPECIAL_ATTACK_COOLDOWN, ge=0)
    aggressive_special_bonus: float = Field(0.10, ge=0)
    cunning_special_bonus: float = Field(0.30, ge=0)
    cunning_health_threshold: float = Field(0.30, ge=0, le=1)
    boss_special_bonus: float = Field(0.20, ge=0)
    boss_turn_threshold: int = Field(3, ge=0)

    difficulties: dict[Difficulty, DifficultyModifiers] = Field(
        default_factory=_default_difficulties,
        description="Monster scaling per difficulty.",
    )

    def difficulty(self, difficulty: Difficulty) -> DifficultyModifiers:
        """
        Returns the modifiers for a difficulty, NORMAL ones if missing.

        Args:
            difficulty (Difficulty): The difficulty to look up.

        Returns:
            DifficultyModifiers: The modifiers to apply.

        """
        return self.difficulties.get(difficulty, DifficultyModifiers())


DEFAULT_BALANCE = BalanceConfig()


def load_balance_config(filepath: Path) -> BalanceConfig:
    """
    Loads and validates a balance configuration from a JSON file.

    Keys missing from the file keep their default value.

    Args:
        filepath (Path): The JSON file to load.

    Raises:
        ValueError: If the file is missing, malformed or fails validation.

    Returns:
        BalanceConfig: The loaded configuration.

    """
    try:
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data: Any = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected object in {filepath}, got {type(data).__name__}"
            )
        return BalanceConfig.model_validate(data)
    except (json.JSONDecodeError, FileNotFoundError, ValidationError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
