"""
Combatant module for the engine.

Defines the Combatant base class shared by players and monsters: health,
base stats, and the status effect ledger. Every health mutation goes through
the clamp helpers, so a combatant never holds more health than its maximum
nor less than zero.
"""

from typing import Any

from catchery import log_debug

from core.constants import EquipmentSlot
from core.error_handling import ensure_non_negative_int
from core.utils import clamp_damage, clamp_health
from effects.status_effect import INCAPACITATING_EFFECTS, StatusEffect
from effects.status_ledger import StatusLedger

from . import character_stats


class Combatant:
    """
    Anything that can attack and be attacked.

    Attributes:
        name (str):
            The name of the combatant.
        max_health (int):
            Upper bound of the health.
        current_health (int):
            Current health, 0 means dead.
        level (int):
            Level of the combatant.
        attack (int):
            Base attack.
        defense (int):
            Base defense.
        magic (int):
            Base magic.
        agility (int):
            Base agility.
        luck (int):
            Base luck.
        accuracy (int | float):
            Accuracy rating for players, hit probability for monsters.
        critical_chance (int):
            Base critical rating.
        block_chance (int):
            Base block rating.
        status_effects (StatusLedger):
            The active status effects.

    """

    name: str
    max_health: int
    current_health: int
    level: int
    attack: int
    defense: int
    magic: int
    agility: int
    luck: int
    accuracy: int | float
    critical_chance: int
    block_chance: int
    status_effects: StatusLedger

    def __init__(
        self,
        name: str,
        max_health: int,
        attack: int = 0,
        defense: int = 0,
        magic: int = 0,
        agility: int = 0,
        luck: int = 0,
        accuracy: int | float = 0,
        critical_chance: int = 0,
        block_chance: int = 0,
        level: int = 1,
        current_health: int | None = None,
    ) -> None:
        ctx = {"name": name}
        self.name = name
        self.max_health = ensure_non_negative_int(max_health, "max_health", 1, ctx)
        self.attack = ensure_non_negative_int(attack, "attack", 0, ctx)
        self.defense = ensure_non_negative_int(defense, "defense", 0, ctx)
        self.magic = ensure_non_negative_int(magic, "magic", 0, ctx)
        self.agility = ensure_non_negative_int(agility, "agility", 0, ctx)
        self.luck = ensure_non_negative_int(luck, "luck", 0, ctx)
        self.accuracy = accuracy
        self.critical_chance = ensure_non_negative_int(critical_chance, "critical_chance", 0, ctx)
        self.block_chance = ensure_non_negative_int(block_chance, "block_chance", 0, ctx)
        self.level = max(1, ensure_non_negative_int(level, "level", 1, ctx))
        self.current_health = clamp_health(
            self.max_health if current_health is None else current_health,
            self.max_health,
        )
        self.status_effects = StatusLedger()

    # ============================================================================
    # DERIVED STATS
    # ============================================================================

    @property
    def class_template(self) -> Any:
        """Returns the class template of the combatant, None for monsters."""
        return None

    def equipment_bonus(self, slot: EquipmentSlot) -> int:
        """Returns the bonus granted by the item in the given slot."""
        return 0

    @property
    def attack_power(self) -> int:
        return character_stats.attack_power(self)

    @property
    def defense_power(self) -> int:
        return character_stats.defense_power(self)

    @property
    def magic_power(self) -> int:
        return character_stats.magic_power(self)

    @property
    def health_ratio(self) -> float:
        """Returns the current health as a fraction of the maximum."""
        if self.max_health <= 0:
            return 0.0
        return self.current_health / self.max_health

    @property
    def colored_name(self) -> str:
        return f"[bold]{self.name}[/]"

    # ============================================================================
    # HEALTH
    # ============================================================================

    def take_damage(self, amount: int) -> int:
        """
        Reduces the health of the combatant.

        Args:
            amount (int):
                The damage to apply, clamped to the damage bounds.

        Returns:
            int:
                The health actually lost.

        """
        before = self.current_health
        self.current_health = clamp_health(
            self.current_health - clamp_damage(amount), self.max_health
        )
        actual = before - self.current_health
        log_debug(
            f"{self.name} takes {actual} damage (remaining HP: {self.current_health})"
        )
        return actual

    def heal(self, amount: int) -> int:
        """
        Increases the health of the combatant, up to its maximum.

        Dead combatants cannot be healed.

        Args:
            amount (int):
                The amount of healing to apply.

        Returns:
            int:
                The health actually restored.

        """
        if self.is_dead() or amount <= 0:
            return 0
        before = self.current_health
        self.current_health = clamp_health(self.current_health + amount, self.max_health)
        return self.current_health - before

    def set_health(self, value: int) -> None:
        """Sets the current health, clamped to [0, max_health]."""
        self.current_health = clamp_health(value, self.max_health)

    def set_max_health(self, value: int, refill: bool = False) -> None:
        """
        Sets the maximum health, clamping the current health to it.

        Args:
            value (int):
                The new maximum health.
            refill (bool):
                Whether to restore the current health to the new maximum.

        """
        self.max_health = ensure_non_negative_int(value, "max_health", 1, {"name": self.name})
        if refill:
            self.current_health = self.max_health
        else:
            self.current_health = clamp_health(self.current_health, self.max_health)

    def is_alive(self) -> bool:
        """
        Checks if the combatant is alive (hp > 0).

        Returns:
            bool:
                True if the combatant is alive, False otherwise

        """
        return self.current_health > 0

    def is_dead(self) -> bool:
        """
        Checks if the combatant is dead (hp <= 0).

        Returns:
            bool:
                True if the combatant is dead, False otherwise

        """
        return self.current_health <= 0

    # ============================================================================
    # STATUS EFFECTS
    # ============================================================================

    def has_status_effect(self, effect: StatusEffect) -> bool:
        return self.status_effects.has(effect)

    def is_incapacitated(self) -> bool:
        """Check if the combatant has an effect that costs it its turn."""
        return any(effect in self.status_effects for effect in INCAPACITATING_EFFECTS)

    def can_act(self) -> bool:
        """Check if the combatant can take an action this turn."""
        return self.is_alive() and not self.is_incapacitated()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', "
            f"hp={self.current_health}/{self.max_health})"
        )
