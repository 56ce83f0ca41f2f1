"""
Monster module for the engine.

Defines the Monster combatant. Monsters are built already scaled by the
monster factory, so their derived stats have no level or class terms.
"""

from typing import Any

from core.constants import MonsterBehavior, MonsterFamily, MonsterType
from core.error_handling import ensure_non_negative_int
from core.rng import RandomSource
from core.utils import clamp_damage
from effects.status_effect import StatusEffect

from .combatant import Combatant


class Monster(Combatant):
    """
    A hostile combatant.

    Attributes:
        monster_type (MonsterType):
            Tier of the monster.
        family (MonsterFamily):
            Taxonomy of the monster.
        behavior (MonsterBehavior):
            How eagerly the monster uses its special attack.
        accuracy (float):
            Probability in (0, 1] that an attack lands.
        special_abilities (list[str]):
            Names announced when the special attack is used.
        special_attack_chance (float):
            Base probability of using the special attack.
        special_attack_multiplier (float):
            Damage multiplier of the special attack.
        special_attack_effects (list[StatusEffect]):
            Effects the special attack applies to its target.
        special_attack_cooldown (int):
            Turns left before the special attack can be used again.
        turns_in_combat (int):
            Number of attacks made in the current encounter.
        experience_reward (int):
            Experience granted when defeated.

    """

    monster_type: MonsterType
    family: MonsterFamily
    behavior: MonsterBehavior
    special_abilities: list[str]
    special_attack_chance: float
    special_attack_multiplier: float
    special_attack_effects: list[StatusEffect]
    special_attack_cooldown: int
    turns_in_combat: int
    experience_reward: int

    def __init__(
        self,
        name: str,
        monster_type: MonsterType,
        family: MonsterFamily,
        max_health: int,
        attack: int,
        defense: int,
        agility: int,
        accuracy: float,
        special_abilities: list[str] | None = None,
        special_attack_chance: float = 0.0,
        special_attack_multiplier: float = 1.0,
        behavior: MonsterBehavior = MonsterBehavior.AGGRESSIVE,
        special_attack_effects: list[StatusEffect] | None = None,
        level: int = 1,
        experience_reward: int = 0,
    ) -> None:
        if not 0.0 < accuracy <= 1.0:
            raise ValueError(f"Monster accuracy must be in (0, 1], got {accuracy}.")
        super().__init__(
            name=name,
            max_health=max_health,
            attack=attack,
            defense=defense,
            agility=agility,
            accuracy=float(accuracy),
            level=level,
        )
        self.monster_type = monster_type
        self.family = family
        self.behavior = behavior
        self.special_abilities = list(special_abilities or [])
        self.special_attack_chance = max(0.0, min(1.0, special_attack_chance))
        self.special_attack_multiplier = max(1.0, special_attack_multiplier)
        self.special_attack_effects = list(special_attack_effects or [])
        self.special_attack_cooldown = 0
        self.turns_in_combat = 0
        self.experience_reward = ensure_non_negative_int(
            experience_reward, "experience_reward", 0, {"name": name}
        )

    @property
    def is_boss(self) -> bool:
        return self.monster_type == MonsterType.BOSS

    @property
    def colored_name(self) -> str:
        return self.monster_type.colorize(self.name)

    def calculate_damage(self, rng: RandomSource) -> int:
        """
        Rolls the raw damage of a basic attack.

        Args:
            rng (RandomSource):
                The random source to draw from.

        Returns:
            int:
                attack_power plus a random share of it, clamped.

        """
        power = self.attack_power
        return clamp_damage(power + int(rng.random() * power))

    def reset_combat_state(self) -> None:
        """Clears the per-encounter counters."""
        self.turns_in_combat = 0
        self.special_attack_cooldown = 0

    def __repr__(self) -> str:
        return (
            f"Monster(name='{self.name}', type={self.monster_type}, "
            f"hp={self.current_health}/{self.max_health})"
        )


def describe_monster(monster: Any) -> str:
    """Returns a one-line rich markup summary of a monster."""
    return (
        f"{monster.colored_name} [dim]({monster.family.display_name}, "
        f"{monster.monster_type.display_name})[/] "
        f"HP {monster.current_health}/{monster.max_health} "
        f"ATK {monster.attack_power} DEF {monster.defense_power}"
    )
