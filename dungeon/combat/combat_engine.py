"""
Combat resolution engine.

Turns an attacker, a defender and an attack type into a CombatOutcome:
accuracy and dodge rolls, critical hits, attack-type damage formulas, class
special abilities, monster special attacks, mitigation, and the status
effects each attack applies. Every random decision goes through the engine's
random source, so a scripted source replays an encounter exactly.
"""

from typing import Any

from catchery import log_debug, log_warning

from character.monster import Monster
from character.player import Player
from core.config import DEFAULT_BALANCE, BalanceConfig
from core.constants import AttackResult, AttackType, StatName
from core.rng import RandomSource, SeededRandom
from core.utils import clamp_damage
from effects.status_effect import StatusEffect
from effects.status_table import EffectMessage, apply_status_effect, tick_status_effects
from monsters.monster_ai import choose_special_ability, use_special_attack

from combat.combat_outcome import CombatOutcome

# Effects a MAGIC attack may inflict.
MAGIC_ATTACK_EFFECTS: list[StatusEffect] = [
    StatusEffect.BURN,
    StatusEffect.FREEZE,
    StatusEffect.POISON,
]


class CombatEngine:
    """
    Resolves attacks between players and monsters.

    The engine holds no combat state of its own besides its random source:
    every call takes the combatants explicitly and mutates only them.

    Attributes:
        rng (RandomSource):
            The source of every random decision.
        config (BalanceConfig):
            The tunable balance constants.

    """

    rng: RandomSource
    config: BalanceConfig

    def __init__(
        self,
        rng: RandomSource | None = None,
        config: BalanceConfig = DEFAULT_BALANCE,
    ) -> None:
        self.rng = rng if rng is not None else SeededRandom()
        self.config = config

    # ============================================================================
    # PROBABILITIES
    # ============================================================================

    def player_accuracy(self, player: Player, monster: Monster) -> float:
        """
        Computes the chance that a player attack lands.

        Args:
            player (Player): The attacking player.
            monster (Monster): The defending monster.

        Returns:
            float: The hit probability, not clamped.

        """
        accuracy = self.config.base_hit_chance
        accuracy += player.agility * self.config.agility_hit_factor
        if player.has_status_effect(StatusEffect.HASTE):
            accuracy += self.config.haste_accuracy_bonus
        if player.has_status_effect(StatusEffect.CURSED):
            accuracy -= self.config.cursed_accuracy_penalty
        if monster.has_status_effect(StatusEffect.SHIELD):
            accuracy -= self.config.shield_evasion_bonus
        return accuracy

    def player_critical_chance(self, player: Player) -> float:
        """
        Computes the chance that a player attack is a critical hit.

        Args:
            player (Player): The attacking player.

        Returns:
            float: The critical hit probability.

        """
        chance = player.class_template.critical_hit_chance
        if player.has_status_effect(StatusEffect.RAGE):
            chance += self.config.rage_critical_bonus
        return chance

    def player_dodge_chance(self, player: Player) -> float:
        """
        Computes the chance that a player dodges a monster attack.

        Frozen players cannot dodge.

        Args:
            player (Player): The defending player.

        Returns:
            float: The dodge probability.

        """
        if player.has_status_effect(StatusEffect.FREEZE):
            return 0.0
        chance = player.agility * self.config.agility_dodge_factor
        chance += player.class_template.dodge_bonus
        if player.has_status_effect(StatusEffect.HASTE):
            chance += self.config.haste_dodge_bonus
        return chance

    def player_block_chance(self, player: Player) -> float:
        """
        Computes the chance that a player blocks a monster attack.

        Args:
            player (Player): The defending player.

        Returns:
            float: The block probability.

        """
        chance = player.class_template.block_probability
        if player.has_status_effect(StatusEffect.SHIELD):
            chance += self.config.shield_block_bonus
        return chance

    def _roll_variance(self) -> float:
        spread = self.config.damage_variance
        return (1.0 - spread) + self.rng.random() * (2.0 * spread)

    # ============================================================================
    # PLAYER ATTACKS
    # ============================================================================

    def _player_base_damage(
        self, player: Player, attack_type: AttackType
    ) -> tuple[int, list[StatusEffect], list[StatusEffect], str | None]:
        """
        Computes the base damage of a player attack and the effects it carries.

        Args:
            player (Player): The attacking player.
            attack_type (AttackType): The attack type.

        Returns:
            tuple[int, list[StatusEffect], list[StatusEffect], str | None]:
                - The base damage
                - The effects to apply to the target
                - The effects to apply to the player
                - The name of the special ability used, if any

        """
        target_effects: list[StatusEffect] = []
        self_effects: list[StatusEffect] = []
        ability_name: str | None = None

        if attack_type == AttackType.HEAVY:
            damage = int(player.attack_power * self.config.heavy_multiplier)
            if self.rng.random() < self.config.heavy_stun_chance:
                target_effects.append(StatusEffect.STUN)
        elif attack_type == AttackType.QUICK:
            damage = int(player.attack_power * self.config.quick_multiplier)
        elif attack_type == AttackType.MAGIC:
            damage = player.magic_power
            if self.rng.random() < self.config.magic_effect_chance:
                target_effects.append(self.rng.choice(MAGIC_ATTACK_EFFECTS))
        elif attack_type == AttackType.SPECIAL_ABILITY:
            ability = player.class_template.special_ability
            ability_name = ability.name
            if ability.scaling_stat == StatName.MAGIC:
                power = player.magic_power
            else:
                power = player.attack_power
            damage = int(power * ability.multiplier)
            target_effects.extend(ability.target_effects)
            if ability.random_target_effects:
                target_effects.append(self.rng.choice(ability.random_target_effects))
            self_effects.extend(ability.self_effects)
        else:
            damage = player.attack_power

        return damage, target_effects, self_effects, ability_name

    def player_attacks_monster(
        self,
        player: Player,
        monster: Monster,
        attack_type: AttackType = AttackType.NORMAL,
    ) -> CombatOutcome:
        """
        Resolves a player attack against a monster.

        Args:
            player (Player):
                The attacking player.
            monster (Monster):
                The defending monster.
            attack_type (AttackType):
                The attack type, unknown values fall back to NORMAL.

        Returns:
            CombatOutcome:
                The outcome, the monster has already taken the damage.

        """
        attack_type = AttackType.coerce(attack_type)

        if attack_type == AttackType.DEFENSIVE_STANCE:
            log_debug(f"{player.name} takes a defensive stance.")
            return CombatOutcome(
                result=AttackResult.BLOCKED,
                attack_type=attack_type,
                description=f"🛡️ {player.name} braces for the next attack.",
            )

        if player.is_dead() or monster.is_dead():
            return self._inert_outcome(player, monster, attack_type)
        if player.is_incapacitated():
            return CombatOutcome.miss(
                f"{player.name} cannot act this turn!", attack_type
            )

        # Accuracy roll.
        if self.rng.random() > self.player_accuracy(player, monster):
            return CombatOutcome.miss("🎯 Your attack misses!", attack_type)

        # Critical roll.
        critical = self.rng.random() < self.player_critical_chance(player)

        damage, target_effects, self_effects, ability_name = self._player_base_damage(
            player, attack_type
        )
        if critical:
            damage = int(damage * self.config.critical_multiplier)

        damage = int(damage * self._roll_variance())
        damage = clamp_damage(max(1, damage - monster.defense_power))

        monster.take_damage(damage)

        applied = [e for e in target_effects if apply_status_effect(monster, e)]
        applied_self = [e for e in self_effects if apply_status_effect(player, e)]

        if critical:
            description = "💥 CRITICAL HIT! "
        else:
            description = "⚔️ You strike "
        if ability_name:
            description = f"✨ {player.name} uses {ability_name}! " + description
        description += f"the {monster.name} for {damage} damage!"

        log_debug(
            f"{player.name} -> {monster.name}: {attack_type.name} "
            f"{'critical ' if critical else ''}for {damage} "
            f"(remaining HP: {monster.current_health})"
        )

        return CombatOutcome(
            result=AttackResult.CRITICAL_HIT if critical else AttackResult.HIT,
            attack_type=attack_type,
            damage=damage,
            applied_effects=applied,
            self_effects=applied_self,
            description=description,
            target_defeated=monster.is_dead(),
            special_attack_used=ability_name is not None,
            ability_name=ability_name,
        )

    # ============================================================================
    # MONSTER ATTACKS
    # ============================================================================

    def monster_attacks_player(self, monster: Monster, player: Player) -> CombatOutcome:
        """
        Resolves a monster attack against a player.

        Args:
            monster (Monster):
                The attacking monster.
            player (Player):
                The defending player.

        Returns:
            CombatOutcome:
                The outcome, the player has already taken the damage.

        """
        if monster.is_dead() or player.is_dead():
            return self._inert_outcome(monster, player, AttackType.NORMAL)

        monster.turns_in_combat += 1

        if monster.is_incapacitated():
            return CombatOutcome.miss(f"The {monster.name} cannot act this turn!")

        # A single roll decides both the dodge and the monster accuracy.
        roll = self.rng.random()
        if roll < self.player_dodge_chance(player):
            return CombatOutcome.miss(f"💨 You dodge the {monster.name}'s attack!")
        if roll > monster.accuracy:
            return CombatOutcome.miss(f"🎯 The {monster.name}'s attack misses!")

        damage = monster.calculate_damage(self.rng)

        special = use_special_attack(monster, self.rng, self.config)
        ability_name: str | None = None
        effects: list[StatusEffect] = []
        if special:
            ability_name = choose_special_ability(monster, self.rng)
            damage = int(damage * monster.special_attack_multiplier)
            effects = list(monster.special_attack_effects)
            description = f"💀 {monster.name} uses {ability_name}! "
        else:
            description = f"🗡️ {monster.name} attacks! "

        defense = player.defense_power
        if player.has_status_effect(StatusEffect.SHIELD):
            defense += self.config.shield_guard_bonus
        damage = max(1, damage - defense)

        if self.rng.random() < self.player_block_chance(player):
            result = AttackResult.BLOCKED
            damage = damage // 2
            description += "🛡️ You block some of the damage! "
        else:
            result = AttackResult.HIT

        damage = clamp_damage(damage)
        description += f"You take {damage} damage!"
        player.take_damage(damage)

        applied = [e for e in effects if apply_status_effect(player, e)]

        log_debug(
            f"{monster.name} -> {player.name}: {result.name} for {damage} "
            f"(remaining HP: {player.current_health})"
        )

        return CombatOutcome(
            result=result,
            damage=damage,
            applied_effects=applied,
            description=description,
            target_defeated=player.is_dead(),
            special_attack_used=special,
            ability_name=ability_name,
        )

    # ============================================================================
    # DISPATCH AND TURN BOUNDARIES
    # ============================================================================

    def resolve_attack(
        self,
        attacker: Any,
        defender: Any,
        attack_type: AttackType = AttackType.NORMAL,
    ) -> CombatOutcome:
        """
        Resolves an attack, dispatching on the kind of the combatants.

        Monsters always use their basic attack and the special attack gate,
        the attack type only applies to players.

        Args:
            attacker (Any):
                The attacking combatant.
            defender (Any):
                The defending combatant.
            attack_type (AttackType):
                The attack type, unknown values fall back to NORMAL.

        Returns:
            CombatOutcome:
                The outcome of the attack.

        """
        attack_type = AttackType.coerce(attack_type)
        if isinstance(attacker, Player) and isinstance(defender, Monster):
            return self.player_attacks_monster(attacker, defender, attack_type)
        if isinstance(attacker, Monster) and isinstance(defender, Player):
            return self.monster_attacks_player(attacker, defender)
        log_warning(
            "Unsupported attack between combatants",
            {
                "attacker": type(attacker).__name__,
                "defender": type(defender).__name__,
            },
        )
        return CombatOutcome.miss("Nothing happens.", attack_type)

    def tick_status_effects(self, combatant: Any) -> list[EffectMessage]:
        """Processes one turn of the status effects of a combatant."""
        return tick_status_effects(combatant)

    def process_turn_end(self, *combatants: Any) -> list[EffectMessage]:
        """
        Processes one turn of the status effects of every given combatant.

        Args:
            *combatants (Any):
                The combatants, processed in order.

        Returns:
            list[EffectMessage]:
                The messages of every combatant, in order.

        """
        messages: list[EffectMessage] = []
        for combatant in combatants:
            messages.extend(self.tick_status_effects(combatant))
        return messages

    @staticmethod
    def _inert_outcome(attacker: Any, defender: Any, attack_type: AttackType) -> CombatOutcome:
        if attacker.is_dead():
            description = f"{attacker.name} is dead and cannot attack."
        else:
            description = f"{defender.name} is already dead."
        return CombatOutcome.miss(description, attack_type)
