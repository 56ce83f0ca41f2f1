"""
Narrative output of combat results.

Formats outcomes, effect messages, level-ups and combatant status lines as
rich markup, and prints them through the shared console. Resolution code
never prints; callers decide what to show.
"""

from typing import Any

from core.constants import AttackResult
from core.utils import cprint, crule, make_bar
from effects.status_table import EffectMessage
from progression.progression_engine import LevelUpResult

from combat.combat_outcome import CombatOutcome


def format_outcome(outcome: CombatOutcome) -> str:
    """
    Formats an attack outcome as a single markup line.

    Args:
        outcome (CombatOutcome): The outcome to format.

    Returns:
        str: The formatted line.

    """
    line = f"{outcome.result.emoji} [{outcome.result.color}]{outcome.description}[/]"
    effects = outcome.applied_effects + outcome.self_effects
    if effects:
        line += " " + " ".join(f"{e.emoji} {e.colored_name}" for e in effects)
    if outcome.target_defeated:
        line += " [bold red]The target falls![/]"
    return line


def format_effect_message(message: EffectMessage) -> str:
    effect = message.effect
    if message.expired:
        return f"[dim]✨ {message.description}[/]"
    return f"{effect.emoji} [{effect.color}]{message.description}[/]"


def format_status_line(combatant: Any) -> str:
    """
    Formats the health, mana and active effects of a combatant.

    Args:
        combatant (Any): The combatant to describe.

    Returns:
        str: The formatted status line.

    """
    hp_bar = make_bar(combatant.current_health, combatant.max_health, color="green")
    line = (
        f"{combatant.colored_name:<24} {hp_bar} "
        f"{combatant.current_health:>4}/{combatant.max_health:<4}"
    )
    if hasattr(combatant, "max_mana") and combatant.max_mana > 0:
        mana_bar = make_bar(combatant.mana, combatant.max_mana, color="blue")
        line += f" {mana_bar} {combatant.mana}/{combatant.max_mana}"
    effects = combatant.status_effects.entries()
    if effects:
        line += " " + " ".join(
            f"{effect.emoji}{turns}" for effect, turns in effects.items()
        )
    return line


def format_level_up(player: Any, result: LevelUpResult) -> list[str]:
    """
    Formats the gains of an experience grant, one line per level reached.

    Args:
        player (Any): The player who received the experience.
        result (LevelUpResult): The result of the grant.

    Returns:
        list[str]: The formatted lines, empty if no level was reached.

    """
    lines: list[str] = []
    for gains in result.gains:
        lines.append(
            f"⭐ {player.colored_name} reaches level [bold]{gains.level}[/]! "
            f"HP +{gains.health}, ATK +{gains.attack}, DEF +{gains.defense}, "
            f"MAG +{gains.magic}, AGI +{gains.agility}, LCK +{gains.luck}, "
            f"MANA +{gains.mana}"
        )
    return lines


def print_outcome(outcome: CombatOutcome) -> None:
    cprint(format_outcome(outcome))


def print_effect_messages(messages: list[EffectMessage]) -> None:
    for message in messages:
        cprint(format_effect_message(message))


def print_round_summary(round_number: int, *combatants: Any) -> None:
    """Prints a rule followed by the status line of every combatant."""
    crule(f"Round {round_number}", style="cyan")
    for combatant in combatants:
        cprint(format_status_line(combatant))


def print_level_up(player: Any, result: LevelUpResult) -> None:
    for line in format_level_up(player, result):
        cprint(line)


def is_noteworthy(outcome: CombatOutcome) -> bool:
    """Whether an outcome deserves highlighting: a critical hit or a kill."""
    return outcome.result == AttackResult.CRITICAL_HIT or outcome.target_defeated
