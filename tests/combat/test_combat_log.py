"""
Tests for the narrative output of combat results.
"""

import pytest
from character.player import create_player
from combat.combat_log import (
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
from combat.combat_outcome import CombatOutcome
from core.constants import AttackResult, PlayerClass
from core.rng import ScriptedRandom
from effects.status_effect import StatusEffect
from effects.status_table import EffectMessage, apply_status_effect
from progression.progression_engine import grant_experience


@pytest.fixture
def mage():
    return create_player("Merlin", PlayerClass.MAGE)


def test_format_outcome_lists_effects():
    outcome = CombatOutcome(
        result=AttackResult.CRITICAL_HIT,
        damage=30,
        applied_effects=[StatusEffect.BURN],
        self_effects=[StatusEffect.RAGE],
        description="Boom",
        target_defeated=True,
    )
    line = format_outcome(outcome)
    assert "Boom" in line
    assert StatusEffect.BURN.display_name in line
    assert StatusEffect.RAGE.display_name in line
    assert "falls" in line


def test_format_outcome_of_a_miss():
    line = format_outcome(CombatOutcome.miss("Whiff"))
    assert "Whiff" in line
    assert "falls" not in line


def test_format_effect_message():
    tick = EffectMessage(effect=StatusEffect.POISON, target="Merlin", amount=-5, description="Ouch")
    gone = EffectMessage(effect=StatusEffect.POISON, target="Merlin", expired=True, description="Gone")
    assert "Ouch" in format_effect_message(tick)
    assert format_effect_message(gone).startswith("[dim]")


def test_format_status_line_shows_mana_and_effects(mage):
    apply_status_effect(mage, StatusEffect.HASTE)
    line = format_status_line(mage)
    assert "80/80" in line
    assert "36/36" in line
    assert f"{StatusEffect.HASTE.emoji}3" in line


def test_format_status_line_without_mana():
    warrior = create_player("Conan", PlayerClass.WARRIOR)
    warrior.max_mana = 0
    line = format_status_line(warrior)
    assert "120/120" in line


def test_format_level_up(mage):
    result = grant_experience(mage, 230, ScriptedRandom([]))
    lines = format_level_up(mage, result)
    assert len(lines) == 2
    assert "level [bold]2[/]" in lines[0]
    assert "level [bold]3[/]" in lines[1]


def test_no_level_up_lines(mage):
    result = grant_experience(mage, 10, ScriptedRandom([]))
    assert format_level_up(mage, result) == []


def test_is_noteworthy():
    assert is_noteworthy(CombatOutcome(result=AttackResult.CRITICAL_HIT, damage=5))
    assert is_noteworthy(CombatOutcome(result=AttackResult.HIT, damage=5, target_defeated=True))
    assert not is_noteworthy(CombatOutcome(result=AttackResult.HIT, damage=5))


def test_print_helpers_use_the_console(mage, mocker):
    mock_print = mocker.patch("combat.combat_log.cprint")
    mock_rule = mocker.patch("combat.combat_log.crule")
    print_outcome(CombatOutcome.miss("Whiff"))
    print_effect_messages(
        [
            EffectMessage(effect=StatusEffect.BURN, target="Merlin", amount=-8),
            EffectMessage(effect=StatusEffect.BURN, target="Merlin", expired=True),
        ]
    )
    print_round_summary(1, mage)
    print_level_up(mage, grant_experience(mage, 100, ScriptedRandom([])))
    mock_rule.assert_called_once()
    assert mock_print.call_count == 5
