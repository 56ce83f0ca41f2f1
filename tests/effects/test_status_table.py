"""
Tests for status effect application and per-turn processing.
"""

import pytest
from character.combatant import Combatant
from effects.status_effect import StatusEffect
from effects.status_table import apply_status_effect, tick_status_effects


@pytest.fixture
def target():
    return Combatant(name="Target", max_health=100, attack=10, defense=5)


def test_apply_to_living_combatant(target):
    assert apply_status_effect(target, StatusEffect.POISON)
    assert target.status_effects.remaining(StatusEffect.POISON) == 3


def test_apply_to_dead_combatant_is_a_no_op(target):
    target.take_damage(500)
    assert target.is_dead()
    assert not apply_status_effect(target, StatusEffect.POISON)
    assert len(target.status_effects) == 0


def test_apply_with_non_positive_duration_is_rejected(target, mocker):
    mock_warning = mocker.patch("effects.status_table.log_warning")
    assert not apply_status_effect(target, StatusEffect.BURN, 0)
    assert not target.has_status_effect(StatusEffect.BURN)
    mock_warning.assert_called_once()


def test_poison_ticks_until_expiry(target):
    apply_status_effect(target, StatusEffect.POISON)

    first = tick_status_effects(target)
    assert target.current_health == 95
    assert len(first) == 1
    assert first[0].amount == -5
    assert not first[0].expired

    tick_status_effects(target)
    last = tick_status_effects(target)
    assert target.current_health == 85
    assert [m.expired for m in last] == [False, True]
    assert not target.has_status_effect(StatusEffect.POISON)

    # Nothing left to process.
    assert tick_status_effects(target) == []
    assert target.current_health == 85


def test_stun_expires_after_one_tick(target):
    apply_status_effect(target, StatusEffect.STUN)
    assert not target.can_act()
    messages = tick_status_effects(target)
    assert len(messages) == 1
    assert messages[0].expired
    assert target.status_effects.entries() == {}
    assert target.can_act()


def test_blessed_heals_the_holder(target):
    target.set_health(50)
    apply_status_effect(target, StatusEffect.BLESSED)
    messages = tick_status_effects(target)
    assert target.current_health == 55
    assert messages[0].amount == 5


def test_healing_never_exceeds_maximum(target):
    target.set_health(99)
    apply_status_effect(target, StatusEffect.REGENERATION)
    tick_status_effects(target)
    assert target.current_health == 100
    messages = tick_status_effects(target)
    assert messages[0].amount == 0


def test_stat_effects_do_not_touch_health(target):
    apply_status_effect(target, StatusEffect.RAGE)
    apply_status_effect(target, StatusEffect.CURSED)
    messages = tick_status_effects(target)
    assert target.current_health == 100
    assert messages == []
    assert target.status_effects.remaining(StatusEffect.RAGE) == 2
    assert target.status_effects.remaining(StatusEffect.CURSED) == 3


def test_reapplying_refreshes_a_ticked_effect(target):
    apply_status_effect(target, StatusEffect.POISON)
    tick_status_effects(target)
    assert target.status_effects.remaining(StatusEffect.POISON) == 2
    apply_status_effect(target, StatusEffect.POISON)
    assert target.status_effects.remaining(StatusEffect.POISON) == 3


def test_lethal_tick_stops_further_healing(target):
    target.set_health(4)
    apply_status_effect(target, StatusEffect.POISON)
    apply_status_effect(target, StatusEffect.REGENERATION)
    messages = tick_status_effects(target)
    assert target.is_dead()
    assert target.current_health == 0
    assert [m.effect for m in messages] == [StatusEffect.POISON]


def test_dead_combatant_effects_run_out(target):
    apply_status_effect(target, StatusEffect.POISON)
    apply_status_effect(target, StatusEffect.BURN)
    target.take_damage(1000)

    assert tick_status_effects(target) == []
    assert target.status_effects.remaining(StatusEffect.POISON) == 2
    assert target.status_effects.remaining(StatusEffect.BURN) == 1

    messages = tick_status_effects(target)
    assert [(m.effect, m.expired) for m in messages] == [(StatusEffect.BURN, True)]

    messages = tick_status_effects(target)
    assert [(m.effect, m.expired) for m in messages] == [(StatusEffect.POISON, True)]
    assert len(target.status_effects) == 0
    assert target.current_health == 0
