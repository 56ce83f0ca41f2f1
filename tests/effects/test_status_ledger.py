"""
Tests for the per-combatant status ledger.
"""

import pytest
from core.constants import StatName
from effects.status_effect import STATUS_EFFECT_TABLE, EffectKind, StatusEffect
from effects.status_ledger import StatusLedger


@pytest.fixture
def ledger():
    return StatusLedger()


def test_every_effect_has_a_table_entry():
    for effect in StatusEffect:
        entry = STATUS_EFFECT_TABLE[effect]
        assert entry.effect is effect
        assert entry.duration > 0


@pytest.mark.parametrize(
    "effect, duration, magnitude",
    [
        (StatusEffect.POISON, 3, -5),
        (StatusEffect.BURN, 2, -8),
        (StatusEffect.FREEZE, 1, 0),
        (StatusEffect.STUN, 1, 0),
        (StatusEffect.RAGE, 3, 10),
        (StatusEffect.BLESSED, 5, 5),
        (StatusEffect.CURSED, 4, -10),
        (StatusEffect.HASTE, 3, 0),
        (StatusEffect.SHIELD, 2, 0),
        (StatusEffect.REGENERATION, 4, 3),
    ],
)
def test_catalog_values(effect, duration, magnitude):
    assert effect.duration == duration
    assert effect.damage_per_turn == magnitude


def test_only_hit_point_effects_tick_health():
    ticking = {e for e in StatusEffect if e.definition.kind == EffectKind.HIT_POINTS}
    assert ticking == {
        StatusEffect.POISON,
        StatusEffect.BURN,
        StatusEffect.BLESSED,
        StatusEffect.REGENERATION,
    }


def test_apply_uses_default_duration(ledger):
    assert ledger.apply(StatusEffect.POISON) == 3
    assert ledger.remaining(StatusEffect.POISON) == 3
    assert ledger.has(StatusEffect.POISON)


def test_reapply_refreshes_to_the_longer_duration(ledger):
    ledger.apply(StatusEffect.POISON)
    # A shorter application never shortens the effect.
    assert ledger.apply(StatusEffect.POISON, 1) == 3
    # A longer one extends it, without adding up.
    assert ledger.apply(StatusEffect.POISON, 5) == 5
    assert len(ledger) == 1


def test_non_positive_duration_is_ignored(ledger):
    assert ledger.apply(StatusEffect.BURN, 0) == 0
    assert ledger.apply(StatusEffect.BURN, -2) == 0
    assert not ledger.has(StatusEffect.BURN)


def test_decrement_removes_at_zero(ledger):
    ledger.apply(StatusEffect.SHIELD)
    assert ledger.decrement(StatusEffect.SHIELD) == 1
    assert ledger.has(StatusEffect.SHIELD)
    assert ledger.decrement(StatusEffect.SHIELD) == 0
    assert not ledger.has(StatusEffect.SHIELD)
    assert StatusEffect.SHIELD not in ledger.entries()


def test_decrement_of_absent_effect_is_harmless(ledger):
    assert ledger.decrement(StatusEffect.HASTE) == 0
    assert len(ledger) == 0


def test_remove_and_clear(ledger):
    ledger.apply(StatusEffect.RAGE)
    ledger.apply(StatusEffect.HASTE)
    assert ledger.remove(StatusEffect.RAGE)
    assert not ledger.remove(StatusEffect.RAGE)
    ledger.clear()
    assert len(ledger) == 0


def test_entries_is_a_copy(ledger):
    ledger.apply(StatusEffect.RAGE)
    entries = ledger.entries()
    entries[StatusEffect.RAGE] = 99
    assert ledger.remaining(StatusEffect.RAGE) == 3


def test_modifiers_sum_active_effects(ledger):
    ledger.apply(StatusEffect.SHIELD)
    assert ledger.modifiers() == {StatName.DEFENSE: 15}
    ledger.apply(StatusEffect.RAGE)
    assert ledger.modifiers()[StatName.ATTACK] == 10
    # Rage and Curse cancel out.
    ledger.apply(StatusEffect.CURSED)
    assert StatName.ATTACK not in ledger.modifiers()


def test_iteration_allows_removal(ledger):
    ledger.apply(StatusEffect.STUN)
    ledger.apply(StatusEffect.FREEZE)
    for effect in ledger:
        ledger.decrement(effect)
    assert len(ledger) == 0


def test_iteration_follows_application_order(ledger):
    ledger.apply(StatusEffect.BURN)
    ledger.apply(StatusEffect.POISON)
    ledger.apply(StatusEffect.HASTE)
    assert list(ledger) == [StatusEffect.BURN, StatusEffect.POISON, StatusEffect.HASTE]
