"""
Tests for inventory and equipment management.
"""

import pytest
from character.player import create_player
from core.constants import EquipmentSlot, ItemType, PlayerClass
from core.error_handling import InvalidEquipSlot
from items.item import Item


@pytest.fixture
def rogue():
    return create_player("Shade", PlayerClass.ROGUE)


@pytest.fixture
def dagger():
    return Item(name="Dagger", item_type=ItemType.WEAPON, value=4)


@pytest.fixture
def sword():
    return Item(name="Short Sword", item_type=ItemType.WEAPON, value=6)


def _fill(player):
    while not player.inventory.is_full():
        player.add_item(Item(name="Pebble", item_type=ItemType.KEY_ITEM))


def test_equip_from_inventory_moves_the_item(rogue, dagger):
    rogue.add_item(dagger)
    assert rogue.equip(dagger)
    assert rogue.inventory.equipped(EquipmentSlot.WEAPON) is dagger
    assert not rogue.inventory.contains(dagger)


def test_equip_swaps_previous_item_back(rogue, dagger, sword):
    rogue.equip(dagger)
    rogue.add_item(sword)
    assert rogue.equip(sword)
    assert rogue.inventory.equipped(EquipmentSlot.WEAPON) is sword
    assert rogue.inventory.contains(dagger)
    assert not rogue.inventory.contains(sword)


def test_item_is_never_in_two_places(rogue, dagger, mocker):
    mock_warning = mocker.patch("character.character_inventory.log_warning")
    rogue.add_item(dagger)
    rogue.equip(dagger)
    # Picking up an already equipped item is refused.
    assert not rogue.inventory.add_item(dagger)
    holders = int(rogue.inventory.contains(dagger)) + int(rogue.inventory.is_equipped(dagger))
    assert holders == 1
    mock_warning.assert_called_once()


def test_equip_wrong_slot_raises(rogue, dagger):
    with pytest.raises(InvalidEquipSlot) as info:
        rogue.equip(dagger, EquipmentSlot.ARMOR)
    assert info.value.item_name == "Dagger"
    assert rogue.inventory.equipped(EquipmentSlot.ARMOR) is None


def test_equip_non_equipment_raises(rogue):
    potion = Item(name="Health Potion", item_type=ItemType.CONSUMABLE, value=25)
    with pytest.raises(InvalidEquipSlot):
        rogue.equip(potion)


def test_unequip_returns_item_to_inventory(rogue, dagger):
    rogue.equip(dagger)
    assert rogue.unequip(EquipmentSlot.WEAPON) is dagger
    assert rogue.inventory.contains(dagger)
    assert rogue.inventory.equipped(EquipmentSlot.WEAPON) is None


def test_unequip_empty_slot(rogue):
    assert rogue.unequip(EquipmentSlot.ARMOR) is None


def test_unequip_refused_when_inventory_full(rogue, dagger, mocker):
    mocker.patch("character.character_inventory.log_warning")
    rogue.equip(dagger)
    _fill(rogue)
    assert rogue.unequip(EquipmentSlot.WEAPON) is None
    assert rogue.inventory.equipped(EquipmentSlot.WEAPON) is dagger


def test_swap_refused_when_inventory_full(rogue, dagger, sword, mocker):
    mock_warning = mocker.patch("character.character_inventory.log_warning")
    rogue.equip(dagger)
    _fill(rogue)
    assert not rogue.equip(sword)
    mock_warning.assert_called_once()
    assert rogue.inventory.equipped(EquipmentSlot.WEAPON) is dagger


def test_swap_from_full_inventory_frees_a_place(rogue, dagger, sword):
    rogue.equip(dagger)
    _fill(rogue)
    rogue.inventory.items[-1] = sword
    assert rogue.equip(sword)
    assert rogue.inventory.contains(dagger)
    assert len(rogue.inventory) == rogue.inventory.max_size


def test_find_item_ignores_case(rogue, dagger):
    rogue.add_item(dagger)
    assert rogue.inventory.find_item("DAGGER") is dagger
    assert rogue.inventory.find_item("axe") is None


def test_item_slot_mapping():
    assert Item(name="Mail", item_type=ItemType.ARMOR).slot == EquipmentSlot.ARMOR
    assert Item(name="Key", item_type=ItemType.KEY_ITEM).slot is None
    assert Item(name="Potion", item_type=ItemType.CONSUMABLE).consumable
