"""
Character inventory management module for the engine.

Handles the bounded item list of a player and its equipment slots. An item is
held either in the inventory or in exactly one equipment slot, never both.
"""

from typing import Any

from catchery import log_debug, log_warning

from core.constants import MAX_INVENTORY_SIZE, EquipmentSlot
from core.error_handling import InvalidEquipSlot
from items.item import Item


class CharacterInventory:
    """
    Manages the carried items and the equipment of a player.

    Attributes:
        items (list[Item]):
            Carried items, in pickup order.
        equipment (dict[EquipmentSlot, Item | None]):
            The item in each equipment slot.
        max_size (int):
            Maximum number of carried items.

    """

    items: list[Item]
    equipment: dict[EquipmentSlot, Item | None]
    max_size: int

    def __init__(self, owner: Any, max_size: int = MAX_INVENTORY_SIZE) -> None:
        """
        Initialize the CharacterInventory with the owning player.

        Args:
            owner (Any):
                The Player instance this inventory belongs to.
            max_size (int):
                Maximum number of carried items.

        """
        self._owner = owner
        self.items = []
        self.equipment = {slot: None for slot in EquipmentSlot}
        self.max_size = max_size

    def is_full(self) -> bool:
        return len(self.items) >= self.max_size

    def contains(self, item: Item) -> bool:
        """Checks if this exact item instance is carried."""
        return any(carried is item for carried in self.items)

    def add_item(self, item: Item) -> bool:
        """
        Adds an item to the inventory.

        Args:
            item (Item):
                The item to add.

        Returns:
            bool:
                True if the item was added, False if the inventory is full or
                the item is already held.

        """
        if self.is_full():
            log_debug(f"{self._owner.name} cannot carry {item.name}, inventory full.")
            return False
        if self.contains(item) or self.is_equipped(item):
            log_warning(
                f"{item.name} is already held by {self._owner.name}",
                {"item": item.name, "owner": self._owner.name},
            )
            return False
        self.items.append(item)
        return True

    def remove_item(self, item: Item) -> bool:
        """
        Removes this exact item instance from the inventory.

        Returns:
            bool: True if the item was carried and has been removed.

        """
        for index, carried in enumerate(self.items):
            if carried is item:
                del self.items[index]
                return True
        return False

    def find_item(self, name: str) -> Item | None:
        """
        Finds the first carried item with the given name, ignoring case.

        Args:
            name (str): The name to look for.

        Returns:
            Item | None: The item if found, None otherwise.

        """
        key = name.strip().lower()
        for item in self.items:
            if item.name.lower() == key:
                return item
        return None

    def equipped(self, slot: EquipmentSlot) -> Item | None:
        return self.equipment[slot]

    def is_equipped(self, item: Item) -> bool:
        return any(equipped is item for equipped in self.equipment.values())

    def equip(self, item: Item, slot: EquipmentSlot | None = None) -> bool:
        """
        Equips an item, moving the previous occupant of the slot back into the
        inventory.

        Args:
            item (Item):
                The item to equip, carried or not.
            slot (EquipmentSlot | None):
                The target slot, the slot matching the item type if None.

        Raises:
            InvalidEquipSlot: If the item does not fit the slot.

        Returns:
            bool:
                True if the item was equipped, False if the previous item
                could not be moved back into a full inventory.

        """
        target = slot if slot is not None else item.slot
        if target is None or item.item_type != target.item_type:
            raise InvalidEquipSlot(
                item.name, item.item_type, target if target is not None else "equipment"
            )
        if self.equipment[target] is item:
            return True
        previous = self.equipment[target]
        carried = self.contains(item)
        if previous is not None and not carried and self.is_full():
            log_warning(
                f"Cannot swap {previous.name} for {item.name}, inventory full",
                {"owner": self._owner.name, "slot": target.name},
            )
            return False
        if carried:
            self.remove_item(item)
        self.equipment[target] = item
        if previous is not None:
            self.items.append(previous)
        log_debug(f"{self._owner.name} equips {item.name} in the {target.display_name} slot.")
        return True

    def unequip(self, slot: EquipmentSlot) -> Item | None:
        """
        Moves the item of a slot back into the inventory.

        Args:
            slot (EquipmentSlot):
                The slot to empty.

        Returns:
            Item | None:
                The unequipped item, None if the slot was empty or the
                inventory is full.

        """
        item = self.equipment[slot]
        if item is None:
            return None
        if self.is_full():
            log_warning(
                f"Cannot unequip {item.name}, inventory full",
                {"owner": self._owner.name, "slot": slot.name},
            )
            return None
        self.equipment[slot] = None
        self.items.append(item)
        return item

    def equipment_bonus(self, slot: EquipmentSlot) -> int:
        """
        Returns the stat bonus granted by the item in a slot.

        Accessories only count when magical.

        Args:
            slot (EquipmentSlot): The slot to inspect.

        Returns:
            int: The bonus, 0 for an empty slot.

        """
        item = self.equipment[slot]
        if item is None:
            return 0
        if slot == EquipmentSlot.ACCESSORY and not item.magical:
            return 0
        return item.value

    def __len__(self) -> int:
        return len(self.items)
