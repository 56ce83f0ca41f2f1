"""
Item module for the engine.

Defines the Item model: weapons, armor and accessories feed the derived
stats of their wearer, consumables restore health when used, key items are
carried for the story and do nothing when used.
"""

from typing import Any

from catchery import log_debug
from pydantic import BaseModel, Field

from core.constants import EquipmentSlot, ItemType


class Item(BaseModel):
    """
    An item a player can carry, equip or use.

    Equipment adds its value to the stat governed by its slot: weapons to
    attack, armor to defense and magical accessories to magic.
    """

    name: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        "",
        description="A short description of the item.",
    )
    item_type: ItemType = Field(
        description="The kind of item.",
    )
    value: int = Field(
        0,
        ge=0,
        description="Stat bonus for equipment, health restored for consumables.",
    )
    consumable: bool = Field(
        False,
        description="Whether the item is removed from the inventory after use.",
    )
    magical: bool = Field(
        False,
        description="Whether an accessory adds its value to magic power.",
    )

    def model_post_init(self, _: Any) -> None:
        if self.item_type == ItemType.CONSUMABLE:
            self.consumable = True
        if self.item_type == ItemType.ACCESSORY and "magic" in self.name.lower():
            self.magical = True

    @property
    def is_equipment(self) -> bool:
        return self.item_type in (ItemType.WEAPON, ItemType.ARMOR, ItemType.ACCESSORY)

    @property
    def slot(self) -> EquipmentSlot | None:
        """Returns the equipment slot this item fits in, None if not equipment."""
        if not self.is_equipment:
            return None
        return EquipmentSlot[self.item_type.value]

    def use(self, player: Any) -> bool:
        """
        Applies the effect of the item to a player.

        Args:
            player (Any):
                The player using the item.

        Returns:
            bool:
                True if the item had an effect, False otherwise.

        """
        if self.item_type == ItemType.CONSUMABLE:
            healed = player.heal(self.value)
            log_debug(f"{player.name} uses {self.name} and recovers {healed} health.")
            return True
        log_debug(f"{self.name} has no effect when used.")
        return False

    def __str__(self) -> str:
        return f"{self.name} ({self.item_type.display_name}, {self.value})"
