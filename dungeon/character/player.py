"""
Player module for the engine.

Defines the Player combatant: class, level and experience, mana and spells,
inventory and equipment, and the exploration counters kept for the
progression and achievement collaborators.
"""

from catchery import log_debug, log_warning

from core.constants import BASE_EXPERIENCE_THRESHOLD, EquipmentSlot, ItemType, PlayerClass
from core.error_handling import ensure_non_negative_int, require_enum_type
from items.item import Item

from .character_class import CharacterClass, get_class_template
from .character_inventory import CharacterInventory
from .combatant import Combatant

# Mana cost of the known spells, unlisted spells use the default.
SPELL_MANA_COSTS: dict[str, int] = {
    "Fireball": 8,
    "Heal": 6,
    "Holy Strike": 10,
    "Divine Heal": 12,
    "Dark Bolt": 7,
    "Life Drain": 9,
}
DEFAULT_SPELL_COST = 5


def spell_mana_cost(spell_name: str) -> int:
    """Returns the mana cost of a spell."""
    return SPELL_MANA_COSTS.get(spell_name, DEFAULT_SPELL_COST)


class Player(Combatant):
    """
    The player character.

    Attributes:
        player_class (PlayerClass):
            The class picked at character selection.
        experience (int):
            Experience accumulated towards the next level.
        experience_to_next_level (int):
            Experience needed to reach the next level.
        mana (int):
            Current mana.
        max_mana (int):
            Upper bound of the mana.
        known_spells (list[str]):
            Names of the spells the player can cast.
        dungeon_level (int):
            Deepest dungeon level reached.
        inventory (CharacterInventory):
            Carried items and equipment.
        rooms_explored (int):
            Number of rooms explored.
        monsters_defeated (int):
            Number of monsters defeated.
        items_found (int):
            Number of items picked up.
        potions_used (int):
            Number of consumables used.

    """

    player_class: PlayerClass
    experience: int
    experience_to_next_level: int
    mana: int
    max_mana: int
    known_spells: list[str]
    dungeon_level: int
    inventory: CharacterInventory
    rooms_explored: int
    monsters_defeated: int
    items_found: int
    potions_used: int

    def __init__(
        self,
        name: str,
        player_class: PlayerClass,
        max_health: int,
        attack: int,
        defense: int,
        magic: int,
        agility: int,
        luck: int,
        accuracy: int,
        critical_chance: int,
        block_chance: int,
        max_mana: int = 0,
        level: int = 1,
    ) -> None:
        super().__init__(
            name=name,
            max_health=max_health,
            attack=attack,
            defense=defense,
            magic=magic,
            agility=agility,
            luck=luck,
            accuracy=ensure_non_negative_int(accuracy, "accuracy", 0, {"name": name}),
            critical_chance=critical_chance,
            block_chance=block_chance,
            level=level,
        )
        self.player_class = require_enum_type(player_class, PlayerClass, "player_class")
        self.experience = 0
        self.experience_to_next_level = BASE_EXPERIENCE_THRESHOLD
        self.max_mana = ensure_non_negative_int(max_mana, "max_mana", 0, {"name": name})
        self.mana = self.max_mana
        self.known_spells = []
        self.dungeon_level = 1
        self.inventory = CharacterInventory(owner=self)
        self.rooms_explored = 0
        self.monsters_defeated = 0
        self.items_found = 0
        self.potions_used = 0

    @property
    def class_template(self) -> CharacterClass:
        return get_class_template(self.player_class)

    @property
    def colored_name(self) -> str:
        return self.player_class.colorize(self.name)

    def equipment_bonus(self, slot: EquipmentSlot) -> int:
        return self.inventory.equipment_bonus(slot)

    # ============================================================================
    # ITEMS
    # ============================================================================

    def add_item(self, item: Item) -> bool:
        """
        Adds an item to the inventory.

        Args:
            item (Item):
                The item to add.

        Returns:
            bool:
                True if the item was added, False if the inventory is full.

        """
        if not self.inventory.add_item(item):
            return False
        self.items_found += 1
        return True

    def use_item(self, item_name: str) -> bool:
        """
        Uses a carried item, looked up by name ignoring case.

        Consumable items are removed from the inventory after use.

        Args:
            item_name (str):
                Name of the item to use.

        Returns:
            bool:
                True if the item was found and used, False otherwise.

        """
        item = self.inventory.find_item(item_name)
        if item is None:
            log_debug(f"{self.name} has no item named '{item_name}'.")
            return False
        item.use(self)
        if item.consumable:
            self.inventory.remove_item(item)
            if item.item_type == ItemType.CONSUMABLE:
                self.potions_used += 1
        return True

    def equip(self, item: Item, slot: EquipmentSlot | None = None) -> bool:
        """
        Equips an item. See CharacterInventory.equip.

        Raises:
            InvalidEquipSlot: If the item does not fit the slot.

        """
        return self.inventory.equip(item, slot)

    def unequip(self, slot: EquipmentSlot) -> Item | None:
        return self.inventory.unequip(slot)

    # ============================================================================
    # MANA AND SPELLS
    # ============================================================================

    def spend_mana(self, amount: int) -> bool:
        """
        Reduces the mana by the given amount, if the player has enough.

        Args:
            amount (int):
                The mana to spend.

        Returns:
            bool:
                True if the mana was spent, False otherwise.

        """
        amount = ensure_non_negative_int(amount, "amount", 0, {"name": self.name})
        if self.mana < amount:
            return False
        self.mana -= amount
        return True

    def restore_mana(self, amount: int) -> int:
        """
        Increases the mana by the given amount, up to max_mana.

        Returns:
            int: The mana actually restored.

        """
        amount = ensure_non_negative_int(amount, "amount", 0, {"name": self.name})
        before = self.mana
        self.mana = min(self.max_mana, self.mana + amount)
        return self.mana - before

    def knows_spell(self, spell_name: str) -> bool:
        return spell_name in self.known_spells

    def learn_spell(self, spell_name: str) -> bool:
        """
        Adds a spell to the known spells.

        Returns:
            bool: True if the spell was new.

        """
        if self.knows_spell(spell_name):
            return False
        self.known_spells.append(spell_name)
        return True

    def can_cast_spell(self, spell_name: str) -> bool:
        return self.knows_spell(spell_name) and self.mana >= spell_mana_cost(spell_name)

    def cast_spell(self, spell_name: str) -> bool:
        """
        Pays the mana cost of a known spell.

        The effect of the spell is resolved by the caller.

        Args:
            spell_name (str):
                The spell to cast.

        Returns:
            bool:
                True if the spell was cast, False if unknown or too costly.

        """
        if not self.knows_spell(spell_name):
            log_warning(
                f"{self.name} does not know {spell_name}",
                {"name": self.name, "spell": spell_name},
            )
            return False
        return self.spend_mana(spell_mana_cost(spell_name))

    # ============================================================================
    # COUNTERS
    # ============================================================================

    def record_room_explored(self) -> None:
        self.rooms_explored += 1

    def record_monster_defeated(self) -> None:
        self.monsters_defeated += 1


def create_player(name: str, player_class: PlayerClass) -> Player:
    """
    Creates a level 1 player seeded with the starting stats of its class.

    Args:
        name (str):
            The name of the player.
        player_class (PlayerClass):
            The class picked at character selection.

    Returns:
        Player:
            The new player, at full health and mana.

    """
    template = get_class_template(player_class)
    player = Player(
        name=name,
        player_class=player_class,
        max_health=template.base_health,
        attack=template.base_attack,
        defense=template.base_defense,
        magic=template.base_magic,
        agility=template.base_agility,
        luck=template.base_luck,
        accuracy=template.base_accuracy,
        critical_chance=template.base_critical,
        block_chance=template.base_block,
        max_mana=template.base_magic * 2,
    )
    for spell in template.starting_spells:
        player.learn_spell(spell)
    log_debug(f"Created {player_class.display_name} {name}.")
    return player
