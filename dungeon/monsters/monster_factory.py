"""
Level-scaled monster generation.

Monsters are built from archetypes grouped in level bands. Every tenth level
is guarded by the boss of its band, scaled by a steeper linear function than
regular monsters. Regular monsters may be promoted to ELITE or LEGENDARY in
the deeper bands, and every monster is finally adjusted by the difficulty.
"""

from catchery import log_debug
from pydantic import BaseModel, Field

from character.monster import Monster
from core.config import DEFAULT_BALANCE, BalanceConfig
from core.constants import (
    BOSS_LEVEL_INTERVAL,
    Difficulty,
    MonsterBehavior,
    MonsterFamily,
    MonsterType,
)
from core.error_handling import ensure_int_in_range
from core.rng import RandomSource
from effects.status_effect import StatusEffect
from progression.progression_engine import experience_reward_for_level

# Linear growth per level above the first level of the band.
HEALTH_PER_LEVEL = 8
ATTACK_PER_LEVEL = 2
DEFENSE_PER_LEVEL = 1
AGILITY_PER_LEVEL = 1

# Bosses grow with the absolute level, and faster.
BOSS_HEALTH_PER_LEVEL = 20
BOSS_ATTACK_PER_LEVEL = 4
BOSS_DEFENSE_PER_LEVEL = 2

ELITE_CHANCE = 0.20
LEGENDARY_CHANCE = 0.05


class MonsterArchetype(BaseModel):
    """The unscaled template of a monster."""

    name: str = Field(description="Name of the monster.")
    family: MonsterFamily = Field(description="Taxonomy of the monster.")
    behavior: MonsterBehavior = Field(MonsterBehavior.AGGRESSIVE)
    health: int = Field(gt=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    agility: int = Field(ge=0)
    accuracy: float = Field(gt=0, le=1)
    special_abilities: list[str] = Field(default_factory=list)
    special_attack_chance: float = Field(0.0, ge=0, le=1)
    special_attack_multiplier: float = Field(1.0, ge=1)
    special_attack_effects: list[StatusEffect] = Field(default_factory=list)


class TierModifiers(BaseModel):
    """Scaling applied when a monster is promoted to a tier."""

    prefix: str = ""
    health_multiplier: float = 1.0
    attack_multiplier: float = 1.0
    special_chance_bonus: float = 0.0
    reward_multiplier: float = 1.0


TIER_MODIFIERS: dict[MonsterType, TierModifiers] = {
    MonsterType.BASIC: TierModifiers(),
    MonsterType.ELITE: TierModifiers(
        prefix="Elite ",
        health_multiplier=1.5,
        attack_multiplier=1.25,
        special_chance_bonus=0.10,
        reward_multiplier=1.5,
    ),
    MonsterType.BOSS: TierModifiers(
        reward_multiplier=3.0,
    ),
    MonsterType.LEGENDARY: TierModifiers(
        prefix="Legendary ",
        health_multiplier=2.5,
        attack_multiplier=1.6,
        special_chance_bonus=0.20,
        reward_multiplier=4.0,
    ),
}


def _archetype(**kwargs) -> MonsterArchetype:
    return MonsterArchetype(**kwargs)


# Regular archetypes, one list per band.
BAND_ARCHETYPES: list[list[MonsterArchetype]] = [
    [
        _archetype(
            name="Goblin",
            family=MonsterFamily.GOBLIN,
            behavior=MonsterBehavior.CUNNING,
            health=30,
            attack=8,
            defense=2,
            agility=12,
            accuracy=0.80,
            special_abilities=["Dirty Trick"],
            special_attack_chance=0.15,
            special_attack_multiplier=1.5,
        ),
        _archetype(
            name="Wolf",
            family=MonsterFamily.BEAST,
            health=26,
            attack=9,
            defense=1,
            agility=16,
            accuracy=0.85,
            special_abilities=["Savage Bite"],
            special_attack_chance=0.20,
            special_attack_multiplier=1.6,
        ),
        _archetype(
            name="Cave Spider",
            family=MonsterFamily.ARACHNID,
            behavior=MonsterBehavior.CUNNING,
            health=22,
            attack=7,
            defense=1,
            agility=18,
            accuracy=0.85,
            special_abilities=["Venomous Fangs"],
            special_attack_chance=0.25,
            special_attack_multiplier=1.2,
            special_attack_effects=[StatusEffect.POISON],
        ),
    ],
    [
        _archetype(
            name="Orc",
            family=MonsterFamily.GOBLIN,
            health=90,
            attack=24,
            defense=8,
            agility=10,
            accuracy=0.80,
            special_abilities=["Crushing Blow"],
            special_attack_chance=0.20,
            special_attack_multiplier=1.8,
            special_attack_effects=[StatusEffect.STUN],
        ),
        _archetype(
            name="Skeleton",
            family=MonsterFamily.UNDEAD,
            behavior=MonsterBehavior.DEFENSIVE,
            health=80,
            attack=22,
            defense=12,
            agility=12,
            accuracy=0.85,
            special_abilities=["Bone Shard Volley"],
            special_attack_chance=0.15,
            special_attack_multiplier=1.5,
        ),
        _archetype(
            name="Zombie",
            family=MonsterFamily.UNDEAD,
            health=110,
            attack=20,
            defense=6,
            agility=4,
            accuracy=0.75,
            special_abilities=["Rotting Grasp"],
            special_attack_chance=0.20,
            special_attack_multiplier=1.4,
            special_attack_effects=[StatusEffect.POISON],
        ),
    ],
    [
        _archetype(
            name="Fire Elemental",
            family=MonsterFamily.ELEMENTAL,
            health=150,
            attack=38,
            defense=14,
            agility=16,
            accuracy=0.85,
            special_abilities=["Flame Burst", "Searing Wave"],
            special_attack_chance=0.25,
            special_attack_multiplier=1.7,
            special_attack_effects=[StatusEffect.BURN],
        ),
        _archetype(
            name="Ice Elemental",
            family=MonsterFamily.ELEMENTAL,
            behavior=MonsterBehavior.DEFENSIVE,
            health=160,
            attack=34,
            defense=18,
            agility=12,
            accuracy=0.85,
            special_abilities=["Frost Nova"],
            special_attack_chance=0.20,
            special_attack_multiplier=1.5,
            special_attack_effects=[StatusEffect.FREEZE],
        ),
        _archetype(
            name="Wraith",
            family=MonsterFamily.UNDEAD,
            behavior=MonsterBehavior.CUNNING,
            health=130,
            attack=40,
            defense=10,
            agility=22,
            accuracy=0.90,
            special_abilities=["Life Siphon"],
            special_attack_chance=0.25,
            special_attack_multiplier=1.6,
            special_attack_effects=[StatusEffect.CURSED],
        ),
    ],
    [
        _archetype(
            name="Demon",
            family=MonsterFamily.DEMON,
            health=240,
            attack=56,
            defense=22,
            agility=20,
            accuracy=0.90,
            special_abilities=["Hellfire", "Infernal Claw"],
            special_attack_chance=0.25,
            special_attack_multiplier=1.8,
            special_attack_effects=[StatusEffect.BURN],
        ),
        _archetype(
            name="Wyvern",
            family=MonsterFamily.DRAGON,
            health=260,
            attack=60,
            defense=24,
            agility=24,
            accuracy=0.88,
            special_abilities=["Tail Sting"],
            special_attack_chance=0.20,
            special_attack_multiplier=1.7,
            special_attack_effects=[StatusEffect.POISON],
        ),
        _archetype(
            name="Beholder",
            family=MonsterFamily.ABERRATION,
            behavior=MonsterBehavior.CUNNING,
            health=220,
            attack=52,
            defense=20,
            agility=14,
            accuracy=0.92,
            special_abilities=["Paralyzing Gaze", "Disintegration Ray"],
            special_attack_chance=0.30,
            special_attack_multiplier=1.9,
            special_attack_effects=[StatusEffect.STUN],
        ),
    ],
]

# The boss guarding the tenth level of each band.
BAND_BOSSES: list[MonsterArchetype] = [
    _archetype(
        name="Goblin Warlord",
        family=MonsterFamily.GOBLIN,
        behavior=MonsterBehavior.CUNNING,
        health=100,
        attack=14,
        defense=6,
        agility=14,
        accuracy=0.85,
        special_abilities=["War Cry", "Cleaving Strike"],
        special_attack_chance=0.25,
        special_attack_multiplier=1.8,
        special_attack_effects=[StatusEffect.STUN],
    ),
    _archetype(
        name="Bone Tyrant",
        family=MonsterFamily.UNDEAD,
        behavior=MonsterBehavior.DEFENSIVE,
        health=200,
        attack=24,
        defense=14,
        agility=12,
        accuracy=0.88,
        special_abilities=["Grave Curse", "Bone Storm"],
        special_attack_chance=0.25,
        special_attack_multiplier=2.0,
        special_attack_effects=[StatusEffect.CURSED],
    ),
    _archetype(
        name="Elemental Titan",
        family=MonsterFamily.ELEMENTAL,
        health=300,
        attack=34,
        defense=20,
        agility=16,
        accuracy=0.90,
        special_abilities=["Cataclysm", "Magma Fist"],
        special_attack_chance=0.30,
        special_attack_multiplier=2.0,
        special_attack_effects=[StatusEffect.BURN],
    ),
    _archetype(
        name="Ancient Dragon",
        family=MonsterFamily.DRAGON,
        behavior=MonsterBehavior.AGGRESSIVE,
        health=400,
        attack=44,
        defense=26,
        agility=20,
        accuracy=0.92,
        special_abilities=["Dragon Breath", "Wing Buffet", "Tail Sweep"],
        special_attack_chance=0.30,
        special_attack_multiplier=2.2,
        special_attack_effects=[StatusEffect.BURN, StatusEffect.STUN],
    ),
]


def level_band(level: int) -> int:
    """
    Returns the zero-based band of a level: 1-10, 11-20, 21-30, 31+.

    Args:
        level (int): The dungeon level, values below 1 are treated as 1.

    Returns:
        int: The band index, in [0, 3].

    """
    level = max(1, level)
    return min((level - 1) // BOSS_LEVEL_INTERVAL, len(BAND_ARCHETYPES) - 1)


def is_boss_level(level: int) -> bool:
    return max(1, level) % BOSS_LEVEL_INTERVAL == 0


def _roll_tier(band: int, rng: RandomSource) -> MonsterType:
    if band == 0:
        return MonsterType.BASIC
    roll = rng.random()
    if band == len(BAND_ARCHETYPES) - 1:
        if roll < LEGENDARY_CHANCE:
            return MonsterType.LEGENDARY
        if roll < LEGENDARY_CHANCE + ELITE_CHANCE:
            return MonsterType.ELITE
        return MonsterType.BASIC
    if roll < ELITE_CHANCE:
        return MonsterType.ELITE
    return MonsterType.BASIC


def build_monster(
    archetype: MonsterArchetype,
    level: int,
    monster_type: MonsterType = MonsterType.BASIC,
    difficulty: Difficulty = Difficulty.NORMAL,
    config: BalanceConfig = DEFAULT_BALANCE,
) -> Monster:
    """
    Scales an archetype to a level, tier and difficulty.

    Args:
        archetype (MonsterArchetype):
            The template to scale.
        level (int):
            The dungeon level.
        monster_type (MonsterType):
            The tier of the monster.
        difficulty (Difficulty):
            The game difficulty.
        config (BalanceConfig):
            The balance configuration holding the difficulty modifiers.

    Returns:
        Monster:
            The new monster, at full health.

    """
    level = max(1, level)
    if monster_type == MonsterType.BOSS:
        health = archetype.health + BOSS_HEALTH_PER_LEVEL * level
        attack = archetype.attack + BOSS_ATTACK_PER_LEVEL * level
        defense = archetype.defense + BOSS_DEFENSE_PER_LEVEL * level
        agility = archetype.agility + AGILITY_PER_LEVEL * level
    else:
        steps = level - (level_band(level) * BOSS_LEVEL_INTERVAL + 1)
        health = archetype.health + HEALTH_PER_LEVEL * steps
        attack = archetype.attack + ATTACK_PER_LEVEL * steps
        defense = archetype.defense + DEFENSE_PER_LEVEL * steps
        agility = archetype.agility + AGILITY_PER_LEVEL * steps

    tier = TIER_MODIFIERS[monster_type]
    modifiers = config.difficulty(difficulty)
    health = max(1, int(health * tier.health_multiplier * modifiers.health_multiplier))
    attack = max(1, int(attack * tier.attack_multiplier * modifiers.attack_multiplier))
    defense = int(defense * (1.0 + modifiers.defense_bonus))

    monster = Monster(
        name=tier.prefix + archetype.name,
        monster_type=monster_type,
        family=archetype.family,
        max_health=health,
        attack=attack,
        defense=defense,
        agility=agility,
        accuracy=archetype.accuracy,
        special_abilities=archetype.special_abilities,
        special_attack_chance=min(
            1.0, archetype.special_attack_chance + tier.special_chance_bonus
        ),
        special_attack_multiplier=archetype.special_attack_multiplier,
        behavior=archetype.behavior,
        special_attack_effects=archetype.special_attack_effects,
        level=level,
        experience_reward=int(experience_reward_for_level(level) * tier.reward_multiplier),
    )
    log_debug(f"Spawned {monster!r} for level {level} ({difficulty.display_name}).")
    return monster


def create_monster_for_level(
    level: int,
    rng: RandomSource,
    difficulty: Difficulty = Difficulty.NORMAL,
    config: BalanceConfig = DEFAULT_BALANCE,
) -> Monster:
    """
    Creates a fresh monster for a dungeon level.

    Every tenth level spawns the boss of its band, any other level spawns a
    regular archetype of the band, possibly promoted to a higher tier.

    Args:
        level (int):
            The dungeon level, values below 1 are clamped to 1 with a warning.
        rng (RandomSource):
            The random source for the archetype and tier draws.
        difficulty (Difficulty):
            The game difficulty.
        config (BalanceConfig):
            The balance configuration holding the difficulty modifiers.

    Returns:
        Monster:
            The new monster, at full health.

    """
    level = ensure_int_in_range(level, "level", 1, context={"difficulty": difficulty.name})
    band = level_band(level)
    if is_boss_level(level):
        return build_monster(BAND_BOSSES[band], level, MonsterType.BOSS, difficulty, config)
    archetype = rng.choice(BAND_ARCHETYPES[band])
    tier = _roll_tier(band, rng)
    return build_monster(archetype, level, tier, difficulty, config)
