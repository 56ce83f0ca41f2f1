"""
Experience and level progression.

Experience is granted after an encounter; each time the accumulated
experience reaches the threshold the player gains a level, rolls the stat
gains of its class, and the threshold grows by 20%. The same threshold curve
is used when restoring a player from a snapshot.
"""

from typing import Any

from catchery import log_debug, log_warning
from pydantic import BaseModel, Field

from core.constants import BASE_EXPERIENCE_THRESHOLD, EXPERIENCE_GROWTH_RATE
from core.rng import RandomSource


class StatGains(BaseModel):
    """The stat increases rolled for a single level."""

    level: int = Field(description="The level reached with these gains.")
    health: int = Field(0, ge=0)
    attack: int = Field(0, ge=0)
    defense: int = Field(0, ge=0)
    magic: int = Field(0, ge=0)
    agility: int = Field(0, ge=0)
    luck: int = Field(0, ge=0)
    mana: int = Field(0, ge=0)


class LevelUpResult(BaseModel):
    """Summary of an experience grant."""

    experience_gained: int = Field(
        0,
        description="Experience actually granted.",
    )
    old_level: int = Field(
        description="Level before the grant.",
    )
    new_level: int = Field(
        description="Level after the grant.",
    )
    gains: list[StatGains] = Field(
        default_factory=list,
        description="Stat gains of every level reached, in order.",
    )

    @property
    def leveled_up(self) -> bool:
        return self.new_level > self.old_level

    @property
    def levels_gained(self) -> int:
        return self.new_level - self.old_level


class PlayerSnapshot(BaseModel):
    """The persisted subset of a player, as stored by save collaborators."""

    level: int = Field(1, ge=1)
    experience: int = Field(0, ge=0)
    current_health: int = Field(ge=0)
    max_health: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    magic: int = Field(ge=0)
    rooms_explored: int = Field(0, ge=0)
    monsters_defeated: int = Field(0, ge=0)
    dungeon_level: int = Field(1, ge=1)


def next_threshold(threshold: int) -> int:
    """Returns the experience threshold following the given one."""
    return int(threshold * EXPERIENCE_GROWTH_RATE)


def experience_threshold_for_level(level: int) -> int:
    """
    Returns the experience needed to advance from the given level.

    The curve is built by applying the same 20% growth step used at each
    organic level-up, so a restored player needs exactly as much experience
    as one who leveled up in play.

    Args:
        level (int):
            The current level, values below 1 are treated as 1.

    Returns:
        int:
            The experience threshold, strictly increasing with the level.

    """
    threshold = BASE_EXPERIENCE_THRESHOLD
    for _ in range(max(1, level) - 1):
        threshold = next_threshold(threshold)
    return threshold


def experience_reward_for_level(dungeon_level: int) -> int:
    """Returns the experience granted for a victory at a dungeon level."""
    return 30 + max(1, dungeon_level) * 10


def level_up(player: Any, rng: RandomSource) -> StatGains:
    """
    Advances a player by one level.

    Consumes the current threshold from the experience, grows the threshold,
    rolls the class stat gains and restores health and mana to their new
    maximum.

    Args:
        player (Any):
            The player to advance.
        rng (RandomSource):
            The random source for the stat rolls.

    Returns:
        StatGains:
            The gains applied.

    """
    template = player.class_template
    player.level += 1
    player.experience = max(0, player.experience - player.experience_to_next_level)
    player.experience_to_next_level = next_threshold(player.experience_to_next_level)

    gains = StatGains(
        level=player.level,
        health=template.health_gain.roll(rng),
        attack=template.attack_gain.roll(rng),
        defense=template.defense_gain.roll(rng),
        magic=template.magic_gain.roll(rng),
        agility=template.agility_gain.roll(rng),
        luck=template.luck_gain.roll(rng),
        mana=template.mana_gain.roll(rng),
    )

    player.attack += gains.attack
    player.defense += gains.defense
    player.magic += gains.magic
    player.agility += gains.agility
    player.luck += gains.luck
    player.max_mana += gains.mana
    player.mana = player.max_mana
    player.set_max_health(player.max_health + gains.health, refill=True)

    log_debug(f"{player.name} reached level {player.level}: {gains.model_dump(exclude={'level'})}")
    return gains


def grant_experience(player: Any, amount: int, rng: RandomSource) -> LevelUpResult:
    """
    Grants experience to a player, leveling up as many times as it affords.

    Args:
        player (Any):
            The player receiving the experience.
        amount (int):
            The experience to grant, negative amounts are treated as 0.
        rng (RandomSource):
            The random source for the stat rolls.

    Returns:
        LevelUpResult:
            The levels reached and the gains of each.

    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        log_warning(
            f"Experience must be a non-negative integer, got: {amount}, ignoring",
            {"player": player.name, "amount": amount},
        )
        amount = 0
    result = LevelUpResult(
        experience_gained=amount,
        old_level=player.level,
        new_level=player.level,
    )
    player.experience += amount
    while player.experience >= player.experience_to_next_level:
        result.gains.append(level_up(player, rng))
    result.new_level = player.level
    return result


def snapshot_player(player: Any) -> PlayerSnapshot:
    """
    Captures the persisted subset of a player.

    Args:
        player (Any): The player to capture.

    Returns:
        PlayerSnapshot: The snapshot.

    """
    return PlayerSnapshot(
        level=player.level,
        experience=player.experience,
        current_health=player.current_health,
        max_health=player.max_health,
        attack=player.attack,
        defense=player.defense,
        magic=player.magic,
        rooms_explored=player.rooms_explored,
        monsters_defeated=player.monsters_defeated,
        dungeon_level=player.dungeon_level,
    )


def restore_from_snapshot(player: Any, snapshot: PlayerSnapshot | dict[str, Any]) -> None:
    """
    Overwrites the persisted fields of a player from a snapshot.

    The experience threshold is not persisted, it is recomputed from the
    level with the organic leveling curve.

    Args:
        player (Any):
            The player to restore.
        snapshot (PlayerSnapshot | dict[str, Any]):
            The snapshot, or its dictionary form.

    Raises:
        ValueError: If the dictionary form fails validation.

    """
    if not isinstance(snapshot, PlayerSnapshot):
        snapshot = PlayerSnapshot.model_validate(snapshot)
    player.level = snapshot.level
    player.experience = snapshot.experience
    player.set_max_health(snapshot.max_health)
    player.set_health(snapshot.current_health)
    player.attack = snapshot.attack
    player.defense = snapshot.defense
    player.magic = snapshot.magic
    player.rooms_explored = snapshot.rooms_explored
    player.monsters_defeated = snapshot.monsters_defeated
    player.dungeon_level = snapshot.dungeon_level
    player.experience_to_next_level = experience_threshold_for_level(snapshot.level)
    if player.experience >= player.experience_to_next_level:
        log_warning(
            "Restored experience exceeds the threshold of its level",
            {
                "player": player.name,
                "level": player.level,
                "experience": player.experience,
                "threshold": player.experience_to_next_level,
            },
        )
