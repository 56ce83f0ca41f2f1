"""
Status ledger module for the engine.

A StatusLedger maps each active status effect of a combatant to its
remaining turns. Entries with no turns left never exist: they are removed the
moment their duration reaches 0.
"""

from collections.abc import Iterator

from core.constants import StatName

from .status_effect import StatusEffect


class StatusLedger:
    """
    Per-combatant record of active status effects.

    Attributes:
        _entries (dict[StatusEffect, int]):
            Remaining turns per active effect, in application order.

    """

    def __init__(self) -> None:
        self._entries: dict[StatusEffect, int] = {}

    def apply(self, effect: StatusEffect, duration: int | None = None) -> int:
        """
        Applies an effect, refreshing it if already present.

        Refreshing keeps the longer of the two durations, it never adds them
        up.

        Args:
            effect (StatusEffect):
                The effect to apply.
            duration (int | None):
                Duration in turns, the effect's default if None.

        Returns:
            int:
                The remaining turns of the effect after application, 0 if the
                duration was not positive and nothing was applied.

        """
        if duration is None:
            duration = effect.duration
        if duration <= 0:
            return self._entries.get(effect, 0)
        self._entries[effect] = max(duration, self._entries.get(effect, 0))
        return self._entries[effect]

    def has(self, effect: StatusEffect) -> bool:
        return effect in self._entries

    def remaining(self, effect: StatusEffect) -> int:
        """Returns the remaining turns of an effect, 0 if inactive."""
        return self._entries.get(effect, 0)

    def remove(self, effect: StatusEffect) -> bool:
        """
        Removes an effect.

        Returns:
            bool: True if the effect was active.

        """
        return self._entries.pop(effect, None) is not None

    def decrement(self, effect: StatusEffect) -> int:
        """
        Consumes one turn of an effect, removing it when it runs out.

        Args:
            effect (StatusEffect): The effect to decrement.

        Returns:
            int: The remaining turns, 0 if the effect expired or was absent.

        """
        remaining = self._entries.get(effect, 0) - 1
        if remaining <= 0:
            self._entries.pop(effect, None)
            return 0
        self._entries[effect] = remaining
        return remaining

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> dict[StatusEffect, int]:
        """Returns a copy of the active effects and their remaining turns."""
        return dict(self._entries)

    def modifiers(self) -> dict[StatName, int]:
        """
        Sums the stat modifiers granted by the active effects.

        Returns:
            dict[StatName, int]: Additive modifier per stat, non-zero only.

        """
        totals: dict[StatName, int] = {}
        for effect in self._entries:
            for stat, value in effect.definition.modifiers.items():
                totals[stat] = totals.get(stat, 0) + value
        return {stat: value for stat, value in totals.items() if value != 0}

    def __contains__(self, effect: object) -> bool:
        return effect in self._entries

    def __iter__(self) -> Iterator[StatusEffect]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{effect.name}={turns}" for effect, turns in self._entries.items())
        return f"StatusLedger({inner})"
