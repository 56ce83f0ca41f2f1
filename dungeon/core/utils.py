"""
Utilities module for the engine.

Provides common utility functions and helpers, including console printing
with rich formatting and the clamp helpers every health and damage mutation
goes through.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.rule import Rule

from core.constants import MAX_DAMAGE

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


# ---- Clamping ----


def clamp_damage(damage: int) -> int:
    """
    Clamps a damage value to [0, MAX_DAMAGE].

    Args:
        damage (int): The raw damage value.

    Returns:
        int: The clamped damage.

    """
    if damage < 0:
        return 0
    if damage > MAX_DAMAGE:
        return MAX_DAMAGE
    return int(damage)


def clamp_health(health: int, max_health: int) -> int:
    """
    Clamps a health value to [0, max_health].

    Args:
        health (int): The health value to clamp.
        max_health (int): The upper bound, negative bounds are treated as 0.

    Returns:
        int: The clamped health.

    """
    upper = max(0, max_health)
    if health < 0:
        return 0
    if health > upper:
        return upper
    return int(health)


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    filled = int((current / maximum) * length) if maximum > 0 else 0
    filled = max(0, min(filled, length))
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
