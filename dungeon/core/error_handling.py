"""
Error types and validation helpers.

The engine does not use exceptions for control flow: bad numeric input is
corrected and logged. Only contract violations by the caller raise, and those
raise a typed GameException subclass.
"""

from typing import Any, Optional

from catchery import log_warning


class GameException(Exception):
    """Base class for contract violations reported by the engine."""


class InvalidEquipSlot(GameException):
    """Raised when an item is equipped into a slot of the wrong type."""

    def __init__(self, item_name: str, item_type: Any, slot: Any) -> None:
        self.item_name = item_name
        self.item_type = item_type
        self.slot = slot
        super().__init__(
            f"Cannot equip '{item_name}' ({item_type}) in the {slot} slot."
        )


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================


def require_enum_type(
    value: Any, enum_class: type, param_name: str, context: Optional[dict[str, Any]] = None
) -> Any:
    """
    Validates that a value is of the specified enum type.

    Args:
        value: The value to validate
        enum_class: The expected enum class
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        The validated enum value

    Raises:
        ValueError: If validation fails
    """
    if not isinstance(value, enum_class):
        raise ValueError(
            f"Invalid {param_name}: expected {enum_class.__name__}, "
            f"got {type(value).__name__}"
            + (f" [{context}]" if context else "")
        )
    return value


def ensure_non_negative_int(
    value: Any, param_name: str, default: int = 0, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Ensures a value is a non-negative integer, correcting if needed.
    Logs a warning for invalid values but continues execution.

    Args:
        value: The value to ensure is a non-negative integer
        param_name: Human-readable parameter name for error messages
        default: Default value if correction is needed
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        log_warning(
            f"{param_name} must be non-negative integer, got: {value}, correcting",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
            },
        )
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return max(0, int(value))
        return max(0, default)
    return value


def ensure_int_in_range(
    value: Any,
    param_name: str,
    min_val: int,
    max_val: Optional[int] = None,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Ensures a value is an integer within the specified range, clamping if
    needed. Logs a warning for out-of-range values but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive), None for no maximum
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value >= min_val
        and (max_val is None or value <= max_val)
    ):
        return value
    log_warning(
        f"{param_name} out of range, got: {value}",
        {
            **(context or {}),
            "param_name": param_name,
            "min_val": min_val,
            "max_val": max_val,
        },
    )
    converted = int(value) if isinstance(value, (int, float)) else min_val
    if converted < min_val:
        return min_val
    if max_val is not None and converted > max_val:
        return max_val
    return converted
