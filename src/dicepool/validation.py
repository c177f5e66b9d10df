"""Dice pool construction and validation.

Rules are checked in a fixed order and the first violation wins:
count, sides, drop_low, drop_high, then the total number dropped.
"""

import logging

from dicepool.errors import (
    DiceSpecError,
    InvalidCountError,
    InvalidDropHighError,
    InvalidDropLowError,
    InvalidSidesError,
    TooManyDroppedError,
)
from dicepool.types import DiceSpec

logger = logging.getLogger(__name__)


def find_violation(spec: DiceSpec) -> DiceSpecError | None:
    """Return the first rule the spec violates, or None if it is valid.

    The error is returned, not raised.
    """
    if spec.count < 1:
        return InvalidCountError(spec.count)
    if spec.sides <= 1:
        return InvalidSidesError(spec.sides)
    if spec.drop_low < 0:
        return InvalidDropLowError(spec.drop_low)
    if spec.drop_high < 0:
        return InvalidDropHighError(spec.drop_high)
    if spec.drop_low + spec.drop_high >= spec.count:
        return TooManyDroppedError(spec.drop_low, spec.drop_high, spec.count)
    return None


def validate(spec: DiceSpec) -> None:
    """Check that a spec is safe to roll.

    ``create`` and ``create_ext`` call this already. Call it yourself for
    specs built any other way (e.g. ``DiceSpec(**data)`` from a config file).

    Raises:
        DiceSpecError: The first violated rule.
    """
    error = find_violation(spec)
    if error is not None:
        logger.debug("Rejected dice spec %r: %s", spec, error)
        raise error


def create(count: int, sides: int) -> DiceSpec:
    """Create a validated spec with no dropped dice.

    Examples:
        >>> create(2, 20)
        DiceSpec(count=2, sides=20, drop_low=0, drop_high=0)
    """
    return create_ext(count, sides, 0, 0)


def create_ext(count: int, sides: int, drop_low: int, drop_high: int) -> DiceSpec:
    """Create a validated spec that drops low and/or high dice.

    Args:
        count: Number of dice (at least 1).
        sides: Faces per die (at least 2).
        drop_low: Lowest results to discard (0 or more).
        drop_high: Highest results to discard (0 or more).

    Returns:
        The validated DiceSpec.

    Raises:
        DiceSpecError: If any rule is violated. No spec is returned.
    """
    spec = DiceSpec(count=count, sides=sides, drop_low=drop_low, drop_high=drop_high)
    validate(spec)
    return spec
