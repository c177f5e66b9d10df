"""Dice pool notation parser.

Parses the short-hand produced by ``format_spec``: 2d20, d6, 4d6L1,
5d20L2H1, 3d8H1.
"""

import re

from dicepool.types import DiceSpec
from dicepool.validation import create_ext


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    pass


# Pattern: optional count, 'd', sides, optional L<n>, optional H<n>
DICE_PATTERN = re.compile(
    r"^\s*(\d*)d(\d+)(?:l(\d+))?(?:h(\d+))?\s*$",
    re.IGNORECASE,
)


def parse_spec(notation: str) -> DiceSpec:
    """Parse short-hand notation into a validated DiceSpec.

    Args:
        notation: Notation string (e.g., "5d20L2H1", "d6").

    Returns:
        The validated DiceSpec.

    Raises:
        DiceParseError: If the notation is malformed.
        DiceSpecError: If the notation is well formed but describes an
            invalid pool (e.g. "0d6", "2d20L2").

    Examples:
        >>> parse_spec("5d20L2H1")
        DiceSpec(count=5, sides=20, drop_low=2, drop_high=1)
        >>> parse_spec("d6")
        DiceSpec(count=1, sides=6, drop_low=0, drop_high=0)
    """
    if not notation or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty")

    match = DICE_PATTERN.match(notation)
    if not match:
        raise DiceParseError(f"Invalid dice notation: '{notation}'")

    count_str, sides_str, low_str, high_str = match.groups()

    # "d20" means "1d20"
    count = int(count_str) if count_str else 1

    return create_ext(
        count,
        int(sides_str),
        int(low_str) if low_str else 0,
        int(high_str) if high_str else 0,
    )
