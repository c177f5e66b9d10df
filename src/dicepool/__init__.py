"""Dice pools with drop-low/drop-high rolling.

Usage:
    >>> from dicepool import create_ext, roll, SystemRandomSource
    >>> spec = create_ext(5, 20, 2, 1)
    >>> str(spec)
    '5d20L2H1'
    >>> result = roll(spec, SystemRandomSource(seed=7))
"""

# Types
from dicepool.types import DiceSpec, RollResults, format_spec

# Errors
from dicepool.errors import (
    DiceSpecError,
    InvalidCountError,
    InvalidSidesError,
    InvalidDropLowError,
    InvalidDropHighError,
    TooManyDroppedError,
)

# Construction & validation
from dicepool.validation import create, create_ext, validate, find_violation

# Randomness
from dicepool.random_source import (
    RandomSource,
    SystemRandomSource,
    MaxRandomSource,
    SequenceRandomSource,
    get_default_source,
)

# Roller
from dicepool.roller import roll, roll_default, roll_total

# Parser
from dicepool.parser import parse_spec, DiceParseError

__all__ = [
    # Types
    "DiceSpec",
    "RollResults",
    "format_spec",
    # Errors
    "DiceSpecError",
    "InvalidCountError",
    "InvalidSidesError",
    "InvalidDropLowError",
    "InvalidDropHighError",
    "TooManyDroppedError",
    # Construction & validation
    "create",
    "create_ext",
    "validate",
    "find_violation",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    "MaxRandomSource",
    "SequenceRandomSource",
    "get_default_source",
    # Roller
    "roll",
    "roll_default",
    "roll_total",
    # Parser
    "parse_spec",
    "DiceParseError",
]
