"""Dice pool type definitions.

Immutable dataclasses for dice pool specifications and roll results.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DiceSpec:
    """A pool of identical dice, e.g. 5d20L2H1.

    Constructing a DiceSpec directly does not validate it. Use
    ``create``/``create_ext`` (or call ``validate`` afterwards) before rolling.

    Attributes:
        count: Number of dice to roll.
        sides: Number of faces on each die.
        drop_low: Number of lowest results to discard.
        drop_high: Number of highest results to discard.
    """

    count: int
    sides: int
    drop_low: int = 0
    drop_high: int = 0

    def __str__(self) -> str:
        return format_spec(self)

    @property
    def kept_count(self) -> int:
        """Number of dice that contribute to the total."""
        return self.count - self.drop_low - self.drop_high

    @property
    def min_total(self) -> int:
        """Smallest possible total (every kept die shows 1)."""
        return self.kept_count

    @property
    def max_total(self) -> int:
        """Largest possible total (every kept die shows its top face)."""
        return self.kept_count * self.sides


def format_spec(spec: DiceSpec) -> str:
    """Render a spec in short-hand notation.

    Examples:
        >>> format_spec(DiceSpec(count=2, sides=20))
        '2d20'
        >>> format_spec(DiceSpec(count=5, sides=20, drop_low=2, drop_high=1))
        '5d20L2H1'
    """
    notation = f"{spec.count}d{spec.sides}"
    if spec.drop_low > 0:
        notation += f"L{spec.drop_low}"
    if spec.drop_high > 0:
        notation += f"H{spec.drop_high}"
    return notation


@dataclass(frozen=True)
class RollResults:
    """Result of rolling a dice pool.

    All sequences are sorted ascending. ``dropped_low + kept + dropped_high``
    always reconstructs ``raw``.

    Attributes:
        spec: The dice pool that was rolled.
        total: Sum of the kept dice.
        raw: Every die rolled.
        dropped_low: The lowest dice that were discarded.
        dropped_high: The highest dice that were discarded.
        kept: The dice that make up the total.
    """

    spec: DiceSpec
    total: int
    raw: tuple[int, ...]
    dropped_low: tuple[int, ...] = ()
    dropped_high: tuple[int, ...] = ()
    kept: tuple[int, ...] = ()

    @property
    def dropped(self) -> tuple[int, ...]:
        """All discarded dice, low then high."""
        return self.dropped_low + self.dropped_high

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for display or logging."""
        return {
            "spec": str(self.spec),
            "total": self.total,
            "raw": list(self.raw),
            "dropped_low": list(self.dropped_low),
            "dropped_high": list(self.dropped_high),
            "kept": list(self.kept),
        }
