"""Core dice rolling engine.

Rolls a dice pool, sorts the results, and splits them into dropped-low,
kept and dropped-high slices. Specs are assumed valid; rolling one that
fails ``validate`` gives unspecified results.
"""

import logging

from dicepool.random_source import RandomSource, get_default_source
from dicepool.types import DiceSpec, RollResults

logger = logging.getLogger(__name__)


def roll(spec: DiceSpec, source: RandomSource) -> RollResults:
    """Roll a dice pool with the given random source.

    Args:
        spec: A validated dice pool.
        source: Where the draws come from.

    Returns:
        RollResults with the sorted raw dice, the partition and the total.

    Examples:
        >>> from dicepool.random_source import SequenceRandomSource
        >>> result = roll(DiceSpec(count=5, sides=20, drop_low=2, drop_high=2), SequenceRandomSource())
        >>> result.kept, result.total
        ((3,), 3)
    """
    raw = sorted(source.randbelow(spec.sides) + 1 for _ in range(spec.count))

    dropped_low = tuple(raw[: spec.drop_low]) if spec.drop_low > 0 else ()
    dropped_high = tuple(raw[spec.count - spec.drop_high :]) if spec.drop_high > 0 else ()
    kept = tuple(raw[spec.drop_low : spec.count - spec.drop_high])

    result = RollResults(
        spec=spec,
        total=sum(kept),
        raw=tuple(raw),
        dropped_low=dropped_low,
        dropped_high=dropped_high,
        kept=kept,
    )
    logger.debug("Rolled %s: raw=%s kept=%s total=%d", spec, result.raw, kept, result.total)
    return result


def roll_default(spec: DiceSpec) -> RollResults:
    """Roll a dice pool with the process-default random source."""
    return roll(spec, get_default_source())


def roll_total(spec: DiceSpec, source: RandomSource | None = None) -> int:
    """Roll a dice pool and return only the total.

    Uses the process-default source when ``source`` is omitted.
    """
    if source is None:
        source = get_default_source()
    return roll(spec, source).total
