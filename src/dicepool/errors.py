"""Dice specification errors.

Every error carries the offending value(s) as attributes so callers can
report them without parsing the message.
"""


class DiceSpecError(ValueError):
    """Base class for invalid dice specifications."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidCountError(DiceSpecError):
    """Number of dice is below 1."""

    def __init__(self, count: int):
        super().__init__(f"number of dice is too low: {count}")
        self.count = count


class InvalidSidesError(DiceSpecError):
    """Number of sides is below 2."""

    def __init__(self, sides: int):
        super().__init__(f"number of sides is too low: {sides}")
        self.sides = sides


class InvalidDropLowError(DiceSpecError):
    """Number of low dice to drop is negative."""

    def __init__(self, drop_low: int):
        super().__init__(f"number of low dice to drop must be positive: {drop_low}")
        self.drop_low = drop_low


class InvalidDropHighError(DiceSpecError):
    """Number of high dice to drop is negative."""

    def __init__(self, drop_high: int):
        super().__init__(f"number of high dice to drop must be positive: {drop_high}")
        self.drop_high = drop_high


class TooManyDroppedError(DiceSpecError):
    """Dropping would leave no dice to sum."""

    def __init__(self, drop_low: int, drop_high: int, count: int):
        super().__init__(f"too many dice dropped: {drop_low} + {drop_high} >= {count}")
        self.drop_low = drop_low
        self.drop_high = drop_high
        self.count = count
