"""Tests for dice spec errors."""

from dicepool.errors import (
    DiceSpecError,
    InvalidCountError,
    InvalidDropHighError,
    InvalidDropLowError,
    InvalidSidesError,
    TooManyDroppedError,
)


class TestErrorMessages:
    """Tests for error text and carried values."""

    def test_invalid_count(self):
        """Test count error message and value."""
        error = InvalidCountError(0)
        assert str(error) == "number of dice is too low: 0"
        assert error.count == 0

    def test_invalid_sides(self):
        """Test sides error message and value."""
        error = InvalidSidesError(1)
        assert str(error) == "number of sides is too low: 1"
        assert error.sides == 1

    def test_invalid_drop_low(self):
        """Test drop-low error message and value."""
        error = InvalidDropLowError(-1)
        assert str(error) == "number of low dice to drop must be positive: -1"
        assert error.drop_low == -1

    def test_invalid_drop_high(self):
        """Test drop-high error message and value."""
        error = InvalidDropHighError(-2)
        assert str(error) == "number of high dice to drop must be positive: -2"
        assert error.drop_high == -2

    def test_too_many_dropped(self):
        """Test too-many-dropped carries all three values."""
        error = TooManyDroppedError(1, 1, 2)
        assert str(error) == "too many dice dropped: 1 + 1 >= 2"
        assert (error.drop_low, error.drop_high, error.count) == (1, 1, 2)


class TestErrorHierarchy:
    """Tests for error classes and comparison."""

    def test_all_are_value_errors(self):
        """Test every error is a DiceSpecError and a ValueError."""
        for error in (
            InvalidCountError(0),
            InvalidSidesError(1),
            InvalidDropLowError(-1),
            InvalidDropHighError(-1),
            TooManyDroppedError(2, 0, 2),
        ):
            assert isinstance(error, DiceSpecError)
            assert isinstance(error, ValueError)

    def test_equal_when_same_type_and_values(self):
        """Test errors compare by type and values."""
        assert InvalidCountError(0) == InvalidCountError(0)
        assert InvalidCountError(0) != InvalidCountError(-1)
        assert InvalidDropLowError(-1) != InvalidDropHighError(-1)

    def test_hashable(self):
        """Test equal errors hash alike."""
        assert hash(TooManyDroppedError(2, 0, 2)) == hash(TooManyDroppedError(2, 0, 2))
