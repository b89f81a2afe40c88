"""Tests for circular index arithmetic."""

import pytest

from pagenav.core import circular
from pagenav.core.exceptions import DomainError


class TestSingleSteps:
    """Test moves by one position."""

    def test_forward_wraps_to_start(self):
        """Moving forward from the last index wraps to 0."""
        assert circular.move_forward_by_one(2, 3) == 0

    def test_back_wraps_to_end(self):
        """Moving back from 0 wraps to the last index."""
        assert circular.move_back_by_one(0, 3) == 2

    def test_forward_and_back_are_inverses(self):
        """One step forward undoes one step back and vice versa."""
        for n in range(1, 8):
            for i in range(n):
                assert (
                    circular.move_forward_by_one(circular.move_back_by_one(i, n), n)
                    == i
                )
                assert (
                    circular.move_back_by_one(circular.move_forward_by_one(i, n), n)
                    == i
                )

    def test_single_position(self):
        """With one position every move stays at 0."""
        assert circular.move_forward_by_one(0, 1) == 0
        assert circular.move_back_by_one(0, 1) == 0


class TestManySteps:
    """Test moves by several positions."""

    def test_forward_by_many(self):
        """Large forward offsets wrap as many times as needed."""
        assert circular.move_forward_by_many(5, 1, 3) == 0
        assert circular.move_forward_by_many(10, 0, 25) == 10
        assert circular.move_forward_by_many(10, 20, 25) == 5

    def test_back_by_many(self):
        """Backward offsets wrap below 0."""
        assert circular.move_back_by_many(10, 0, 25) == 15
        assert circular.move_back_by_many(7, 3, 3) == 2

    def test_negative_offsets(self):
        """Negative offsets move the other way."""
        assert circular.move_forward_by_many(-1, 0, 3) == 2
        assert circular.move_back_by_many(-2, 0, 5) == 2

    def test_results_always_in_range(self):
        """Every result lies in [0, n)."""
        for n in (1, 2, 5, 13):
            for start in range(-20, 20, 3):
                for offset in range(-40, 40, 7):
                    assert 0 <= circular.move(offset, start, n) < n
                    assert 0 <= circular.move_back_by_many(offset, start, n) < n


class TestSetPosition:
    """Test absolute positioning."""

    def test_in_range_is_unchanged(self):
        """Positions already in range are kept."""
        assert circular.set_position(2, 5) == 2

    def test_too_large_wraps(self):
        """Positions past the end wrap around."""
        assert circular.set_position(7, 3) == 1

    def test_negative_wraps_from_end(self):
        """Negative positions count from the end."""
        assert circular.set_position(-1, 3) == 2


class TestDomain:
    """Test upper bound checks."""

    @pytest.mark.parametrize("upper_bound", [0, -1, -10])
    def test_non_positive_upper_bound(self, upper_bound):
        """Non-positive upper bounds are rejected."""
        with pytest.raises(DomainError) as exc_info:
            circular.move_forward_by_one(0, upper_bound)

        assert exc_info.value.upper_bound == upper_bound

    def test_domain_error_is_value_error(self):
        """DomainError can be caught as ValueError."""
        with pytest.raises(ValueError):
            circular.set_position(1, 0)
