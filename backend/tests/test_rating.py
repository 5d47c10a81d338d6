"""Tests for the incremental rating math (pure functions, no DB dependency)."""

import math

from promptvault.rating import apply_rating, safe_average, relevance_score


class TestSafeAverage:
    """Test the guarded division."""

    def test_zero_count_is_zero(self):
        """An empty set of ratings averages to 0.0."""
        assert safe_average(0.0, 0) == 0.0
        assert safe_average(12.0, 0) == 0.0

    def test_plain_division(self):
        assert safe_average(9.0, 2) == 4.5

    def test_non_finite_clamped(self):
        """Infinite or NaN totals never leak into the stored average."""
        assert safe_average(float("inf"), 3) == 0.0
        assert safe_average(float("nan"), 3) == 0.0


class TestApplyRating:
    """Test folding ratings into (average, count)."""

    def test_first_rating(self):
        avg, n = apply_rating(0.0, 0, 4)
        assert avg == 4.0
        assert n == 1

    def test_mean_of_distinct_raters(self):
        """Folding v1..vn one by one gives their arithmetic mean."""
        values = [5, 3, 4, 1, 2, 5, 5]
        avg, n = 0.0, 0
        for v in values:
            avg, n = apply_rating(avg, n, v)
        assert n == len(values)
        assert math.isclose(avg, sum(values) / len(values), rel_tol=1e-12)

    def test_replacement_keeps_count(self):
        """Replacing a rating swaps the value instead of adding one."""
        avg, n = apply_rating(0.0, 0, 5)
        avg, n = apply_rating(avg, n, 3)
        avg, n = apply_rating(avg, n, 1, previous=5)
        assert n == 2
        assert math.isclose(avg, 2.0)

    def test_replacement_of_only_rating(self):
        avg, n = apply_rating(0.0, 0, 2)
        avg, n = apply_rating(avg, n, 5, previous=2)
        assert (avg, n) == (5.0, 1)

    def test_replacement_on_empty_state_is_zero(self):
        """A replacement against a zero count (corrupted state) stays at 0.0."""
        avg, n = apply_rating(0.0, 0, 4, previous=3)
        assert (avg, n) == (0.0, 0)

    def test_corrupted_average_clamped(self):
        avg, n = apply_rating(float("inf"), 2, 3)
        assert avg == 0.0
        assert n == 3


class TestRelevanceScore:
    """Test the search ranking score."""

    def test_rating_floored(self):
        """rating * 10 is floored before being added."""
        assert relevance_score(0, 0, 4.66) == 46
        assert relevance_score(2, 3, 0.0) == 5

    def test_combined(self):
        assert relevance_score(10, 4, 3.5) == 49
