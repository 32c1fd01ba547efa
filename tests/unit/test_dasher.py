"""Unit tests for dash/gap length sequences."""

import pytest

from bezkit.core.dasher import DashPattern
from bezkit.exceptions import InvalidInputError


@pytest.fixture
def dasher() -> DashPattern:
    """Dash 4, gap 2."""
    return DashPattern([4, 2])


class TestDashPatternInit:
    """Tests for pattern normalization and validation."""

    def test_pair(self, dasher):
        """A dash/gap pair is kept as is."""
        assert dasher.pattern == [4.0, 2.0]
        assert dasher.total == 6.0

    def test_single_value(self):
        """One value serves as dash and gap."""
        assert DashPattern([3]).pattern == [3.0, 3.0]

    def test_odd_pattern_doubled(self):
        """Odd patterns repeat once to alternate cleanly."""
        assert DashPattern([1, 2, 3]).pattern == [1.0, 2.0, 3.0, 1.0, 2.0, 3.0]

    @pytest.mark.parametrize(
        "pattern, message",
        [
            ([], "empty"),
            ([4, -2], "negative"),
            ([0, 0], "zero total"),
        ],
    )
    def test_invalid(self, pattern, message):
        """Unusable patterns are rejected."""
        with pytest.raises(InvalidInputError, match=message):
            DashPattern(pattern)


class TestBasicPattern:
    """Tests for the wrapping layout."""

    def test_truncates_last_entry(self, dasher):
        """The final entry is cut to the remaining length."""
        assert dasher.basic_pattern(10) == [4.0, 2.0, 4.0]

    def test_ends_in_partial_dash(self, dasher):
        """A length of 20 ends with a 2 long dash."""
        assert dasher.basic_pattern(20) == pytest.approx([4, 2, 4, 2, 4, 2, 2])

    def test_shorter_than_first_dash(self, dasher):
        """A short length is a single partial dash."""
        assert dasher.basic_pattern(3) == [3.0]

    def test_sum_matches_length(self, dasher):
        """The run always covers the length exactly."""
        for length in (0.5, 6, 7.25, 100):
            assert sum(dasher.basic_pattern(length)) == pytest.approx(length)

    def test_non_positive_length(self, dasher):
        """Nothing to lay along an empty length."""
        assert dasher.basic_pattern(0) == []
        assert dasher.basic_pattern(-1) == []


class TestAlignedPattern:
    """Tests for the corner-aligned layout."""

    def test_half_dashes_at_both_ends(self, dasher):
        """The pattern is scaled to fit between half dashes."""
        run = dasher.aligned_pattern(20)

        assert run == pytest.approx(
            [2, 16 / 7, 32 / 7, 16 / 7, 32 / 7, 16 / 7, 2]
        )
        assert sum(run) == pytest.approx(20)

    def test_square_side(self, dasher):
        """A 10 long section takes two scaled repetitions."""
        assert dasher.aligned_pattern(10) == pytest.approx([2, 1.5, 3, 1.5, 2])

    def test_sum_matches_length(self, dasher):
        """The run always covers the length exactly."""
        for length in (4.5, 7.2, 10, 33.3, 250):
            assert sum(dasher.aligned_pattern(length)) == pytest.approx(length)

    def test_too_short_for_end_dashes(self, dasher):
        """No room between the half dashes gives one solid dash."""
        assert dasher.aligned_pattern(3) == [3.0]

    def test_collapses_to_end_dashes(self, dasher):
        """A heavily shrunk pattern keeps only the end dashes and one gap."""
        assert dasher.aligned_pattern(4.5) == pytest.approx([2, 0.5, 2])

    def test_overstretch_takes_extra_repetition(self, dasher):
        """Scaling past the maximum adds a repetition instead."""
        assert dasher.aligned_pattern(7.2) == pytest.approx([2, 3.2, 2])

    def test_dont_split_first_dash(self, dasher):
        """A closed loop without corners starts on a whole dash."""
        run = dasher.aligned_pattern(20, dont_split_first_dash=True)

        assert run == pytest.approx([40 / 9, 20 / 9] * 3)
        assert sum(run) == pytest.approx(20)

    def test_non_positive_length(self, dasher):
        """Nothing to lay along an empty length."""
        assert dasher.aligned_pattern(0) == []
