"""Dash/gap length sequences.

DashPattern turns a repeating dash pattern and a target length into the
concrete list of dash and gap lengths laid along one section, either
wrapping the pattern and truncating the last entry (basic) or scaling it
so dashes are centered on the section ends (aligned, the editor behaviour
"align dashes to corners and path ends, adjusting lengths to fit").
"""

import math
from collections.abc import Sequence

from bezkit.exceptions import InvalidInputError

# Aligned dashes are never stretched beyond this factor
MAX_SCALE = 1.5
# Below this factor a two-entry pattern collapses to end dashes only
MIN_SCALE = 0.5


class DashPattern:
    """A repeating dash/gap pattern.

    A single value is used for both dash and gap; an odd-length pattern is
    repeated once so it alternates cleanly.

    Example:
        dasher = DashPattern([4, 2])
        dasher.basic_pattern(10)        # [4, 2, 4]
        dasher.aligned_pattern(20)      # [2, 2.29, 4.57, ..., 2]
    """

    def __init__(self, pattern: Sequence[float]) -> None:
        """Initialize from dash/gap lengths.

        Args:
            pattern: Alternating dash and gap lengths, starting with a dash

        Raises:
            InvalidInputError: If the pattern is empty, has a negative entry,
                or repeats over zero length
        """
        values = [float(v) for v in pattern]
        if not values:
            raise InvalidInputError("Dash pattern is empty")
        if any(v < 0 for v in values):
            raise InvalidInputError(f"Dash pattern has a negative length: {list(pattern)}")

        if len(values) == 1:
            values.append(values[0])
        if len(values) % 2 == 1:
            values = values + values

        self.pattern: list[float] = values
        self.total: float = sum(values)

        if self.total <= 0:
            raise InvalidInputError(f"Dash pattern has zero total length: {list(pattern)}")

    def __repr__(self) -> str:
        return f"DashPattern({self.pattern})"

    def basic_pattern(self, length: float) -> list[float]:
        """Lay the pattern along a length, truncating the last entry.

        Args:
            length: Length to cover

        Returns:
            Dash/gap lengths summing to ``length``; empty if length <= 0
        """
        if length <= 0:
            return []

        result: list[float] = []
        advance = 0.0
        index = 0
        while advance < length:
            value = self.pattern[index]
            result.append(value)
            advance += value
            index = (index + 1) % len(self.pattern)

        # Overshoot is never more than the last entry, so it stays >= 0
        result[-1] += length - advance
        return result

    def aligned_pattern(self, length: float, dont_split_first_dash: bool = False) -> list[float]:
        """Fit the pattern to a length with half dashes at both ends.

        The number of repetitions is whichever of floor/ceil(length / total)
        needs a scale factor nearer to 1, and the pattern is scaled to fill
        the length exactly. Scaling up past 1.5 forces the extra repetition.

        Args:
            length: Length to cover
            dont_split_first_dash: Keep the first dash whole instead of
                splitting it between the start and the end (closed loops
                with no corners)

        Returns:
            Dash/gap lengths summing to ``length``; empty if length <= 0
        """
        if length <= 0:
            return []

        first = 0.0 if dont_split_first_dash else self.pattern[0]
        start = end = first / 2
        middle_max = length - start - end

        ratio = length / self.total
        reps_floor = math.floor(ratio)
        reps_ceil = math.ceil(ratio)

        floor_width = self.total * reps_floor - first
        scale_up = (length - first) / floor_width if floor_width > 0 else math.inf
        remaining = length - first
        scale_down = (self.total * reps_ceil - first) / remaining if remaining > 0 else math.inf

        reps = reps_ceil if scale_up > scale_down else reps_floor
        reps = max(reps, 1)

        scale = self._scale(middle_max, reps, first)
        if scale > MAX_SCALE:
            reps = max(reps_ceil, 1)
            scale = self._scale(middle_max, reps, first)

        if middle_max <= 0 or math.isinf(scale):
            return [length]

        if scale < MIN_SCALE and len(self.pattern) <= 2:
            if dont_split_first_dash:
                return [middle_max]
            return [start, middle_max, end]

        result = [v * scale for v in self.pattern] * reps
        if dont_split_first_dash:
            return result
        # The first dash is the one split between start and end
        return [start, *result[1:], end]

    def _scale(self, middle_max: float, reps: int, first: float) -> float:
        middle_width = self.total * reps - first
        if middle_width <= 0:
            return math.inf
        return middle_max / middle_width
