"""Internal arc-length quadrature.

This is an internal module containing helper functions for curve length
measurement. Not intended for public use.
"""

import math
from collections.abc import Sequence

# Number of Simpson double-intervals used for every length measurement
INTERVALS = 64


def speed(k: Sequence[float], t: float) -> float:
    """Evaluate the speed function sqrt(k0*t^4 + k1*t^3 + k2*t^2 + k3*t + k4).

    Args:
        k: Five quartic coefficients (see speed_coefficients)
        t: Curve parameter

    Returns:
        Speed at t, a third of |B'(t)|
    """
    value = t * (t * (t * (t * k[0] + k[1]) + k[2]) + k[3]) + k[4]
    # Rounding can push a zero speed slightly negative
    return math.sqrt(max(value, 0.0))


def integrate(k: Sequence[float], t: float) -> float:
    """Integrate the speed function from 0 to t with composite Simpson's rule.

    Uses a fixed 64 double-intervals (step h = t / 128). The result is
    three times the Simpson integral of the speed function, which is the
    arc length because the speed function carries |B'(t)| / 3.

    Args:
        k: Five quartic coefficients
        t: Upper integration bound

    Returns:
        Arc length from parameter 0 to t
    """
    h = t / (2 * INTERVALS)
    total = (speed(k, 0.0) - speed(k, t)) / 2
    for i in range(INTERVALS):
        x = h * (2 * i + 1)
        total += 2 * speed(k, x) + speed(k, x + h)
    return total * 2 * h
