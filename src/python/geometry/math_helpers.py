import math
from typing import Literal

import numba as nb  # type: ignore[import-untyped]

# Below this magnitude the small angle approximations are used to avoid dividing by
# (near) zero.
_SMALL_ANGLE = 1e-9
# Default ATOL, same as numpy.
DEFAULT_ATOL = 1e-8


def sign(val: float) -> Literal[-1, 0, 1]:
    """The sign of the value. Similar but faster to np or math sign."""
    if val > 0.0:
        return 1
    elif val < 0.0:
        return -1
    else:
        return 0


def clip(val: float, lower: float, upper: float) -> float:
    """Clips the value between the lower and upper."""
    if val < lower:
        return lower
    elif val > upper:
        return upper
    else:
        return val


def lerp(start: float, end: float, fraction: float) -> float:
    """Linear interpolation between start and end. A fraction of 0 returns start and
    1 returns end.
    """
    return start + (end - start) * fraction


def is_finite(*values: float) -> bool:
    """All values are finite, i.e. none are NaN or infinite."""
    return all(math.isfinite(val) for val in values)


@nb.njit(nb.float64(nb.float64))
def wrap_radians(angle: float) -> float:
    """Wraps the angle to the range [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


@nb.njit(nb.float64(nb.float64))
def sinc(x: float) -> float:
    """The unnormalized sinc function sin(x) / x, defined as 1 at x = 0."""
    if abs(x) < _SMALL_ANGLE:
        return 1.0 - x * x / 6.0
    return math.sin(x) / x


@nb.njit(nb.float64(nb.float64))
def one_minus_cos_over(x: float) -> float:
    """(1 - cos(x)) / x, the lateral term of a constant curvature arc. Tends to x / 2
    near zero.
    """
    if abs(x) < _SMALL_ANGLE:
        return 0.5 * x
    return (1.0 - math.cos(x)) / x


@nb.njit(nb.float64(nb.float64))
def half_angle_cot(x: float) -> float:
    """(x / 2) * cot(x / 2), used to recover the arc length of a constant curvature
    displacement. Tends to 1 near zero.
    """
    cos_minus_one = math.cos(x) - 1.0
    if abs(cos_minus_one) < _SMALL_ANGLE:
        return 1.0 - x * x / 12.0
    return -(0.5 * x * math.sin(x)) / cos_minus_one
