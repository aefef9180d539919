"""
Angle and rounding helpers shared by the geodesy and grid modules.
"""

import math

PI = math.pi
TWO_PI = 2.0 * math.pi
PI_OVER_TWO = math.pi / 2.0

EPSILON14 = 1e-14

RADIANS_PER_DEGREE = math.pi / 180.0
DEGREES_PER_RADIAN = 180.0 / math.pi


def to_radians(degrees: float) -> float:
    """Convert degrees to radians"""
    return degrees * RADIANS_PER_DEGREE


def to_degrees(radians: float) -> float:
    """Convert radians to degrees"""
    return radians * DEGREES_PER_RADIAN


def equals_epsilon(left: float, right: float, epsilon: float = EPSILON14) -> bool:
    """Absolute comparison within epsilon"""
    return abs(left - right) <= epsilon


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero

    Python's built-in round() rounds halves to even, which would turn a tile
    count of 2.5 into 2.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def tile_index(offset: float, size: float, count: int | None = None) -> int:
    """
    Index of the tile holding ``offset`` along one axis

    Floors toward negative infinity. When ``count`` is given the result is
    clamped into ``[0, count - 1]`` so positions on the far edge of the
    covered span (or a rounding hair outside it) stay in the last tile.
    """
    index = math.floor(offset / size)
    if count is not None:
        if index >= count:
            index = count - 1
        elif index < 0:
            index = 0
    return index


def zero_to_two_pi(angle: float) -> float:
    """Wrap an angle into [0, 2π], keeping an exact full turn as 2π"""
    if 0.0 <= angle <= TWO_PI:
        return angle
    mod = angle % TWO_PI
    if abs(mod) < EPSILON14 and abs(angle) > EPSILON14:
        return TWO_PI
    return mod


def negative_pi_to_pi(angle: float) -> float:
    """Wrap an angle into [-π, π]"""
    if -PI <= angle <= PI:
        return angle
    return zero_to_two_pi(angle + PI) - PI
