"""
entity_logic.py
---------------
Shared per-axis kinematics and bounds helpers for entities.

All functions take explicit parameters and return new values. Time is in
milliseconds, velocities in pixels per millisecond.
"""


def calc_axis_position(current_position: float, velocity: float, dt: float) -> float:
    """Advance a position along a single axis by one frame."""
    return current_position + dt * velocity


def clamp_axis(value: float, low: float, high: float) -> float:
    """
    Clamp a value into [low, high].

    The lower bound is checked first, so when the range is inverted (canvas
    smaller than the sprite) the lower bound wins.
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def bounds_overlap(a_center: float, a_half: float, b_center: float, b_half: float) -> bool:
    """Check whether two 1D extents overlap or touch."""
    return abs(a_center - b_center) <= a_half + b_half
