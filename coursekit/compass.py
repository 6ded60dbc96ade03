"""Mapping compass and accelerometer readings onto a 5x5 LED grid."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

COMPASS_SCALE = 30000
ACCELEROMETER_SCALE = 700


class Mode(Enum):
    """Which sensor drives the display."""

    COMPASS = "compass"
    ACCELEROMETER = "accelerometer"

    def next(self) -> Mode:
        """The mode that follows this one."""
        return Mode.ACCELEROMETER if self is Mode.COMPASS else Mode.COMPASS


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def cap(value: int, min_value: int, max_value: int) -> int:
    """Clamp ``value`` into ``[min_value, max_value]``."""
    return max(min_value, min(value, max_value))


def scale(value: int, min_in: int, max_in: int, min_out: int, max_out: int) -> int:
    """Map ``value`` linearly from the input range to the output range, clamped."""
    range_in = max_in - min_in
    range_out = max_out - min_out
    return cap(min_out + _div(range_out * (value - min_in), range_in), min_out, max_out)


def led_position(
    mode: Mode, compass: Sequence[int], accelerometer: Sequence[int]
) -> tuple[int, int]:
    """Return the ``(x, y)`` LED to light for the given ``(x, y, z)`` readings."""
    if mode is Mode.COMPASS:
        x, y = compass[0], compass[1]
        return (
            scale(-x, -COMPASS_SCALE, COMPASS_SCALE, 0, 4),
            scale(y, -COMPASS_SCALE, COMPASS_SCALE, 0, 4),
        )
    x, y = accelerometer[0], accelerometer[1]
    return (
        scale(x, -ACCELEROMETER_SCALE, ACCELEROMETER_SCALE, 0, 4),
        scale(-y, -ACCELEROMETER_SCALE, ACCELEROMETER_SCALE, 0, 4),
    )