"""Point and size value types shared by the rectangle geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np


def round_half_away(values: np.ndarray, ndigits: int | None = None) -> np.ndarray:
    """Round to the nearest value, with halves going away from zero.

    2.5 -> 3 and -2.5 -> -3, unlike numpy and the builtin ``round``, which
    round halves to even.
    """
    values = np.asarray(values, dtype=np.float64)
    if not ndigits:
        return _round_scaled(values)
    try:
        scale = 10.0 ** ndigits
    except OverflowError:
        # every float already has fewer than ndigits decimals
        return values.copy()
    if scale == 0.0:
        return np.where(np.isfinite(values), np.copysign(0.0, values), values)
    scaled = values * scale
    with np.errstate(invalid="ignore"):
        rounded = _round_scaled(scaled) / scale
    return np.where(np.isfinite(scaled), rounded, values)


def _round_scaled(values: np.ndarray) -> np.ndarray:
    # trunc and the fractional part are exact; adding 0.5 first is not
    truncated = np.trunc(values)
    with np.errstate(invalid="ignore"):
        away = np.abs(values - truncated) >= 0.5
    return truncated + np.copysign(away, values)


def divide(values: np.ndarray, divisor: float | np.ndarray) -> np.ndarray:
    """Element-wise division where zero divisors give inf or NaN, not an error."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.asarray(values, dtype=np.float64) / np.asarray(divisor, dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A location (or offset vector) in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def translated(self, x: float = 0.0, y: float = 0.0) -> Point:
        return Point(self.x + x, self.y + y)

    def translated_by(self, offset: float | Point) -> Point:
        """Translate by a vector, or by the same scalar on both axes."""
        if isinstance(offset, Point):
            return Point(self.x + offset.x, self.y + offset.y)
        return Point(self.x + offset, self.y + offset)

    def translated_polar(self, distance: float, angle: float) -> Point:
        """Translate by ``distance`` in the direction of ``angle`` (radians)."""
        return Point(
            self.x + distance * math.cos(angle),
            self.y + distance * math.sin(angle),
        )

    def scaled(self, x: float = 1.0, y: float = 1.0) -> Point:
        return Point(self.x * x, self.y * y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __add__(self, other: object) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Point:
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: object) -> Point:
        if isinstance(other, Point):
            return Point(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Point:
        if isinstance(other, Real):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Point:
        if isinstance(other, Point):
            x, y = divide([self.x, self.y], [other.x, other.y])
        elif isinstance(other, Real):
            x, y = divide([self.x, self.y], other)
        else:
            return NotImplemented
        return Point(float(x), float(y))

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __round__(self, ndigits: int | None = None) -> Point:
        x, y = round_half_away(np.array([self.x, self.y]), ndigits)
        return Point(float(x), float(y))


@dataclass(frozen=True)
class Size:
    """A 2D extent. Negative values are allowed and propagate."""

    width: float = 0.0
    height: float = 0.0

    def scaled(self, width: float = 1.0, height: float = 1.0) -> Size:
        return Size(self.width * width, self.height * height)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    def __add__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width + other.width, self.height + other.height)
        return NotImplemented

    def __sub__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        return NotImplemented

    def __mul__(self, other: object) -> Size:
        if isinstance(other, Size):
            return Size(self.width * other.width, self.height * other.height)
        if isinstance(other, Real):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Size:
        if isinstance(other, Real):
            return Size(self.width * other, self.height * other)
        return NotImplemented

    def __truediv__(self, other: object) -> Size:
        if isinstance(other, Size):
            width, height = divide([self.width, self.height], [other.width, other.height])
        elif isinstance(other, Real):
            width, height = divide([self.width, self.height], other)
        else:
            return NotImplemented
        return Size(float(width), float(height))

    def __round__(self, ndigits: int | None = None) -> Size:
        width, height = round_half_away(np.array([self.width, self.height]), ndigits)
        return Size(float(width), float(height))
