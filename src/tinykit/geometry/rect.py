"""Axis-aligned rectangle value with anchor, alignment and transform helpers.

Coordinates grow rightward and downward: "top" is ``min_y`` and "bottom"
is ``max_y``. Every operation returns a new ``Rect``; nothing mutates.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

import numpy as np

from .primitives import Point, Size, divide, round_half_away


DEFAULT_MARGIN = 0.0

ANCHORS = (
    "top_left",
    "top_right",
    "bottom_left",
    "bottom_right",
    "center_left",
    "center_right",
    "center_top",
    "center_bottom",
    "center",
)

ALIGNMENTS = (
    "inner_left",
    "outer_left",
    "inner_right",
    "outer_right",
    "inner_top",
    "outer_top",
    "inner_bottom",
    "outer_bottom",
    "center",
)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and extent.

    Negative widths and heights are not rejected. ``min_*``/``max_*``
    always resolve to the algebraic minimum and maximum of the two edges.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_origin_size(cls, origin: Point, size: Size) -> Rect:
        return cls(origin.x, origin.y, size.width, size.height)

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rect:
        """Rectangle spanned by two opposite corners given in any order."""
        return cls(
            min(a.x, b.x),
            min(a.y, b.y),
            abs(b.x - a.x),
            abs(b.y - a.y),
        )

    @classmethod
    def from_array(cls, values: np.ndarray) -> Rect:
        """Build from ``[x, y, width, height]``."""
        x, y, width, height = np.asarray(values, dtype=np.float64).reshape(4)
        return cls(float(x), float(y), float(width), float(height))

    # -- derived values ---------------------------------------------------

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    # -- anchors ----------------------------------------------------------

    @property
    def top_left(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def top_right(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def center_left(self) -> Point:
        return Point(self.min_x, self.mid_y)

    @property
    def center_right(self) -> Point:
        return Point(self.max_x, self.mid_y)

    @property
    def center_top(self) -> Point:
        return Point(self.mid_x, self.min_y)

    @property
    def center_bottom(self) -> Point:
        return Point(self.mid_x, self.max_y)

    def anchor(self, name: str) -> Point:
        """Return the anchor point called ``name`` (see ``ANCHORS``)."""
        if name not in ANCHORS:
            raise ValueError(
                f"Unknown anchor '{name}'. Use one of: {', '.join(ANCHORS)}."
            )
        return getattr(self, name)

    def with_anchor(self, name: str, point: Point) -> Rect:
        """Return a rectangle whose anchor ``name`` is moved to ``point``.

        Corners resize the rectangle and keep the opposite corner in place.
        Edge midpoints do the same along their own axis. On the other axis
        the offset shrinks (or grows) both edges symmetrically, so that axis's
        center stays where it was. ``center`` moves the rectangle without
        resizing it.
        """
        try:
            setter = _ANCHOR_SETTERS[name]
        except KeyError:
            raise ValueError(
                f"Unknown anchor '{name}'. Use one of: {', '.join(ANCHORS)}."
            ) from None
        return setter(self, point)

    # -- alignment --------------------------------------------------------

    def aligned_inner_left(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(reference.min_x + margin, self.y, self.width, self.height)

    def aligned_outer_left(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(reference.min_x - margin - self.width, self.y, self.width, self.height)

    def aligned_inner_right(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(reference.max_x - margin - self.width, self.y, self.width, self.height)

    def aligned_outer_right(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(reference.max_x + margin, self.y, self.width, self.height)

    def aligned_inner_top(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(self.x, reference.min_y + margin, self.width, self.height)

    def aligned_outer_top(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(self.x, reference.min_y - margin - self.height, self.width, self.height)

    def aligned_inner_bottom(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(self.x, reference.max_y - margin - self.height, self.width, self.height)

    def aligned_outer_bottom(self, reference: Rect, margin: float = DEFAULT_MARGIN) -> Rect:
        return Rect(self.x, reference.max_y + margin, self.width, self.height)

    def aligned(self, reference: Rect, mode: str, margin: float = DEFAULT_MARGIN) -> Rect:
        """Align against ``reference`` using one of ``ALIGNMENTS``.

        ``"center"`` is ``centered_in`` and ignores ``margin``.
        """
        if mode == "center":
            return self.centered_in(reference)
        aligners = {
            "inner_left": Rect.aligned_inner_left,
            "outer_left": Rect.aligned_outer_left,
            "inner_right": Rect.aligned_inner_right,
            "outer_right": Rect.aligned_outer_right,
            "inner_top": Rect.aligned_inner_top,
            "outer_top": Rect.aligned_outer_top,
            "inner_bottom": Rect.aligned_inner_bottom,
            "outer_bottom": Rect.aligned_outer_bottom,
        }
        if mode not in aligners:
            raise ValueError(
                f"Unknown alignment '{mode}'. Use one of: {', '.join(ALIGNMENTS)}."
            )
        return aligners[mode](self, reference, margin)

    def centered_at(self, point: Point) -> Rect:
        return Rect(point.x - self.width / 2, point.y - self.height / 2, self.width, self.height)

    def centered_in(self, reference: Rect) -> Rect:
        return Rect(
            reference.x + (reference.width - self.width) / 2,
            reference.y + (reference.height - self.height) / 2,
            self.width,
            self.height,
        )

    def centered_horizontally(self, reference: Rect) -> Rect:
        return Rect(reference.x + (reference.width - self.width) / 2, self.y, self.width, self.height)

    def centered_vertically(self, reference: Rect) -> Rect:
        return Rect(self.x, reference.y + (reference.height - self.height) / 2, self.width, self.height)

    # -- containment ------------------------------------------------------

    def contained_in(self, reference: Rect) -> Rect | None:
        """Move the rectangle inside ``reference`` with the smallest shift.

        Returns None when it is wider or taller than ``reference``.
        """
        horizontal = self.contained_horizontally(reference)
        if horizontal is None:
            return None
        return horizontal.contained_vertically(reference)

    def contained_horizontally(self, reference: Rect) -> Rect | None:
        if self.width > reference.width:
            return None
        if self.min_x < reference.min_x:
            return self.aligned_inner_left(reference)
        if self.max_x > reference.max_x:
            return self.aligned_inner_right(reference)
        return self

    def contained_vertically(self, reference: Rect) -> Rect | None:
        if self.height > reference.height:
            return None
        if self.min_y < reference.min_y:
            return self.aligned_inner_top(reference)
        if self.max_y > reference.max_y:
            return self.aligned_inner_bottom(reference)
        return self

    # -- translation ------------------------------------------------------

    def translated(self, x: float = 0.0, y: float = 0.0) -> Rect:
        return Rect(self.x + x, self.y + y, self.width, self.height)

    def translated_by(self, offset: float | Point) -> Rect:
        """Translate by a vector, or by the same scalar on both axes."""
        return Rect.from_origin_size(self.origin.translated_by(offset), self.size)

    def translated_polar(self, distance: float, angle: float) -> Rect:
        """Translate by ``distance`` in the direction of ``angle`` (radians)."""
        return Rect.from_origin_size(self.origin.translated_polar(distance, angle), self.size)

    # -- scaling ----------------------------------------------------------

    def scaled(
        self,
        width: float = 1.0,
        height: float = 1.0,
        pivot: Point | None = None,
    ) -> Rect:
        """Scale the extent, keeping ``pivot`` fixed when one is given.

        Without a pivot only the size changes; the origin stays put.
        """
        origin = self.origin
        if pivot is not None:
            origin = origin.translated_by((origin - pivot).scaled(width - 1, height - 1))
        return Rect.from_origin_size(origin, self.size.scaled(width, height))

    def scaled_by(self, factor: float | Point | Size, pivot: Point | None = None) -> Rect:
        """Scale by a scalar on both axes, or per axis from a point or size."""
        if isinstance(factor, Point):
            return self.scaled(factor.x, factor.y, pivot=pivot)
        if isinstance(factor, Size):
            return self.scaled(factor.width, factor.height, pivot=pivot)
        return self.scaled(factor, factor, pivot=pivot)

    # -- insetting --------------------------------------------------------

    def inset(self, distance: float) -> Rect:
        return self._inset(distance, distance)

    def inset_x(self, distance: float) -> Rect:
        return self._inset(distance, 0.0)

    def inset_y(self, distance: float) -> Rect:
        return self._inset(0.0, distance)

    def _inset(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)

    # -- overlap ----------------------------------------------------------

    def contains(self, px: float, py: float) -> bool:
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y

    def intersection(self, other: Rect) -> Rect | None:
        """Shared area of both rectangles, or None if they are disjoint.

        Rectangles that only touch share a zero-width (or zero-height) area.
        """
        left = max(self.min_x, other.min_x)
        right = min(self.max_x, other.max_x)
        top = max(self.min_y, other.min_y)
        bottom = min(self.max_y, other.max_y)
        if right < left or bottom < top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def intersects(self, other: Rect) -> bool:
        return self.intersection(other) is not None

    def intersects_horizontally(self, other: Rect) -> bool:
        return (
            self.min_x < other.max_x and self.max_x > other.min_x
            or other.min_x < self.max_x and other.max_x > self.min_x
        )

    def intersects_vertically(self, other: Rect) -> bool:
        return (
            self.min_y < other.max_y and self.max_y > other.min_y
            or other.min_y < self.max_y and other.max_y > self.min_y
        )

    def bound_by(self, container: Rect) -> Rect | None:
        """Express the rectangle in ``container``'s coordinate space.

        Returns None when the two do not intersect.
        """
        if container.intersection(self) is None:
            return None
        return self - container.origin

    # -- flipping ---------------------------------------------------------

    def flipped(self, containment: Rect) -> Rect:
        """Mirror inside ``containment`` on both axes."""
        return self.flipped_horizontally(containment).flipped_vertically(containment)

    def flipped_horizontally(self, containment: Rect) -> Rect:
        # offset from containment's left edge becomes offset from its right edge
        return self.translated(x=(containment.x - self.x) * 2 + containment.width - self.width)

    def flipped_vertically(self, containment: Rect) -> Rect:
        return self.translated(y=(containment.y - self.y) * 2 + containment.height - self.height)

    # -- conversion and operators -----------------------------------------

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def to_array(self) -> np.ndarray:
        """``[x, y, width, height]`` as a float64 array."""
        return np.array([self.x, self.y, self.width, self.height], dtype=np.float64)

    def __add__(self, other: object) -> Rect:
        if isinstance(other, Size):
            return Rect(self.x, self.y, self.width + other.width, self.height + other.height)
        if isinstance(other, Point):
            return Rect(self.x + other.x, self.y + other.y, self.width, self.height)
        return NotImplemented

    def __sub__(self, other: object) -> Rect:
        if isinstance(other, Size):
            return Rect(self.x, self.y, self.width - other.width, self.height - other.height)
        if isinstance(other, Point):
            return Rect(self.x - other.x, self.y - other.y, self.width, self.height)
        return NotImplemented

    def __mul__(self, other: object) -> Rect:
        if isinstance(other, Real):
            return Rect(self.x * other, self.y * other, self.width * other, self.height * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Rect:
        if isinstance(other, Real):
            return Rect.from_array(divide(self.to_array(), other))
        return NotImplemented

    def __round__(self, ndigits: int | None = None) -> Rect:
        """Round each component half away from zero (2.5 -> 3, -2.5 -> -3)."""
        return Rect.from_array(round_half_away(self.to_array(), ndigits))


def _set_top_left(rect: Rect, point: Point) -> Rect:
    width = rect.width - (point.x - rect.min_x)
    height = rect.height - (point.y - rect.min_y)
    return Rect(point.x, point.y, width, height)


def _set_top_right(rect: Rect, point: Point) -> Rect:
    width = rect.width + (point.x - rect.max_x)
    height = rect.height - (point.y - rect.min_y)
    return Rect(point.x - width, point.y, width, height)


def _set_bottom_left(rect: Rect, point: Point) -> Rect:
    width = rect.width - (point.x - rect.min_x)
    height = rect.height + (point.y - rect.max_y)
    return Rect(point.x, point.y - height, width, height)


def _set_bottom_right(rect: Rect, point: Point) -> Rect:
    width = rect.width + (point.x - rect.max_x)
    height = rect.height + (point.y - rect.max_y)
    return Rect(point.x - width, point.y - height, width, height)


def _set_center(rect: Rect, point: Point) -> Rect:
    return rect.centered_at(point)


def _set_center_left(rect: Rect, point: Point) -> Rect:
    diff = point.y - rect.mid_y
    width = rect.width - (point.x - rect.min_x)
    height = rect.height - diff * 2
    return Rect(point.x, point.y - height / 2 - diff, width, height)


def _set_center_right(rect: Rect, point: Point) -> Rect:
    diff = point.y - rect.mid_y
    width = rect.width + (point.x - rect.max_x)
    height = rect.height - diff * 2
    return Rect(point.x - width, point.y - height / 2 - diff, width, height)


def _set_center_top(rect: Rect, point: Point) -> Rect:
    diff = point.x - rect.mid_x
    width = rect.width - diff * 2
    height = rect.height - (point.y - rect.min_y)
    return Rect(point.x - width / 2 - diff, point.y, width, height)


def _set_center_bottom(rect: Rect, point: Point) -> Rect:
    diff = point.x - rect.mid_x
    width = rect.width - diff * 2
    height = rect.height + (point.y - rect.max_y)
    return Rect(point.x - width / 2 - diff, point.y - height, width, height)


_ANCHOR_SETTERS = {
    "top_left": _set_top_left,
    "top_right": _set_top_right,
    "bottom_left": _set_bottom_left,
    "bottom_right": _set_bottom_right,
    "center_left": _set_center_left,
    "center_right": _set_center_right,
    "center_top": _set_center_top,
    "center_bottom": _set_center_bottom,
    "center": _set_center,
}
