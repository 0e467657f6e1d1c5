"""Rectangle geometry: points, sizes and axis-aligned rectangles."""

from .primitives import Point, Size, divide, round_half_away
from .rect import ALIGNMENTS, ANCHORS, DEFAULT_MARGIN, Rect

__all__ = [
    "Point",
    "Size",
    "Rect",
    "ANCHORS",
    "ALIGNMENTS",
    "DEFAULT_MARGIN",
    "round_half_away",
    "divide",
]
