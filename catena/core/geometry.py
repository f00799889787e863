"""
Point geometry helpers.
"""

import numpy as np
from typing import Sequence, Tuple


def chord_length(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Straight-line distance between two points."""
    return float(np.hypot(p2[0] - p1[0], p2[1] - p1[1]))


def order_points(points: Sequence[Sequence[float]]) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Return the two points sorted by ascending x."""
    p, q = [(float(pt[0]), float(pt[1])) for pt in points]
    if q[0] < p[0]:
        return q, p
    return p, q


def max_arc_length(
    p1: Sequence[float],
    p2: Sequence[float],
    floor_y: float,
) -> float:
    """
    Longest useful arc length when the chain must stay above floor_y.
    
    Drop from each endpoint to the floor plus the horizontal span, i.e. the
    length of a chain that just touches the floor. Interactive callers use
    [chord_length, max_arc_length] as the slider range.
    """
    drop1 = abs(floor_y - p1[1])
    drop2 = abs(floor_y - p2[1])
    return float(drop1 + drop2 + abs(p2[0] - p1[0]))
