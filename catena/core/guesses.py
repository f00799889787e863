"""
Initial Guess Generation.

Newton is only locally convergent on this transcendental system, so a small
fixed set of seeds is tried in order. All seeds put the vertex near the
midpoint height: c = mid_y - a.
"""

import numpy as np
from typing import List, Sequence, Tuple

from catena.core.config import DEFAULT_A_FACTORS, DEFAULT_B_OFFSETS


Guess = Tuple[float, float, float]


def estimate_a(span: float, arc_length: float) -> float:
    """
    Rough estimate of a from span and arc length.
    
    a ~ s / (2 sinh(span / (2s/pi))), falling back to s/4 when that is
    non-finite or non-positive.
    """
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        a_est = arc_length / (2.0 * np.sinh(span / (2.0 * arc_length / np.pi)))
    
    if not np.isfinite(a_est) or a_est <= 0:
        a_est = arc_length / 4.0
    
    return float(a_est)


def initial_guesses(
    p1: Sequence[float],
    p2: Sequence[float],
    arc_length: float,
    a_factors: Sequence[float] = DEFAULT_A_FACTORS,
    b_offsets: Sequence[float] = DEFAULT_B_OFFSETS,
) -> List[Guess]:
    """
    Ordered list of (a, b, c) seeds.
    
    First the symmetric seed (a_est, mid_x, mid_y - a_est), then every
    combination of a_est * factor and mid_x + offset * span, without
    repeating the first seed.
    
    Parameters
    ----------
    p1, p2 : (x, y)
        Endpoints, p1 left of p2
    arc_length : float
        Target arc length
    a_factors : sequence of float
        Multipliers for the estimated a
    b_offsets : sequence of float
        Horizontal shifts of b as fractions of the x-span
    
    Returns
    -------
    guesses : list of (a, b, c)
    """
    x1, y1 = p1
    x2, y2 = p2
    
    mid_x = 0.5 * (x1 + x2)
    mid_y = 0.5 * (y1 + y2)
    span = x2 - x1
    
    a_est = estimate_a(span, arc_length)
    
    base = (a_est, mid_x, mid_y - a_est)
    guesses = [base]
    
    for factor in a_factors:
        a = a_est * factor
        for offset in b_offsets:
            guess = (a, mid_x + offset * span, mid_y - a)
            if guess not in guesses:
                guesses.append(guess)
    
    return guesses
