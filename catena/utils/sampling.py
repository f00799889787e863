"""
Curve sampling and arc-length measurement.

Consumers draw a solved catenary as evenly spaced points between the
endpoints.
"""

import numpy as np
from scipy.integrate import quad
from typing import Optional, Sequence, Tuple

from catena.core.solver import CatenaryParameters, evaluate_catenary
from catena.core.geometry import chord_length, order_points


def default_segment_count(p1: Sequence[float], p2: Sequence[float]) -> int:
    """One segment per unit of chord length, at least one."""
    return max(1, int(round(chord_length(p1, p2))))


def sample_catenary(
    params: CatenaryParameters,
    p1: Sequence[float],
    p2: Sequence[float],
    n_segments: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the curve at evenly spaced x between the ordered endpoints.
    
    Parameters
    ----------
    params : CatenaryParameters
    p1, p2 : (x, y)
        Endpoints, any order
    n_segments : int, optional
        Number of segments (n_segments + 1 samples). Default: round(chord).
    
    Returns
    -------
    x, y : ndarray (n_segments + 1,)
    """
    left, right = order_points((p1, p2))
    
    if n_segments is None:
        n_segments = default_segment_count(left, right)
    if n_segments < 1:
        raise ValueError(f"n_segments must be >= 1, got {n_segments}")
    
    x = np.linspace(left[0], right[0], n_segments + 1)
    y = evaluate_catenary(params, x)
    return x, y


def arc_length(params: CatenaryParameters, x1: float, x2: float) -> float:
    """Closed-form arc length a*(sinh(u2) - sinh(u1)) between x1 and x2."""
    a, b = params.a, params.b
    return float(a * (np.sinh((x2 - b) / a) - np.sinh((x1 - b) / a)))


def arc_length_numeric(params: CatenaryParameters, x1: float, x2: float) -> float:
    """
    Arc length by quadrature of sqrt(1 + y'^2) = cosh((x - b)/a).
    
    Independent check of the closed form.
    """
    a, b = params.a, params.b
    
    def integrand(x):
        slope = np.sinh((x - b) / a)
        return np.sqrt(1.0 + slope * slope)
    
    value, _ = quad(integrand, x1, x2, epsabs=1e-12, epsrel=1e-12, limit=200)
    return float(value)


def lowest_point(
    params: CatenaryParameters,
    x1: float,
    x2: float,
) -> Tuple[float, float]:
    """
    Lowest point of the curve on [x1, x2].
    
    The vertex (b, a + c) when it lies between the endpoints, otherwise the
    lower endpoint.
    """
    lo, hi = min(x1, x2), max(x1, x2)
    x = float(np.clip(params.b, lo, hi))
    return x, evaluate_catenary(params, x)
