"""
Catenary Equation System.

Residuals and analytic Jacobian for y = a*cosh((x - b)/a) + c through
(x1, y1), (x2, y2) with arc length s:

    r1 = a*cosh(u1) + c - y1
    r2 = a*cosh(u2) + c - y2
    r3 = a*(sinh(u2) - sinh(u1)) - s

with u_i = (x_i - b)/a. Parameters with a <= 0 are infeasible: residuals are
+inf and the Jacobian is all zeros.
"""

import numpy as np
from typing import Sequence


def residuals(
    params: Sequence[float],
    x1: float, y1: float,
    x2: float, y2: float,
    s: float,
) -> np.ndarray:
    """
    Residual vector of the three governing equations.
    
    Parameters
    ----------
    params : array-like (3,)
        Candidate (a, b, c)
    x1, y1, x2, y2 : float
        Endpoints
    s : float
        Target arc length
    
    Returns
    -------
    r : ndarray (3,)
        [r1, r2, r3]; all +inf when a <= 0. Overflow shows up as inf/nan.
    """
    a, b, c = params
    
    if not a > 0:
        return np.full(3, np.inf)
    
    u1 = (x1 - b) / a
    u2 = (x2 - b) / a
    
    with np.errstate(over="ignore", invalid="ignore"):
        r1 = a * np.cosh(u1) + c - y1
        r2 = a * np.cosh(u2) + c - y2
        r3 = a * (np.sinh(u2) - np.sinh(u1)) - s
    
    return np.array([r1, r2, r3], dtype=np.float64)


def jacobian(
    params: Sequence[float],
    x1: float, y1: float,
    x2: float, y2: float,
    s: float,
) -> np.ndarray:
    """
    Analytic Jacobian d(r1, r2, r3)/d(a, b, c).
    
    Returns
    -------
    J : ndarray (3, 3)
        Zero matrix when a <= 0, which makes the linear solve fail.
    """
    a, b, _ = params
    
    if not a > 0:
        return np.zeros((3, 3))
    
    u1 = (x1 - b) / a
    u2 = (x2 - b) / a
    
    with np.errstate(over="ignore", invalid="ignore"):
        cosh1, sinh1 = np.cosh(u1), np.sinh(u1)
        cosh2, sinh2 = np.cosh(u2), np.sinh(u2)
        
        J = np.array([
            [cosh1 - u1 * sinh1, -sinh1, 1.0],
            [cosh2 - u2 * sinh2, -sinh2, 1.0],
            [sinh2 - sinh1 - (u2 * cosh2 - u1 * cosh1), cosh1 - cosh2, 0.0],
        ], dtype=np.float64)
    
    return J


def residual_norm(r: np.ndarray) -> float:
    """Euclidean norm of a residual vector (inf stays inf)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sqrt(np.sum(np.square(r))))
