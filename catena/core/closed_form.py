"""
Closed-Form Reduction Solver.

Faster alternative to the Newton system. With h = x2 - x1, v = y2 - y1 the
three equations collapse to one equation in xi = h/(2a):

    sinh(xi) = m * xi,    m = sqrt(s^2 - v^2) / h

solved by scalar Newton from acosh(m) + 1. The offsets follow from

    b = x1 - (a*ln((s + v)/(s - v)) - h) / 2
    c = y1 - a*cosh((x1 - b)/a)

The result is verified against the full residual like solve_catenary.
"""

import numpy as np
from typing import Optional, Sequence

from catena.core.config import SolverConfig
from catena.core.equations import residuals, residual_norm
from catena.core.solver import CatenaryParameters, validate_inputs
from catena.errors import NoSolutionFoundError


def solve_shape_parameter(
    m: float,
    max_iter: int = 100,
    step_tol: float = 1e-6,
) -> float:
    """
    Positive root of sinh(xi) - m*xi = 0 for m > 1.
    
    Iterates until successive values differ by less than step_tol.
    """
    if not m > 1:
        raise NoSolutionFoundError(f"Degenerate shape equation (m={m:.6g} <= 1)")
    
    xi = np.arccosh(m) + 1.0
    prev = -1.0
    
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max_iter):
            if abs(xi - prev) <= step_tol:
                break
            prev = xi
            xi = xi - (np.sinh(xi) - m * xi) / (np.cosh(xi) - m)
    
    if not np.isfinite(xi) or xi <= 0:
        raise NoSolutionFoundError(f"Shape equation diverged (m={m:.6g})")
    
    return float(xi)


def solve_catenary_closed_form(
    points: Sequence[Sequence[float]],
    arc_length: float,
    config: Optional[SolverConfig] = None,
    step_tol: float = 1e-12,
) -> CatenaryParameters:
    """
    Solve via the single-equation reduction.
    
    Parameters
    ----------
    points : two (x, y) pairs
        Endpoints, in any order
    arc_length : float
        Curve length between the endpoints
    config : SolverConfig, optional
        Only max_iter and accept_tol are used
    step_tol : float
        Stopping threshold on successive xi values
    
    Returns
    -------
    params : CatenaryParameters
    
    Raises
    ------
    InvalidInputError, ArcLengthTooShortError
        Same validation as solve_catenary
    NoSolutionFoundError
        Degenerate reduction or failed verification
    """
    if config is None:
        config = SolverConfig()
    
    (x1, y1), (x2, y2), _ = validate_inputs(points, arc_length)
    s = float(arc_length)
    h = x2 - x1
    v = y2 - y1
    
    m = np.sqrt(s * s - v * v) / h
    xi = solve_shape_parameter(m, max_iter=config.max_iter, step_tol=step_tol)
    a = h / (2.0 * xi)
    
    b = x1 - (a * np.log((s + v) / (s - v)) - h) * 0.5
    c = y1 - a * np.cosh((x1 - b) / a)
    
    error = residual_norm(residuals((a, b, c), x1, y1, x2, y2, s))
    if not error < config.accept_tol:
        raise NoSolutionFoundError(
            f"Closed-form solution failed verification (residual {error:.3e})"
        )
    
    return CatenaryParameters(float(a), float(b), float(c))
