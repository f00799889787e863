"""
Core Solver Components.

The CATENA algorithm:
1. Residuals and analytic Jacobian of the three catenary equations
2. 3x3 Gaussian elimination with partial pivoting
3. Damped Newton-Raphson from a fixed list of seeds, first verified result wins
"""

from catena.core.config import SolverConfig
from catena.core.solver import (
    CatenaryParameters,
    solve_catenary,
    solve_catenary_with_info,
    evaluate_catenary,
)
from catena.core.closed_form import solve_catenary_closed_form

__all__ = [
    "SolverConfig",
    "CatenaryParameters",
    "solve_catenary",
    "solve_catenary_with_info",
    "evaluate_catenary",
    "solve_catenary_closed_form",
]
