"""
CATENA - Catenary fitting through two points

Finds y = a*cosh((x - b)/a) + c passing through two points with a prescribed
arc length between them.

Core:
- Three residual equations with an analytic Jacobian
- Damped Newton-Raphson with backtracking line search
- Multiple seeds, first solution that re-verifies is returned

Errors:
- InvalidInputError / ArcLengthTooShortError: rejected before iterating
- NoSolutionFoundError: no seed converged and verified
"""

__version__ = "0.1.0"

from .core import (
    SolverConfig,
    CatenaryParameters,
    solve_catenary,
    solve_catenary_with_info,
    evaluate_catenary,
    solve_catenary_closed_form,
)
from .errors import (
    CatenaryError,
    InvalidInputError,
    ArcLengthTooShortError,
    NoSolutionFoundError,
)

__all__ = [
    'SolverConfig',
    'CatenaryParameters',
    'solve_catenary',
    'solve_catenary_with_info',
    'evaluate_catenary',
    'solve_catenary_closed_form',
    'CatenaryError',
    'InvalidInputError',
    'ArcLengthTooShortError',
    'NoSolutionFoundError',
]
