"""
Main CATENA Solver.

Entry point for fitting a catenary through two points with a given arc
length. Validates the inputs, orders the points by x, then runs the damped
Newton driver from each seed in turn and returns the first solution that
passes verification.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from catena.core.config import SolverConfig
from catena.core.equations import residuals, jacobian, residual_norm
from catena.core.guesses import initial_guesses
from catena.core.newton import newton_raphson
from catena.errors import (
    InvalidInputError,
    ArcLengthTooShortError,
    SingularSystemError,
    NoConvergenceError,
    NoSolutionFoundError,
)
from catena.core.geometry import chord_length, order_points


Point = Tuple[float, float]


@dataclass(frozen=True)
class CatenaryParameters:
    """Curve y = a*cosh((x - b)/a) + c, with a > 0."""
    a: float
    b: float
    c: float
    
    def __call__(self, x):
        return evaluate_catenary(self, x)
    
    def as_array(self) -> np.ndarray:
        return np.array([self.a, self.b, self.c], dtype=np.float64)


def evaluate_catenary(params: CatenaryParameters, x):
    """
    Evaluate a*cosh((x - b)/a) + c.
    
    Parameters
    ----------
    params : CatenaryParameters
    x : float or ndarray
    
    Returns
    -------
    y : float or ndarray (same shape as x)
    """
    a, b, c = params.a, params.b, params.c
    y = a * np.cosh((np.asarray(x, dtype=np.float64) - b) / a) + c
    if np.ndim(y) == 0:
        return float(y)
    return y


def validate_inputs(
    points: Sequence[Sequence[float]],
    arc_length: float,
) -> Tuple[Point, Point, float]:
    """
    Check the mathematical domain and order the points by x.
    
    Returns
    -------
    p1, p2 : (x, y)
        Endpoints with p1[0] < p2[0]
    chord : float
        Straight-line distance between them
    
    Raises
    ------
    InvalidInputError
        arc_length <= 0 (or not finite), non-finite coordinates, equal x
    ArcLengthTooShortError
        arc_length < chord distance
    """
    if len(points) != 2:
        raise InvalidInputError(f"Expected two points, got {len(points)}")
    
    (x1, y1), (x2, y2) = [(float(p[0]), float(p[1])) for p in points]
    arc_length = float(arc_length)
    
    if not np.isfinite(arc_length) or arc_length <= 0:
        raise InvalidInputError("Arc length must be positive")
    if not np.all(np.isfinite([x1, y1, x2, y2])):
        raise InvalidInputError("Point coordinates must be finite")
    if x1 == x2:
        raise InvalidInputError("Points must have different x-coordinates")
    
    p1, p2 = order_points(((x1, y1), (x2, y2)))
    chord = chord_length(p1, p2)
    if arc_length < chord:
        raise ArcLengthTooShortError(arc_length, chord)
    
    return p1, p2, chord


def solve_catenary(
    points: Sequence[Sequence[float]],
    arc_length: float,
    config: Optional[SolverConfig] = None,
    verbose: bool = False,
) -> CatenaryParameters:
    """
    Solve for the catenary through two points with a given arc length.
    
    Parameters
    ----------
    points : two (x, y) pairs
        Endpoints, in any order
    arc_length : float
        Curve length between the endpoints
    config : SolverConfig, optional
        Tolerances and budgets (defaults if None)
    verbose : bool
        Print progress
    
    Returns
    -------
    params : CatenaryParameters
    
    Raises
    ------
    InvalidInputError, ArcLengthTooShortError
        Before any iteration
    NoSolutionFoundError
        No seed converged to a verified solution
    """
    params, _ = solve_catenary_with_info(points, arc_length, config, verbose)
    return params


def solve_catenary_with_info(
    points: Sequence[Sequence[float]],
    arc_length: float,
    config: Optional[SolverConfig] = None,
    verbose: bool = False,
) -> Tuple[CatenaryParameters, Dict]:
    """
    Same as solve_catenary, also returning diagnostics.
    
    Returns
    -------
    params : CatenaryParameters
    info : dict
        n_seeds, seeds_tried, seed_index, seed, iterations, residual_norm,
        forced_steps, failures (list of per-seed reasons)
    """
    if config is None:
        config = SolverConfig()
    
    p1, p2, chord = validate_inputs(points, arc_length)
    (x1, y1), (x2, y2) = p1, p2
    s = float(arc_length)
    
    def equations(params):
        return residuals(params, x1, y1, x2, y2, s)
    
    def jac(params):
        return jacobian(params, x1, y1, x2, y2, s)
    
    guesses = initial_guesses(
        p1, p2, s, a_factors=config.a_factors, b_offsets=config.b_offsets
    )
    
    if verbose:
        print(f"[CATENA] Solving {p1} -> {p2}, s={s:g} (chord {chord:g})")
        print(f"[CATENA] {len(guesses)} initial guesses")
    
    failures: List[str] = []
    
    for idx, guess in enumerate(guesses):
        try:
            result = newton_raphson(
                equations, jac, guess,
                max_iter=config.max_iter,
                tol=config.tol,
                max_halvings=config.max_halvings,
                pivot_tol=config.pivot_tol,
            )
        except (SingularSystemError, NoConvergenceError) as e:
            failures.append(f"seed {idx}: {e}")
            if verbose:
                print(f"[CATENA]   seed {idx} a={guess[0]:.4g} b={guess[1]:.4g}: {e}")
            continue
        
        # Re-verify independently of the driver's own bookkeeping
        a, b, c = result.params
        error = residual_norm(equations(result.params))
        if not (a > 0 and error < config.accept_tol):
            failures.append(f"seed {idx}: verification failed (residual {error:.3e})")
            if verbose:
                print(f"[CATENA]   seed {idx}: rejected, residual {error:.3e}")
            continue
        
        if verbose:
            print(
                f"[CATENA] Converged from seed {idx} in {result.iterations} iterations: "
                f"a={a:.6g}, b={b:.6g}, c={c:.6g}"
            )
        
        info = {
            "n_seeds": len(guesses),
            "seeds_tried": idx + 1,
            "seed_index": idx,
            "seed": guess,
            "iterations": result.iterations,
            "residual_norm": error,
            "forced_steps": result.forced_steps,
            "failures": failures,
            "chord_length": chord,
        }
        return CatenaryParameters(float(a), float(b), float(c)), info
    
    if verbose:
        print(f"[CATENA] No solution found after {len(guesses)} seeds")
    
    raise NoSolutionFoundError(
        f"No solution found for points {p1}, {p2} with arc length {s}",
        reasons=failures,
    )
