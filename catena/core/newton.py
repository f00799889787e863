"""
Damped Newton-Raphson Driver.

Iterates x <- x + t*dx with dx from J(x) dx = -f(x) and t chosen by a
backtracking line search (t = 1, 1/2, 1/4, ...). The first trial that keeps
a > 0 and lowers ||f|| is taken. If the halving budget runs out, the last
feasible trial is taken anyway, so single steps may increase ||f||; only the
final tolerance check decides convergence.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from catena.core.equations import residual_norm
from catena.core.linalg import solve_linear_system
from catena.errors import NoConvergenceError


EquationsFn = Callable[[np.ndarray], np.ndarray]
JacobianFn = Callable[[np.ndarray], np.ndarray]


@dataclass
class NewtonResult:
    """Converged Newton attempt."""
    params: np.ndarray
    residual_norm: float
    iterations: int
    history: List[float] = field(default_factory=list)
    forced_steps: int = 0          # steps taken after line-search exhaustion


def newton_raphson(
    equations: EquationsFn,
    jacobian: JacobianFn,
    guess: Sequence[float],
    max_iter: int = 100,
    tol: float = 1e-10,
    max_halvings: int = 10,
    pivot_tol: float = 1e-14,
) -> NewtonResult:
    """
    Run one Newton attempt from a seed.
    
    Parameters
    ----------
    equations : callable
        params (3,) -> residual vector (3,)
    jacobian : callable
        params (3,) -> Jacobian (3, 3)
    guess : array-like (3,)
        Initial (a, b, c)
    max_iter : int
        Iteration budget
    tol : float
        Convergence threshold on the residual norm
    max_halvings : int
        Line-search attempts per iteration
    pivot_tol : float
        Passed to the linear solver
    
    Returns
    -------
    result : NewtonResult
    
    Raises
    ------
    SingularSystemError
        Jacobian solve failed
    NoConvergenceError
        Budget exhausted, non-finite residual, or no feasible step (a > 0)
    """
    params = np.array(guess, dtype=np.float64)
    history = []
    forced_steps = 0
    
    for iteration in range(max_iter):
        f = equations(params)
        norm = residual_norm(f)
        history.append(norm)
        
        if not np.isfinite(norm):
            raise NoConvergenceError(
                f"Non-finite residual at iteration {iteration}"
            )
        
        if norm < tol:
            return NewtonResult(
                params=params,
                residual_norm=norm,
                iterations=iteration,
                history=history,
                forced_steps=forced_steps,
            )
        
        J = jacobian(params)
        delta = solve_linear_system(J, -f, pivot_tol=pivot_tol)
        
        # Backtracking line search
        step = 1.0
        accepted = False
        for attempt in range(max_halvings):
            trial = params + step * delta
            
            if trial[0] > 0:
                trial_norm = residual_norm(equations(trial))
                last_attempt = attempt == max_halvings - 1
                
                if trial_norm < norm or last_attempt:
                    params = trial
                    accepted = True
                    if last_attempt and not trial_norm < norm:
                        forced_steps += 1
                    break
            
            step *= 0.5
        
        if not accepted:
            raise NoConvergenceError(
                f"Line search found no step with a > 0 at iteration {iteration}"
            )
    
    raise NoConvergenceError(
        f"No convergence after {max_iter} iterations "
        f"(residual {history[-1]:.3e})"
    )
