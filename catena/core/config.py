"""
Solver Configuration.

Tolerances and budgets for the Newton solver, kept out of the algorithm code.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


DEFAULT_TOL = 1e-10          # Newton convergence on residual norm
DEFAULT_ACCEPT_TOL = 1e-6    # verification of a converged seed
DEFAULT_MAX_ITER = 100
DEFAULT_MAX_HALVINGS = 10
DEFAULT_PIVOT_TOL = 1e-14    # relative to max |A_ij|
DEFAULT_A_FACTORS = (0.5, 1.0, 1.5, 2.0, 3.0)
DEFAULT_B_OFFSETS = (0.0, 0.1, -0.1)


@dataclass(frozen=True)
class SolverConfig:
    """Numerical settings for solve_catenary."""
    tol: float = DEFAULT_TOL
    accept_tol: float = DEFAULT_ACCEPT_TOL
    max_iter: int = DEFAULT_MAX_ITER
    max_halvings: int = DEFAULT_MAX_HALVINGS
    pivot_tol: float = DEFAULT_PIVOT_TOL
    a_factors: Tuple[float, ...] = DEFAULT_A_FACTORS
    b_offsets: Tuple[float, ...] = DEFAULT_B_OFFSETS

    def __post_init__(self):
        if self.tol <= 0 or self.accept_tol <= 0:
            raise ValueError("Tolerances must be positive")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.max_halvings < 1:
            raise ValueError(f"max_halvings must be >= 1, got {self.max_halvings}")
        if not self.a_factors or any(f <= 0 for f in self.a_factors):
            raise ValueError("a_factors must be a non-empty list of positive numbers")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "SolverConfig":
        """
        Build a config from a mapping (e.g. the 'solver' section of a YAML file).

        Unknown keys raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown solver settings: {sorted(unknown)}")

        kwargs = dict(values)
        for key in ("tol", "accept_tol", "pivot_tol"):
            if key in kwargs:
                kwargs[key] = float(kwargs[key])
        for key in ("max_iter", "max_halvings"):
            if key in kwargs:
                kwargs[key] = int(kwargs[key])
        for key in ("a_factors", "b_offsets"):
            if key in kwargs:
                kwargs[key] = tuple(float(v) for v in kwargs[key])

        return cls(**kwargs)
