"""
Query Pipeline Runner.

Solves every query of a configuration file and stores the successful curves.
A failed query is recorded and skipped; it never stops the run.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional

from catena.pipeline.config_parser import RunConfig, QueryEntry, load_config
from catena.core.solver import CatenaryParameters, solve_catenary_with_info
from catena.core.closed_form import solve_catenary_closed_form
from catena.errors import CatenaryError
from catena.io.table_io import save_solution
from catena.utils.residuals import compute_residuals
from catena.utils.sampling import sample_catenary
from catena.core.geometry import order_points


@dataclass
class QueryOutcome:
    """Result of one query."""
    name: str
    params: Optional[CatenaryParameters]
    samples: Optional[np.ndarray] = None       # (n, 2) x, y
    residual_norm: float = float("nan")
    error: str = ""
    
    @property
    def ok(self) -> bool:
        return self.params is not None


class QueryRunner:
    """
    Run solve queries from configuration.
    """
    
    def __init__(self, config: RunConfig, overwrite: bool = True, verbose: bool = True):
        """
        Initialize runner.
        
        Parameters
        ----------
        config : RunConfig
            Parsed configuration
        overwrite : bool
            Replace existing solutions of the same name in output tables
        verbose : bool
            Print progress
        """
        self.config = config
        self.overwrite = overwrite
        self.verbose = verbose
    
    def _print(self, msg: str):
        """Print if verbose."""
        if self.verbose:
            print(f"[CATENA] {msg}")
    
    def run_all(self) -> List[QueryOutcome]:
        """Run every query in order."""
        return [self.run_query(entry) for entry in self.config.queries]
    
    def run_query(self, entry: QueryEntry) -> QueryOutcome:
        """Solve, sample and optionally save one query."""
        self._print(f"Query '{entry.name}': {entry.p1} -> {entry.p2}, s={entry.arc_length:g} ({entry.method})")
        
        points = (entry.p1, entry.p2)
        try:
            if entry.method == "closed_form":
                params = solve_catenary_closed_form(points, entry.arc_length, config=self.config.solver)
                info = {}
            else:
                params, info = solve_catenary_with_info(
                    points, entry.arc_length, config=self.config.solver
                )
        except CatenaryError as e:
            self._print(f"  FAILED: {e}")
            return QueryOutcome(name=entry.name, params=None, error=str(e))
        
        p1, p2 = order_points(points)
        stats = compute_residuals(params, p1, p2, entry.arc_length)
        x, y = sample_catenary(params, p1, p2, entry.samples)
        samples = np.column_stack([x, y])
        
        self._print(
            f"  a={params.a:.6g}, b={params.b:.6g}, c={params.c:.6g} "
            f"(residual {stats['norm']:.2e}, {len(x)} samples)"
        )
        
        if entry.output:
            save_solution(
                entry.output,
                entry.name,
                params,
                (p1, p2),
                entry.arc_length,
                samples=samples,
                residual_norm=stats["norm"],
                metadata={
                    "method": entry.method,
                    "iterations": info.get("iterations"),
                    "seed_index": info.get("seed_index"),
                },
                overwrite=self.overwrite,
            )
            self._print(f"  Saved to {entry.output}")
        
        return QueryOutcome(
            name=entry.name,
            params=params,
            samples=samples,
            residual_norm=stats["norm"],
        )


def run_pipeline(
    config_path: str,
    overwrite: bool = True,
    verbose: bool = True,
) -> List[QueryOutcome]:
    """
    Run all queries from a config file.
    
    Parameters
    ----------
    config_path : str
        Path to YAML config file
    overwrite : bool
        Replace existing solutions in output tables
    verbose : bool
        Print progress
    
    Returns
    -------
    outcomes : list of QueryOutcome
    """
    config = load_config(config_path)
    
    runner = QueryRunner(config=config, overwrite=overwrite, verbose=verbose)
    outcomes = runner.run_all()
    
    if verbose:
        n_ok = sum(o.ok for o in outcomes)
        print(f"[CATENA] {n_ok}/{len(outcomes)} queries solved")
    
    return outcomes
