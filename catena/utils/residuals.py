"""
Residual Computation.

Check how well a set of parameters satisfies the endpoint and arc-length
constraints.
"""

from typing import Dict, Sequence

from catena.core.equations import residuals, residual_norm
from catena.core.solver import CatenaryParameters


def compute_residuals(
    params: CatenaryParameters,
    p1: Sequence[float],
    p2: Sequence[float],
    arc_length: float,
) -> Dict[str, float]:
    """
    Residual statistics for a solution.
    
    Parameters
    ----------
    params : CatenaryParameters
    p1, p2 : (x, y)
        Endpoints (as passed to the solver, p1 left of p2)
    arc_length : float
        Target arc length
    
    Returns
    -------
    stats : dict
        p1_error:  curve height minus y1 at x1
        p2_error:  curve height minus y2 at x2
        length_error:  arc length minus target
        norm:  Euclidean norm of the three
    """
    (x1, y1), (x2, y2) = p1, p2
    r = residuals(params.as_array(), x1, y1, x2, y2, arc_length)
    
    stats = {
        "p1_error": float(r[0]),
        "p2_error": float(r[1]),
        "length_error": float(r[2]),
        "norm": residual_norm(r),
    }
    
    return stats
