"""
HDF5 Solution Table I/O.

Store and retrieve solved curves in HDF5 format.

File structure:
    curves.h5/
        {name}/                 # one group per query
            params              # (3,) float64 - a, b, c
            points              # (2, 2) float64 - ordered endpoints
            samples             # (n, 2) float64 - sampled (x, y)
            attrs:
                arc_length      # float
                residual_norm   # float
                solver          # 'catena'
                created         # ISO timestamp
                metadata        # JSON string
"""

import numpy as np
import h5py
import json
from datetime import datetime
from typing import Dict, Optional, Any, List, Sequence
from pathlib import Path

from catena.core.solver import CatenaryParameters


def save_solution(
    filepath: str,
    name: str,
    params: CatenaryParameters,
    points: Sequence[Sequence[float]],
    arc_length: float,
    samples: Optional[np.ndarray] = None,
    residual_norm: float = float("nan"),
    metadata: Optional[Dict] = None,
    overwrite: bool = False,
) -> None:
    """
    Save a solved curve to an HDF5 table.
    
    Parameters
    ----------
    filepath : str
        Path to HDF5 file (created if missing)
    name : str
        Group name for this solution
    params : CatenaryParameters
        Solved curve
    points : two (x, y) pairs
        Endpoints
    arc_length : float
        Requested arc length
    samples : ndarray (n, 2), optional
        Sampled curve points
    residual_norm : float
        Verification residual
    metadata : dict, optional
        Additional metadata
    overwrite : bool
        If True, replace an existing group of the same name
    """
    points = np.asarray(points, dtype=np.float64).reshape(2, 2)
    if samples is None:
        samples = np.zeros((0, 2), dtype=np.float64)
    samples = np.asarray(samples, dtype=np.float64).reshape(-1, 2)
    
    with h5py.File(filepath, "a") as f:
        if name in f:
            if overwrite:
                del f[name]
            else:
                raise ValueError(
                    f"Solution '{name}' already exists. "
                    f"Use overwrite=True to replace."
                )
        
        grp = f.create_group(name)
        
        grp.create_dataset("params", data=params.as_array())
        grp.create_dataset("points", data=points)
        grp.create_dataset("samples", data=samples, compression="gzip")
        
        grp.attrs["arc_length"] = float(arc_length)
        grp.attrs["residual_norm"] = float(residual_norm)
        grp.attrs["solver"] = "catena"
        grp.attrs["created"] = datetime.now().isoformat()
        
        if metadata:
            grp.attrs["metadata"] = json.dumps(metadata)


def load_solution(filepath: str, name: str) -> Dict[str, Any]:
    """
    Load a solved curve from an HDF5 table.
    
    Returns
    -------
    data : dict
        params (CatenaryParameters), points, samples, arc_length,
        residual_norm, solver, created, metadata
    """
    with h5py.File(filepath, "r") as f:
        if name not in f:
            raise KeyError(f"Solution '{name}' not found in {filepath}")
        
        grp = f[name]
        a, b, c = grp["params"][...]
        
        data = {
            "params": CatenaryParameters(float(a), float(b), float(c)),
            "points": grp["points"][...],
            "samples": grp["samples"][...],
            "arc_length": float(grp.attrs.get("arc_length", np.nan)),
            "residual_norm": float(grp.attrs.get("residual_norm", np.nan)),
            "solver": grp.attrs.get("solver", "unknown"),
            "created": grp.attrs.get("created", ""),
        }
        
        if "metadata" in grp.attrs:
            data["metadata"] = json.loads(grp.attrs["metadata"])
        else:
            data["metadata"] = {}
    
    return data


def list_solutions(filepath: str) -> List[str]:
    """List solution names in a table (empty if the file does not exist)."""
    if not Path(filepath).exists():
        return []
    
    with h5py.File(filepath, "r") as f:
        return list(f.keys())
