"""
Configuration Parser.

Parse pipe-delimited YAML configuration files.

Example:
    solver:
      tol: 1.0e-10
      accept_tol: 1.0e-6
    queries: |
      Name | P1  | P2   | Arc length | Samples | Output
      ---- | --- | ---- | ---------- | ------- | ---------
      sag  | 0,0 | 10,0 | 12         | auto    | curves.h5
"""

import yaml
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from catena.core.config import SolverConfig


METHODS = ("newton", "closed_form")


@dataclass
class QueryEntry:
    """Single solve query."""
    name: str
    p1: Tuple[float, float]
    p2: Tuple[float, float]
    arc_length: float
    samples: Optional[int]           # None -> one segment per unit of chord
    output: str                      # HDF5 file, '' -> not saved
    method: str = "newton"           # 'newton' or 'closed_form'


@dataclass
class RunConfig:
    """Complete run configuration."""
    solver: SolverConfig = field(default_factory=SolverConfig)
    queries: List[QueryEntry] = field(default_factory=list)


def load_config(filepath: str) -> RunConfig:
    """
    Load configuration from YAML file.
    
    Parameters
    ----------
    filepath : str
        Path to YAML configuration file
    
    Returns
    -------
    config : RunConfig
    """
    with open(filepath, "r") as f:
        raw = yaml.safe_load(f) or {}
    
    return parse_config(raw)


def parse_config(raw: Dict) -> RunConfig:
    """Build a RunConfig from an already-loaded YAML mapping."""
    solver = SolverConfig.from_dict(raw.get("solver") or {})
    
    queries = []
    if "queries" in raw:
        queries = _parse_query_table(raw["queries"])
    
    return RunConfig(solver=solver, queries=queries)


# Column header -> QueryEntry field
QUERY_COLUMNS = {
    "name": "name",
    "p1": "p1",
    "p2": "p2",
    "arc length": "arc_length",
    "length": "arc_length",
    "samples": "samples",
    "output": "output",
    "method": "method",
}

REQUIRED_COLUMNS = ("p1", "p2", "arc_length")

SEPARATOR_ROW = re.compile(r"^[-|:\s]+$")


def _parse_query_table(table_str: str) -> List[QueryEntry]:
    """
    Parse the queries table into QueryEntry rows.
    
    The first non-blank line names the columns (case-insensitive, see
    QUERY_COLUMNS); dash separator lines are ignored. Missing trailing cells
    take the column defaults.
    """
    lines = [l.strip() for l in table_str.strip().splitlines() if l.strip()]
    lines = [l for l in lines if not SEPARATOR_ROW.match(l)]
    
    if not lines:
        return []
    
    columns = []
    for header in lines[0].split("|"):
        key = header.strip().lower()
        if key not in QUERY_COLUMNS:
            raise ValueError(f"Unknown query column '{header.strip()}'")
        columns.append(QUERY_COLUMNS[key])
    
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise ValueError(f"Queries table is missing columns: {missing}")
    
    entries = []
    for idx, line in enumerate(lines[1:]):
        cells = dict(zip(columns, (v.strip() for v in line.split("|"))))
        name = cells.get("name") or f"query_{idx}"
        
        method = (cells.get("method") or "newton").lower()
        if method not in METHODS:
            raise ValueError(f"Unknown method '{method}' for query {name}")
        
        entries.append(QueryEntry(
            name=name,
            p1=parse_point(cells.get("p1", "")),
            p2=parse_point(cells.get("p2", "")),
            arc_length=float(cells.get("arc_length", "nan")),
            samples=parse_samples(cells.get("samples", "")),
            output=cells.get("output", ""),
            method=method,
        ))
    
    return entries


def parse_point(point_str: str) -> Tuple[float, float]:
    """
    Parse a point string.
    
    Examples:
        '0,0' -> (0.0, 0.0)
        '(1.5, -2)' -> (1.5, -2.0)
    """
    cleaned = point_str.strip().strip("()[]")
    parts = [p.strip() for p in cleaned.split(",")]
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Invalid point: '{point_str}'")
    return float(parts[0]), float(parts[1])


def parse_samples(samples_str: str) -> Optional[int]:
    """
    Parse sample count.
    
    Examples:
        'auto' or '' -> None (one segment per unit of chord)
        '50' -> 50
    """
    samples_str = samples_str.strip().lower()
    if samples_str in ("", "auto"):
        return None
    
    n = int(samples_str)
    if n < 1:
        raise ValueError(f"Samples must be >= 1, got {n}")
    return n
