"""
Utility functions for CATENA.
"""

from catena.core.geometry import chord_length, order_points, max_arc_length
from catena.utils.sampling import (
    sample_catenary,
    default_segment_count,
    arc_length,
    arc_length_numeric,
    lowest_point,
)
from catena.utils.residuals import compute_residuals

__all__ = [
    "chord_length",
    "order_points",
    "max_arc_length",
    # Sampling
    "sample_catenary",
    "default_segment_count",
    "arc_length",
    "arc_length_numeric",
    "lowest_point",
    "compute_residuals",
]
