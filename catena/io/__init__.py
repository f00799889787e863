"""
I/O Module for CATENA.

HDF5 tables of solved curves.
"""

from catena.io.table_io import save_solution, load_solution, list_solutions

__all__ = [
    "save_solution",
    "load_solution",
    "list_solutions",
]
