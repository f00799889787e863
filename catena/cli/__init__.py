"""
Command line interface.
"""

from catena.cli.main import main

__all__ = ["main"]
