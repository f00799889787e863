"""
CATENA module entry point.

Allows running as: python -m catena solve 0 0 10 0 12
"""

from .cli import main

if __name__ == "__main__":
    main()
