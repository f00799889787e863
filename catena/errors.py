"""
Error taxonomy for CATENA.

Input errors are raised before any iteration starts and reach the caller.
SingularSystemError and NoConvergenceError are raised by the Newton driver
and recovered per seed; they only show up to callers of the low-level API.
"""

from typing import List, Optional


class CatenaryError(ValueError):
    """Base class for every catenary solve failure."""


class InvalidInputError(CatenaryError):
    """Arc length <= 0 or both points share the same x-coordinate."""


class ArcLengthTooShortError(CatenaryError):
    """Requested arc length is below the chord distance."""

    def __init__(self, arc_length: float, minimum: float):
        self.arc_length = arc_length
        self.minimum = minimum
        super().__init__(
            f"Arc length {arc_length} is less than minimum possible {minimum}"
        )


class SingularSystemError(CatenaryError):
    """Linear system is singular or ill-conditioned."""


class NoConvergenceError(CatenaryError):
    """A single Newton attempt did not reach the tolerance."""


class NoSolutionFoundError(CatenaryError):
    """No seed converged to a verified solution."""

    def __init__(self, message: str = "No solution found", reasons: Optional[List[str]] = None):
        self.reasons = list(reasons or [])
        super().__init__(message)
