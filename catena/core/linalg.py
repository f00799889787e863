"""
3x3 Linear Solver.

Gaussian elimination with partial pivoting and back substitution, used once
per Newton iteration.
"""

import numpy as np

from catena.errors import SingularSystemError


def solve_linear_system(
    A: np.ndarray,
    rhs: np.ndarray,
    pivot_tol: float = 1e-14,
) -> np.ndarray:
    """
    Solve A @ x = rhs.
    
    Parameters
    ----------
    A : ndarray (n, n)
        Coefficient matrix (not modified)
    rhs : ndarray (n,)
        Right-hand side (not modified)
    pivot_tol : float
        A pivot with |p| <= pivot_tol * max|A| counts as zero
    
    Returns
    -------
    x : ndarray (n,)
    
    Raises
    ------
    SingularSystemError
        Zero, tiny or non-finite pivot, or non-finite input.
    """
    A = np.array(A, dtype=np.float64)
    rhs = np.array(rhs, dtype=np.float64)
    n = A.shape[0]
    
    if A.shape != (n, n) or rhs.shape != (n,):
        raise ValueError(f"Shape mismatch: A {A.shape}, rhs {rhs.shape}")
    
    if not (np.all(np.isfinite(A)) and np.all(np.isfinite(rhs))):
        raise SingularSystemError("Non-finite entries in linear system")
    
    scale = np.max(np.abs(A))
    if scale == 0:
        raise SingularSystemError("Singular or ill-conditioned system (zero matrix)")
    threshold = pivot_tol * scale
    
    # Augmented matrix [A | rhs]
    M = np.column_stack([A, rhs])
    
    # Forward elimination
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(M[i:, i])))
        if pivot_row != i:
            M[[i, pivot_row]] = M[[pivot_row, i]]
        
        pivot = M[i, i]
        if not abs(pivot) > threshold:
            raise SingularSystemError(
                f"Singular or ill-conditioned system (pivot {pivot:.3e} in column {i})"
            )
        
        for k in range(i + 1, n):
            factor = M[k, i] / pivot
            M[k, i:] -= factor * M[i, i:]
    
    # Back substitution
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (M[i, n] - M[i, i + 1:n] @ x[i + 1:]) / M[i, i]
    
    if not np.all(np.isfinite(x)):
        raise SingularSystemError("Linear solve produced non-finite values")
    
    return x
