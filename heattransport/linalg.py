"""Dense linear solvers."""

from .constants import PIVOT_TOLERANCE
from .exceptions import InvalidParameterError, SingularMatrixError
import numpy as np


def solve_dense(A, b, tol: float = PIVOT_TOLERANCE) -> np.ndarray:
    """Solve the linear system A x = b by Gaussian elimination with partial
    pivoting.

    At each step the row holding the largest absolute value in the pivot
    column is swapped into the pivot position, ties going to the lowest row.
    The elimination runs on private copies, so `A` and `b` are left unchanged.

    :param A: A square array of shape (n, n).
    :param b: An array of shape (n,).
    :param tol: Pivots with an absolute value below this are treated as zero.

    :returns: An array of shape (n,) containing the solution.
    """
    A = np.array(A, dtype=float)
    b = np.array(b, dtype=float)

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise InvalidParameterError(f"Expected a square matrix, got shape {A.shape}")
    if b.shape != (A.shape[0],):
        raise InvalidParameterError(
            f"Right-hand side of shape {b.shape} does not match matrix of shape "
            f"{A.shape}"
        )

    size = A.shape[0]

    # Forward elimination
    for k in range(size):
        pivot = k + np.argmax(np.abs(A[k:, k]))
        if abs(A[pivot, k]) < tol:
            raise SingularMatrixError(
                f"Matrix is singular to working precision (pivot {A[pivot, k]:.3e} "
                f"in column {k})"
            )

        if pivot != k:
            A[[k, pivot]] = A[[pivot, k]]
            b[[k, pivot]] = b[[pivot, k]]

        factors = A[k + 1 :, k] / A[k, k]
        A[k + 1 :, k:] -= np.outer(factors, A[k, k:])
        b[k + 1 :] -= factors * b[k]

    # Back substitution
    x = np.zeros(size)
    for i in range(size - 1, -1, -1):
        x[i] = (b[i] - np.dot(A[i, i + 1 :], x[i + 1 :])) / A[i, i]

    return x
