"""Tests for the dense Gaussian elimination solver."""

from heattransport.exceptions import InvalidParameterError, SingularMatrixError
from heattransport.linalg import solve_dense
import numpy as np
import pytest
from scipy.linalg import solve


@pytest.mark.parametrize("n", [1, 2, 5, 20, 50])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_systems(n, seed):
    """Test the solver on random well-conditioned systems."""
    rng = np.random.default_rng(seed)
    A = rng.uniform(-1, 1, (n, n)) + n * np.eye(n)
    b = rng.uniform(-1, 1, n)

    x = solve_dense(A, b)

    assert np.linalg.norm(A @ x - b) <= 1e-9 * np.linalg.norm(b)
    assert np.allclose(x, solve(A, b))


def test_requires_pivoting():
    """A zero in the leading position is handled by a row swap."""
    A = np.array([[0.0, 2.0, 1.0], [1.0, 1.0, 0.0], [3.0, 0.0, 1.0]])
    b = np.array([5.0, 3.0, 6.0])

    assert np.allclose(solve_dense(A, b), np.linalg.solve(A, b))


def test_inputs_are_not_modified():
    A = np.array([[1.0, 4.0], [3.0, 2.0]])
    b = np.array([1.0, 2.0])
    A_copy, b_copy = A.copy(), b.copy()

    solve_dense(A, b)

    assert np.array_equal(A, A_copy)
    assert np.array_equal(b, b_copy)


def test_lists():
    assert np.allclose(solve_dense([[2, 0], [0, 4]], [1, 1]), [0.5, 0.25])


def test_identity_row_is_exact():
    """A row of the identity reproduces its right-hand side exactly."""
    A = np.array([[3.0, -1.0, 0.0], [-1.0, 3.0, -1.0], [0.0, 0.0, 1.0]])
    b = np.array([0.1, 0.7, 3.0])

    assert solve_dense(A, b)[-1] == 3.0


@pytest.mark.parametrize("row", [0, 1, 2])
def test_zero_row(row):
    rng = np.random.default_rng(42)
    A = rng.uniform(-1, 1, (3, 3)) + 3 * np.eye(3)
    A[row] = 0.0

    with pytest.raises(SingularMatrixError):
        solve_dense(A, np.ones(3))


def test_rank_deficient():
    A = np.array([[1.0, 2.0], [2.0, 4.0]])

    with pytest.raises(SingularMatrixError):
        solve_dense(A, [1.0, 2.0])


def test_tolerance():
    A = np.array([[1e-14, 0.0], [0.0, 1.0]])

    with pytest.raises(SingularMatrixError):
        solve_dense(A, [1.0, 1.0])

    assert np.allclose(solve_dense(A, [1.0, 1.0], tol=1e-16), [1e14, 1.0])


def test_singular_is_a_linalg_error():
    with pytest.raises(np.linalg.LinAlgError):
        solve_dense(np.zeros((2, 2)), np.ones(2))


@pytest.mark.parametrize(
    "A, b",
    [
        (np.ones((2, 3)), np.ones(2)),
        (np.ones(3), np.ones(3)),
        (np.eye(3), np.ones(2)),
        (np.eye(3), np.ones((3, 1))),
    ],
)
def test_shape_mismatch(A, b):
    with pytest.raises(InvalidParameterError):
        solve_dense(A, b)
