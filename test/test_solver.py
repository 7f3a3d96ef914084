"""Tests for the heat transport solver."""

from heattransport.exceptions import (
    HeatTransportError,
    InvalidParameterError,
    SingularMatrixError,
)
from heattransport.materials import PiecewiseConductivity
from heattransport.quadrature import GaussLegendre
from heattransport.solver import Solution, exact_solution, solve
import numpy as np
import pytest

# Two elements put the Dirichlet node on the material interface, which makes
# the Robin problem degenerate
ROBIN_ELEMENTS = [1, 3, 4, 5, 10, 17, 32, 50]


@pytest.mark.parametrize("boundary_type", ["Robin", "Neumann"])
@pytest.mark.parametrize("n_elems", ROBIN_ELEMENTS)
def test_positions(n_elems, boundary_type):
    positions, _ = solve(n_elems, boundary_type=boundary_type)

    assert len(positions) == n_elems + 1
    assert positions[0] == 0.0
    assert positions[-1] == 2.0
    assert np.all(np.diff(positions) > 0)
    assert np.allclose(np.diff(positions), 2 / n_elems)


@pytest.mark.parametrize("boundary_type", ["Robin", "Neumann"])
@pytest.mark.parametrize("n_elems", ROBIN_ELEMENTS)
def test_boundary_values(n_elems, boundary_type):
    """The appended node is zero and the last unknown carries the Dirichlet
    value, both exactly."""
    _, values = solve(n_elems, boundary_type=boundary_type)

    assert len(values) == n_elems + 1
    assert values[-1] == 0.0
    assert values[-2] == 3.0
    assert np.all(np.isfinite(values))


def test_ten_elements():
    solution = solve(10)

    assert isinstance(solution, Solution)
    assert np.allclose(solution.positions, np.arange(11) * 0.2)
    assert solution.values[10] == 0
    assert solution.values[9] == 3
    assert np.all(np.diff(solution.values) < 0)

    # Linear with slope -42.5 up to the interface, half that beyond
    assert np.allclose(
        solution.values[:-1],
        [62.5, 54.0, 45.5, 37.0, 28.5, 20.0, 15.75, 11.5, 7.25, 3.0],
    )


def test_single_element():
    positions, values = solve(1)

    assert np.array_equal(positions, [0.0, 2.0])
    assert np.array_equal(values, [3.0, 0.0])


def test_two_elements_robin_is_singular():
    with pytest.raises(SingularMatrixError):
        solve(2)


def test_two_elements_neumann():
    positions, values = solve(2, boundary_type="Neumann")

    assert np.array_equal(positions, [0.0, 1.0, 2.0])
    assert np.allclose(values, [-17.0, 3.0, 0.0])


@pytest.mark.parametrize("boundary_type", ["Robin", "Neumann"])
@pytest.mark.parametrize("n_elems", [4, 6, 10, 20, 50])
def test_nodally_exact(n_elems, boundary_type):
    """With the interface on a node the solution is exact at the nodes."""
    positions, values = solve(n_elems, boundary_type=boundary_type)
    exact = exact_solution(positions[:-1], n_elems, boundary_type=boundary_type)

    assert np.allclose(values[:-1], exact, rtol=1e-10, atol=1e-10)


@pytest.mark.parametrize("n_elems", [3, 5, 11, 25, 49])
def test_odd_meshes_are_close(n_elems):
    """The interface inside an element is only resolved approximately."""
    positions, values = solve(n_elems, boundary_type="Neumann")
    exact = exact_solution(positions[:-1], n_elems, boundary_type="Neumann")

    assert np.allclose(values[:-1], exact, atol=5.0)
    assert np.isclose(values[0], exact[0], rtol=0.25)


def test_idempotent():
    first = solve(23)
    second = solve(23)

    assert np.array_equal(first.positions, second.positions)
    assert np.array_equal(first.values, second.values)


def test_quadrature_order_is_irrelevant_for_even_meshes():
    """Element integrands are constant when the interface lies on a node."""
    low = solve(10, integrator=GaussLegendre(2))
    high = solve(10)

    assert np.allclose(low.values, high.values)


def test_homogeneous_rod():
    k = PiecewiseConductivity((), (1.0,))
    _, values = solve(8, conductivity=k, boundary_type="Neumann")

    # u' = 20 throughout, u(1.75) = 3
    assert np.allclose(values[:-1], 3 + 20 * (np.arange(8) * 0.25 - 1.75))


@pytest.mark.parametrize("n_elems", [0, -1, 2.5, "4", None, False])
def test_invalid_element_count(n_elems):
    with pytest.raises(InvalidParameterError):
        solve(n_elems)


def test_errors_share_a_base_class():
    for n_elems in [0, 2]:
        with pytest.raises(HeatTransportError):
            solve(n_elems)


def test_exact_solution_degenerate():
    with pytest.raises(SingularMatrixError):
        exact_solution(0.0, 2)


def test_exact_solution_unknown_boundary():
    with pytest.raises(InvalidParameterError):
        exact_solution(0.0, 4, boundary_type="Dirichlet")
