"""Solve the steady heat transport problem on a uniform mesh."""

from .assembly import assemble, check_element_count
from .constants import (
    BOUNDARY_FLUX,
    BOUNDARY_TYPES,
    DIRICHLET_VALUE,
    DOMAIN_LENGTH,
    OUTER_BOUNDARY_VALUE,
    PIVOT_TOLERANCE,
    ROBIN_COEFFICIENT,
)
from .exceptions import InvalidParameterError, SingularMatrixError
from .finite_elements import uniform_mesh
from .linalg import solve_dense
from .materials import PiecewiseConductivity, conductivity as default_conductivity

import logging
from typing import NamedTuple
import numpy as np

logger = logging.getLogger(__name__)


class Solution(NamedTuple):
    """The nodal solution, sorted by ascending position."""

    positions: np.ndarray
    values: np.ndarray


def solve(
    n_elems: int,
    conductivity=default_conductivity,
    integrator=None,
    boundary_type: str = "Robin",
    length: float = DOMAIN_LENGTH,
    flux: float = BOUNDARY_FLUX,
    robin: float = ROBIN_COEFFICIENT,
    dirichlet: float = DIRICHLET_VALUE,
    tol: float = PIVOT_TOLERANCE,
) -> Solution:
    """Solve the heat transport problem.

    The values at the nodes 0, ..., n_elems - 1 come from the linear system of
    :func:`~assembly.assemble`, the last of them equal to `dirichlet`. The node
    at x = length is excluded from the system and takes the value
    `OUTER_BOUNDARY_VALUE`.

    :param n_elems: The number of elements, at least 1.
    :param conductivity: The material conductivity k(x).
    :param integrator: The quadrature used for the stiffness matrix.
    :param boundary_type: One of "Robin" or "Neumann".
    :param length: The length of the domain.
    :param flux: The boundary flux at x = 0.
    :param robin: The Robin coefficient at x = 0.
    :param dirichlet: The value imposed on the last unknown.
    :param tol: The pivot tolerance of the linear solver.

    :returns: A :class:`Solution` of the n_elems + 1 node positions and values.
    """
    n_elems = check_element_count(n_elems)

    K, f = assemble(
        n_elems,
        conductivity=conductivity,
        integrator=integrator,
        boundary_type=boundary_type,
        length=length,
        flux=flux,
        robin=robin,
        dirichlet=dirichlet,
    )
    c = solve_dense(K, f, tol=tol)

    logger.debug("Solved for %d elements, u(0) = %g", n_elems, c[0])

    return Solution(uniform_mesh(n_elems, length), np.append(c, OUTER_BOUNDARY_VALUE))


def exact_solution(
    x,
    n_elems: int,
    conductivity: PiecewiseConductivity = default_conductivity,
    boundary_type: str = "Robin",
    length: float = DOMAIN_LENGTH,
    flux: float = BOUNDARY_FLUX,
    robin: float = ROBIN_COEFFICIENT,
    dirichlet: float = DIRICHLET_VALUE,
):
    """Evaluate the exact solution of the problem the discrete system models.

    Solves -(k u')' = 0 with the flux condition at x = 0 and u = dirichlet at
    the node of the last unknown, x = length * (n_elems - 1) / n_elems. The
    heat flux q = k u' is constant, so u(x) = u(0) + q R(x) with R the thermal
    resistance of the conductivity. When the material interfaces lie on mesh
    nodes the finite element solution is exact at the nodes 0, ..., n_elems - 1.

    :param x: The point(s) at which to evaluate the solution.
    :param n_elems: The number of elements, fixing the Dirichlet node.
    :param conductivity: A conductivity providing `resistance`.
    :param boundary_type: One of "Robin" or "Neumann".
    :param length: The length of the domain.
    :param flux: The boundary flux at x = 0.
    :param robin: The Robin coefficient at x = 0.
    :param dirichlet: The value imposed at the Dirichlet node.

    :returns: The solution values, with the shape of `x`.
    """
    n_elems = check_element_count(n_elems)
    resistance = conductivity.resistance(length * (n_elems - 1) / n_elems)

    if boundary_type == "Robin":
        denominator = 1.0 - robin * resistance
        if np.isclose(denominator, 0.0):
            raise SingularMatrixError(
                "The Robin condition and the Dirichlet node admit no unique solution"
            )
        u0 = (dirichlet - flux * resistance) / denominator
        q = flux - robin * u0
    elif boundary_type == "Neumann":
        q = flux
        u0 = dirichlet - flux * resistance
    else:
        raise InvalidParameterError(
            f"Unknown boundary type: {boundary_type!r}, expected one of "
            f"{BOUNDARY_TYPES}"
        )

    return u0 + q * conductivity.resistance(x)
