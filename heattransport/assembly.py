"""Assemble the finite element system of the heat transport problem."""

from .constants import (
    BOUNDARY_FLUX,
    BOUNDARY_TYPES,
    DIRICHLET_VALUE,
    DOMAIN_LENGTH,
    ROBIN_COEFFICIENT,
)
from .exceptions import InvalidParameterError
from .finite_elements import hat, hat_derivative
from .materials import Conductivity, conductivity as default_conductivity
from .quadrature import GaussLegendre

import logging
import numbers
import numpy as np

logger = logging.getLogger(__name__)


def check_element_count(n_elems) -> int:
    """Validate the number of elements of a mesh.

    :param n_elems: The requested number of elements.

    :returns: The number of elements as an `int`.
    """
    if isinstance(n_elems, bool) or not isinstance(n_elems, numbers.Integral):
        raise InvalidParameterError(
            f"The number of elements must be an integer, got {n_elems!r}"
        )
    if n_elems < 1:
        raise InvalidParameterError(
            f"The number of elements must be at least 1, got {n_elems}"
        )

    return int(n_elems)


def integration_bounds(i: int, j: int, n_elems: int, length: float = DOMAIN_LENGTH):
    """Compute the interval on which the supports of two hat functions overlap.

    :param i: The index of the first node.
    :param j: The index of the second node.
    :param n_elems: The number of elements.
    :param length: The length of the domain.

    :returns: A tuple (a, b) clipped to the domain, or None if the supports are
        disjoint.
    """
    if abs(i - j) == 1:
        a = length * max(0.0, min(i, j) / n_elems)
        b = length * min(1.0, max(i, j) / n_elems)
    elif i == j:
        a = length * max(0.0, (i - 1) / n_elems)
        b = length * min(1.0, (i + 1) / n_elems)
    else:
        return None

    return a, b


def assemble(
    n_elems: int,
    conductivity: Conductivity = default_conductivity,
    integrator=None,
    boundary_type: str = "Robin",
    length: float = DOMAIN_LENGTH,
    flux: float = BOUNDARY_FLUX,
    robin: float = ROBIN_COEFFICIENT,
    dirichlet: float = DIRICHLET_VALUE,
) -> tuple[np.ndarray, np.ndarray]:
    """Assemble the stiffness matrix and load vector.

    The unknowns are the values at the nodes 0, ..., n_elems - 1. The flux
    condition at x = 0 enters the load vector as `-flux * e_i(0)`. With the
    "Robin" boundary type it is coupled to the solution by subtracting
    `robin * e_i(0) * e_j(0)` from every stiffness entry; with "Neumann" the
    matrix is left untouched. The equation of the last unknown is replaced by
    the Dirichlet condition `u = dirichlet`, and the node at x = length is not
    part of the system.

    :param n_elems: The number of elements.
    :param conductivity: The material conductivity k(x).
    :param integrator: A callable `(f, a, b) -> float` integrating over [a, b].
        Defaults to a :class:`~quadrature.GaussLegendre` rule.
    :param boundary_type: One of "Robin" or "Neumann".
    :param length: The length of the domain.
    :param flux: The boundary flux at x = 0.
    :param robin: The Robin coefficient at x = 0.
    :param dirichlet: The value imposed on the last unknown.

    :returns: A tuple containing the stiffness matrix of shape
        (n_elems, n_elems) and the load vector of shape (n_elems,).
    """
    n_elems = check_element_count(n_elems)
    if boundary_type not in BOUNDARY_TYPES:
        raise InvalidParameterError(f"Unknown boundary type: {boundary_type!r}")

    if integrator is None:
        integrator = GaussLegendre()

    h = length / n_elems
    logger.debug(
        "Assembling %d x %d system (h = %g, %s boundary, %r)",
        n_elems,
        n_elems,
        h,
        boundary_type,
        integrator,
    )

    # Compute the global stiffness matrix
    K = np.zeros((n_elems, n_elems))
    for i in range(n_elems):
        for j in range(n_elems):
            bounds = integration_bounds(i, j, n_elems, length)
            if bounds is None:
                continue

            K[i, j] = integrator(
                lambda x: conductivity(x)
                * hat_derivative(i, x, h)
                * hat_derivative(j, x, h),
                *bounds,
            )

            if boundary_type == "Robin":
                K[i, j] -= robin * hat(i, 0.0, h) * hat(j, 0.0, h)

    # Compute the load vector
    f = np.array([-flux * hat(i, 0.0, h) for i in range(n_elems)])

    # Set the dirichlet boundary condition
    K[-1] = 0.0
    K[-1, -1] = 1.0
    f[-1] = dirichlet

    return K, f
