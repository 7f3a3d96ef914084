"""Piecewise linear finite elements on a uniform one-dimensional mesh."""

from .constants import DOMAIN_LENGTH
import numpy as np


def uniform_mesh(n_elems: int, length: float = DOMAIN_LENGTH) -> np.ndarray:
    """Generate the nodes of a uniform mesh of [0, length].

    :param n_elems: The number of elements.
    :param length: The length of the domain.

    :returns: An array of shape (n_elems + 1,) containing the node positions.
    """
    return np.linspace(0.0, length, n_elems + 1)


def hat(i: int, x, h: float):
    """Evaluate the hat function of node `i`.

    The hat function is one at `h * i`, zero at every other node and linear in
    between, vanishing outside of [h * (i - 1), h * (i + 1)].

    :param i: The index of the node.
    :param x: The point(s) at which to evaluate the basis function.
    :param h: The mesh spacing, strictly positive.

    :returns: The basis function values, with the shape of `x`.
    """
    x = np.asarray(x, dtype=float)

    val = np.where(x < h * i, x / h - i + 1, -x / h + i + 1)
    val = np.where((x < h * (i - 1)) | (x > h * (i + 1)), 0.0, val)

    return val[()]


def hat_derivative(i: int, x, h: float):
    """Evaluate the derivative of the hat function of node `i`.

    :param i: The index of the node.
    :param x: The point(s) at which to evaluate the derivative.
    :param h: The mesh spacing, strictly positive.

    :returns: `1 / h` on the rising half of the support, `-1 / h` on the
        falling half and zero elsewhere, with the shape of `x`.
    """
    x = np.asarray(x, dtype=float)

    val = np.where(x < h * i, 1 / h, -1 / h)
    val = np.where((x < h * (i - 1)) | (x > h * (i + 1)), 0.0, val)

    return val[()]
