"""Material coefficients of the heat transport problem."""

from .constants import CONDUCTIVITY_VALUES, DOMAIN_LENGTH, INTERFACE_POSITION
from .exceptions import InvalidParameterError, OutOfDomainError
import numpy as np


class Conductivity:
    """A thermal conductivity defined on a closed interval."""

    def __init__(self, domain: tuple[float, float]):
        """Initialise the conductivity.

        :param domain: The end points of the interval on which the conductivity
            is defined.
        """
        self.domain = domain

    def __call__(self, x):
        raise NotImplementedError

    def check_domain(self, x) -> np.ndarray:
        """Cast `x` to an array, raising if any point lies outside the domain.

        :param x: The point(s) to check.

        :returns: `x` as an array of floats.
        """
        x = np.asarray(x, dtype=float)
        lower, upper = self.domain

        # Written so that NaNs are rejected too
        outside = ~((x >= lower) & (x <= upper))
        if np.any(outside):
            raise OutOfDomainError(
                f"Conductivity evaluated at {x[outside].ravel()[0]}, "
                f"outside of [{lower}, {upper}]"
            )

        return x


class PiecewiseConductivity(Conductivity):
    """A piecewise constant conductivity.

    Each piece is closed on the right, so a breakpoint takes the value of the
    piece to its left.
    """

    def __init__(
        self,
        breakpoints: tuple = (INTERFACE_POSITION,),
        values: tuple = CONDUCTIVITY_VALUES,
        domain: tuple[float, float] = (0.0, DOMAIN_LENGTH),
    ):
        """Initialise the conductivity.

        :param breakpoints: The increasing positions at which the value jumps.
        :param values: The conductivity on each piece, one more than the number
            of breakpoints.
        :param domain: The end points of the interval on which the conductivity
            is defined.
        """
        if len(values) != len(breakpoints) + 1:
            raise InvalidParameterError(
                f"Expected {len(breakpoints) + 1} values, got {len(values)}"
            )

        super(PiecewiseConductivity, self).__init__(domain)

        self.breakpoints = np.array(breakpoints, dtype=float)
        self.values = np.array(values, dtype=float)

    def __repr__(self):
        return (
            f"{type(self).__name__}(breakpoints={self.breakpoints.tolist()}, "
            f"values={self.values.tolist()}, domain={self.domain})"
        )

    def __call__(self, x):
        """Evaluate the conductivity.

        :param x: The point(s) at which to evaluate the conductivity.

        :returns: The conductivity, with the shape of `x`.
        """
        x = self.check_domain(x)
        return self.values[np.searchsorted(self.breakpoints, x, side="left")][()]

    def resistance(self, x):
        """Compute the thermal resistance between the left end of the domain
        and `x`, the integral of `1 / k`.

        :param x: The point(s) at which to evaluate the resistance.

        :returns: The resistance, with the shape of `x`.
        """
        x = self.check_domain(x)
        edges = np.concatenate([[self.domain[0]], self.breakpoints, [self.domain[1]]])

        total = np.zeros_like(x)
        for left, right, k in zip(edges[:-1], edges[1:], self.values):
            total += (np.clip(x, left, right) - left) / k

        return total[()]


# The rod of the heat transport problem
conductivity = PiecewiseConductivity()
