"""Errors raised by the heat transport solver."""

import numpy as np


class HeatTransportError(Exception):
    """Base class for all solver errors."""


class OutOfDomainError(HeatTransportError, ValueError):
    """A material coefficient was evaluated outside of its domain."""


class SingularMatrixError(HeatTransportError, np.linalg.LinAlgError):
    """A pivot vanished during Gaussian elimination."""


class InvalidParameterError(HeatTransportError, ValueError):
    """A solver parameter was rejected before any computation."""
