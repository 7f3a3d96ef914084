from .assembly import assemble  # noqa: F401
from .exceptions import (  # noqa: F401
    HeatTransportError,
    InvalidParameterError,
    OutOfDomainError,
    SingularMatrixError,
)
from .finite_elements import hat, hat_derivative, uniform_mesh  # noqa: F401
from .linalg import solve_dense  # noqa: F401
from .materials import Conductivity, PiecewiseConductivity, conductivity  # noqa: F401
from .quadrature import GaussLegendre, gauss_legendre, integrate  # noqa: F401
from .solver import Solution, exact_solution, solve  # noqa: F401
