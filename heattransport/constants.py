"""Constants for the heat transport model."""

DOMAIN_LENGTH = 2.0  # The rod spans [0, DOMAIN_LENGTH]
INTERFACE_POSITION = 1.0  # Material interface
CONDUCTIVITY_VALUES = (1.0, 2.0)  # Left and right of the interface

BOUNDARY_FLUX = 20.0  # Heat flux entering at x = 0
ROBIN_COEFFICIENT = 1.0
DIRICHLET_VALUE = 3.0
OUTER_BOUNDARY_VALUE = 0.0  # Appended for the node excluded from the system

BOUNDARY_TYPES = ("Robin", "Neumann")

QUADRATURE_ORDER = 10
PIVOT_TOLERANCE = 1e-12

# Element counts accepted by the front end
MIN_ELEMENTS = 2
MAX_ELEMENTS = 50
DEFAULT_ELEMENTS = 10
