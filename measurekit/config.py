"""Global configuration and type definitions for the measurekit package.

This module provides the numeric type definitions and default tolerances
shared by every quantity kind. It establishes which magnitudes the unit
system accepts and how loosely two measured values may differ while still
being considered equal.

Type Definitions:
    BASE_TYPE: Union type of scalar magnitudes accepted by conversions.
               Supports Python native numbers and NumPy scalars.
    ARRAY_TYPE: Array type returned by vectorized conversions.

Tolerances:
    REL_TOLERANCE: Default relative tolerance of Value.isclose.
    ABS_TOLERANCE: Default absolute tolerance of Value.isclose.

Example:
    >>> from measurekit.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar_int: BASE_TYPE = 42
    >>> scalar_np: BASE_TYPE = np.float64(3.5)
"""

from numpy import floating, integer, ndarray

BASE_TYPE = int | float | floating | integer

ARRAY_TYPE = ndarray

REL_TOLERANCE = 1e-9

ABS_TOLERANCE = 0.0
