"""
Core math modules

Целочисленная геометрия на плоскости: векторные примитивы, углы, сортировка по углу.
"""

import logging

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Integer bounds
    COORD_SAFE_ABS_MAX,
    I128_MAX,
    I128_MIN,
    I64_MAX,
    I64_MIN,
    # Epsilon constants
    EPS_ANGLE_ABS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Integer checks
    is_int64,
    is_within_safe_range,
    sign,
    validate_coordinate_components,
    validate_int64,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Epsilon comparisons
    angles_close,
    is_close,
)

# Vector Primitives
from src.core.math.vector_primitives import (
    as_xy,
    cross,
    dot,
    is_zero_vector,
    norm2,
)

# Angles
from src.core.math.angles import angle_between

# Argument Sort
from src.core.math.argument_sort import (
    Ordering,
    OriginForbidden,
    argument_sort_key,
    compare_by_argument,
    compare_by_argument_default,
    is_upper_half,
    sort_by_argument,
    sort_by_argument_default,
    sorted_by_argument,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Numerical Safeguards — Integer bounds
    "COORD_SAFE_ABS_MAX",
    "I128_MAX",
    "I128_MIN",
    "I64_MAX",
    "I64_MIN",
    # Numerical Safeguards — Epsilon constants
    "EPS_ANGLE_ABS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Integer checks
    "is_int64",
    "is_within_safe_range",
    "sign",
    "validate_coordinate_components",
    "validate_int64",
    # Numerical Safeguards — NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Numerical Safeguards — Epsilon comparisons
    "angles_close",
    "is_close",
    # Vector Primitives
    "as_xy",
    "cross",
    "dot",
    "is_zero_vector",
    "norm2",
    # Angles
    "angle_between",
    # Argument Sort — Types
    "Ordering",
    # Argument Sort — Exceptions
    "OriginForbidden",
    # Argument Sort — Functions
    "argument_sort_key",
    "compare_by_argument",
    "compare_by_argument_default",
    "is_upper_half",
    "sort_by_argument",
    "sort_by_argument_default",
    "sorted_by_argument",
]
