"""
Contract Validation Module

Модуль для валидации JSON контрактов: точки, наборы точек, опции сортировки.
"""

from .validators import (
    ArgSortOptionsValidator,
    ContractValidator,
    CoordinateValidator,
    PointSetValidator,
    SchemaLoader,
    validate_arg_sort_options,
    validate_coordinate,
    validate_point_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoordinateValidator",
    "ArgSortOptionsValidator",
    "PointSetValidator",
    # Functions
    "validate_coordinate",
    "validate_arg_sort_options",
    "validate_point_set",
]
