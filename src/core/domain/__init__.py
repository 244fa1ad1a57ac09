"""
Domain models and value objects.

Contains the planar value types: Coordinate and the argument sort options.
"""

from src.core.domain.coordinate import (
    COORD_COMPONENT_MAX,
    COORD_COMPONENT_MIN,
    DEFAULT_ARG_SORT_OPTIONS,
    ArgSortOptions,
    Coordinate,
    OriginPolicy,
    TieBreak,
)

__all__ = [
    # Bounds
    "COORD_COMPONENT_MIN",
    "COORD_COMPONENT_MAX",
    # Coordinate model
    "Coordinate",
    # Argument sort options
    "OriginPolicy",
    "TieBreak",
    "ArgSortOptions",
    "DEFAULT_ARG_SORT_OPTIONS",
]
