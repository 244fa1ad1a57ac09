"""
Core planar geometry: integer value types, vector primitives, angular ordering.

Pure functions and immutable models only; no I/O and no shared state.
"""
