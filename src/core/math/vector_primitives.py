"""
Vector Primitives — Exact 2D Cross / Dot Products

Целочисленные векторные примитивы на плоскости:
- cross(a, b) = a.x*b.y - a.y*b.x
- dot(a, b) = a.x*b.x + a.y*b.y
- norm2(p) = x*x + y*y

Python int имеет произвольную точность, поэтому результат точен
для любых входов (эквивалент расширения i64 → i128 без риска переполнения).

Соглашение о знаке cross: > 0 означает, что b лежит против часовой стрелки от a.

Точка передаётся как кортеж (x, y) или как объект со свойством `xy`
(например, src.core.domain.Coordinate).
"""

from typing import Any


# =============================================================================
# НОРМАЛИЗАЦИЯ ВХОДА
# =============================================================================


def as_xy(p: Any) -> tuple[int, int]:
    """
    Приведение точки к кортежу (x, y).

    Принимает Coordinate (через свойство `xy`) или любую 2-последовательность.

    Examples:
        >>> as_xy((3, -4))
        (3, -4)
        >>> as_xy([1, 2])
        (1, 2)
    """
    xy = getattr(p, "xy", None)
    if xy is not None:
        return xy
    x, y = p
    return (x, y)


def is_zero_vector(p: Any) -> bool:
    """True для (0, 0) — направления без определённого угла."""
    x, y = as_xy(p)
    return x == 0 and y == 0


# =============================================================================
# CROSS / DOT / NORM2
# =============================================================================


def cross(a: Any, b: Any) -> int:
    """
    Векторное (псевдоскалярное) произведение a × b.

    Examples:
        >>> cross((1, 0), (0, 1))
        1
        >>> cross((0, 1), (1, 0))
        -1
        >>> cross((2, 2), (3, 3))
        0
    """
    ax, ay = as_xy(a)
    bx, by = as_xy(b)
    return ax * by - ay * bx


def dot(a: Any, b: Any) -> int:
    """
    Скалярное произведение a · b.

    Examples:
        >>> dot((1, 2), (3, 4))
        11
        >>> dot((1, 0), (0, 1))
        0
    """
    ax, ay = as_xy(a)
    bx, by = as_xy(b)
    return ax * bx + ay * by


def norm2(p: Any) -> int:
    """Квадрат евклидовой нормы x*x + y*y (без sqrt, точно)."""
    x, y = as_xy(p)
    return x * x + y * y
