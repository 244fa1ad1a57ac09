"""
Angles — Numerically Stable Unsigned Angle Between Vectors

Угол между двумя направлениями (0..=π, радианы):

    angle_between(a, b) = atan2(|a × b|, a · b)

atan2 предпочтительнее acos(a·b / (|a|·|b|)):
- у acos производная неограничена около 0 и π
- нормализация через sqrt добавляет ошибку округления

ВАЖНО: для нулевого вектора угол не определён. Функция возвращает 0.0 —
это защитный fallback для вызывающего кода, который не фильтрует (0, 0),
а не математически осмысленный ответ. Не заменяется на NaN или исключение.
"""

import math
from typing import Any

from src.core.math.numerical_safeguards import sanitize_float
from src.core.math.vector_primitives import cross, dot, is_zero_vector


def angle_between(a: Any, b: Any) -> float:
    """
    Неориентированный угол между векторами a и b в [0, π].

    Args:
        a: Первый вектор ((x, y) или Coordinate)
        b: Второй вектор ((x, y) или Coordinate)

    Returns:
        Угол в радианах; 0.0 если a или b — нулевой вектор (fallback)

    Свойства:
        - симметричность: angle_between(a, b) == angle_between(b, a)
        - инвариантность к положительному масштабированию a и b

    Examples:
        >>> angle_between((1, 0), (2, 0))
        0.0
        >>> angle_between((1, 0), (0, 1)) == math.pi / 2
        True
        >>> angle_between((1, 0), (-1, 0)) == math.pi
        True
        >>> angle_between((0, 0), (1, 0))
        0.0
    """
    if is_zero_vector(a) or is_zero_vector(b):
        return 0.0

    # int → float точен до 2^53, дальше округляется; порядок величин сохраняется
    cr = float(abs(cross(a, b)))
    dt = float(dot(a, b))
    return sanitize_float(math.atan2(cr, dt), fallback=0.0)
