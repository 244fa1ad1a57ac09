"""
Numerical Safeguards — Integer Bounds & Float Tolerance Primitives

Модуль фиксирует численные границы для целочисленной геометрии на плоскости:
- 64-битные границы компонент координат (i64)
- Safe-range предусловие для cross/dot/norm2 (128-битный промежуточный результат)
- Знак целого числа без float-преобразований
- Epsilon-сравнения float для угловых величин

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Python int имеет произвольную точность: cross/dot/norm2 точны всегда
2. |x|, |y| <= 2^62 гарантирует, что промежуточные значения помещаются в i128
   (предусловие документируется, но компаратором НЕ проверяется)
3. NaN/Inf никогда не пропагируют из угловых расчётов (заменяются на fallback)
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛОЧИСЛЕННЫХ КООРДИНАТ
# =============================================================================

# Signed 64-bit диапазон компонент координат
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

# Signed 128-bit диапазон промежуточных результатов
I128_MIN: Final[int] = -(2**127)
I128_MAX: Final[int] = 2**127 - 1

# Максимальный модуль компоненты, при котором x*y - y*x и x*x + y*y
# гарантированно помещаются в i128
COORD_SAFE_ABS_MAX: Final[int] = 2**62


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для углов (радианы)
EPS_ANGLE_ABS: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРОВЕРКИ
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, что значение — целое в signed 64-bit диапазоне.

    bool исключён явно: True/False не являются координатами.

    Examples:
        >>> is_int64(0)
        True
        >>> is_int64(2**63)
        False
        >>> is_int64(1.0)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return I64_MIN <= value <= I64_MAX


def validate_int64(value: int, name: str = "value") -> int:
    """
    Валидация компоненты координаты.

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        value если оно в i64 диапазоне

    Raises:
        ValueError: Если значение не int или вне [I64_MIN, I64_MAX]
    """
    if not is_int64(value):
        raise ValueError(
            f"{name} must be an integer in [{I64_MIN}, {I64_MAX}], got {value!r}"
        )
    return value


def validate_coordinate_components(x: int, y: int) -> tuple[int, int]:
    """Валидация пары (x, y) как 64-битной координаты."""
    return (validate_int64(x, "x"), validate_int64(y, "y"))


def is_within_safe_range(x: int, y: int) -> bool:
    """
    Проверка предусловия safe-range: |x|, |y| <= COORD_SAFE_ABS_MAX.

    Компаратор это предусловие не проверяет (в Python int переполнения нет),
    функция нужна вызывающему коду, который переносит результаты
    в среду с фиксированной 128-битной арифметикой.

    Examples:
        >>> is_within_safe_range(2**62, -(2**62))
        True
        >>> is_within_safe_range(2**62 + 1, 0)
        False
    """
    return abs(x) <= COORD_SAFE_ABS_MAX and abs(y) <= COORD_SAFE_ABS_MAX


def sign(value: int) -> int:
    """
    Знак целого числа: -1, 0 или +1.

    Вычисляется без преобразования во float (точно для любых int).
    """
    return (value > 0) - (value < 0)


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(1.5)
        1.5
        >>> sanitize_float(float('nan'))
        0.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def angles_close(a: float, b: float, tol: float = EPS_ANGLE_ABS) -> bool:
    """Сравнение двух углов (радианы) с абсолютной толерантностью."""
    return abs(a - b) <= tol
