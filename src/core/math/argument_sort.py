"""
Argument Sort — Strict Total Order of Integer Points by Polar Angle

Компаратор по углу от положительной оси x (против часовой стрелки, [0, 2π))
без atan2: только целочисленная арифметика, без ошибок округления.

Алгоритм сравнения compare_by_argument(a, b, options):
1. (0, 0): обрабатывается OriginPolicy (FIRST / LAST / FORBID)
2. Half-plane split: upper = y > 0 or (y == 0 and x >= 0)
   upper ↔ углы [0, π), lower ↔ [π, 2π); upper раньше lower
3. Одна полуплоскость: знак cross(a, b) (> 0 → a раньше b)
4. cross == 0: точки на одном луче → TieBreak (NORM2_ASC / LEX)

Почему сначала полуплоскости: cross монотонен только в пределах полуоборота,
угол циклический; разрез по +x делает порядок в каждой половине линейным.
Противоположные коллинеарные точки попадают в разные половины (шаг 2),
поэтому cross == 0 на шаге 4 означает именно "то же направление".

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Строгий полный порядок (иррефлексивность, антисимметрия, транзитивность)
   на любом конечном множестве без (0, 0), и с (0, 0) при FIRST / LAST
2. FORBID + (0, 0) → OriginForbidden в 100% вызовов, никогда не EQUAL
3. Компаратор stateless: результат не зависит от порядка вычислений
"""

import functools
import logging
from collections.abc import Callable, Iterable, MutableSequence
from enum import IntEnum
from typing import Any, Optional, TypeVar

from src.core.domain.coordinate import (
    DEFAULT_ARG_SORT_OPTIONS,
    ArgSortOptions,
    OriginPolicy,
    TieBreak,
)
from src.core.math.numerical_safeguards import sign
from src.core.math.vector_primitives import as_xy, cross, norm2

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# TYPES
# =============================================================================


class Ordering(IntEnum):
    """
    Результат сравнения.

    Значения совместимы с cmp-протоколом (functools.cmp_to_key).
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OriginForbidden(Exception):
    """
    Сравнение с (0, 0) при OriginPolicy.FORBID.

    Нарушение контракта вызывающего кода: подмена на EQUAL или произвольный
    порядок сломала бы полный порядок, на который опирается сортировка.
    Не обрабатывается локально, пропагирует наружу.
    """

    def __init__(self, a: tuple[int, int], b: tuple[int, int]):
        self.a = a
        self.b = b
        super().__init__(f"(0, 0) is not allowed in argument sort: compared {a} with {b}")


# =============================================================================
# HELPERS
# =============================================================================


def _ordering(value: int) -> Ordering:
    return Ordering(sign(value))


def _cmp(a: Any, b: Any) -> Ordering:
    """Сравнение сопоставимых значений (bool, int, кортежи)."""
    return Ordering((a > b) - (a < b))


def is_upper_half(x: int, y: int) -> bool:
    """
    Верхняя полуплоскость: y > 0, либо y == 0 и x >= 0.

    Граница фиксирует разрез на +x: угол 0 — первый, далее [0, 2π)
    против часовой стрелки. (0, 0) сюда не попадает: его обрабатывает
    OriginPolicy до этой проверки.
    """
    return y > 0 or (y == 0 and x >= 0)


# =============================================================================
# COMPARATOR
# =============================================================================


def compare_by_argument(
    a: Any,
    b: Any,
    options: ArgSortOptions = DEFAULT_ARG_SORT_OPTIONS,
) -> Ordering:
    """
    Сравнение двух точек по углу от +x (против часовой стрелки).

    Args:
        a: Первая точка ((x, y) или Coordinate)
        b: Вторая точка ((x, y) или Coordinate)
        options: Политики для (0, 0) и для точек на одном луче

    Returns:
        Ordering.LESS / EQUAL / GREATER

    Raises:
        OriginForbidden: Если options.origin == FORBID и a или b равна (0, 0)

    Examples:
        >>> compare_by_argument((1, 0), (0, 1))
        <Ordering.LESS: -1>
        >>> compare_by_argument((0, -1), (-1, 0))
        <Ordering.GREATER: 1>
        >>> compare_by_argument((1, 1), (2, 2))
        <Ordering.LESS: -1>
    """
    ax, ay = as_xy(a)
    bx, by = as_xy(b)

    # 1. (0, 0) — угол не определён; в cross/half-plane его пускать нельзя
    a_origin = ax == 0 and ay == 0
    b_origin = bx == 0 and by == 0
    if a_origin or b_origin:
        if options.origin == OriginPolicy.FIRST:
            return _cmp(b_origin, a_origin)
        if options.origin == OriginPolicy.LAST:
            return _cmp(a_origin, b_origin)
        if options.origin == OriginPolicy.FORBID:
            logger.error("Origin in argument sort under FORBID policy: a=%s b=%s", (ax, ay), (bx, by))
            raise OriginForbidden((ax, ay), (bx, by))
        raise ValueError(f"Unknown origin policy: {options.origin!r}")

    # 2. Разные полуплоскости: upper раньше
    a_upper = is_upper_half(ax, ay)
    b_upper = is_upper_half(bx, by)
    if a_upper != b_upper:
        return Ordering.LESS if a_upper else Ordering.GREATER

    # 3. Одна полуплоскость: cross > 0 → a раньше b
    cr = cross((ax, ay), (bx, by))
    if cr != 0:
        return _ordering(-cr)

    # 4. Тот же луч
    if options.tie == TieBreak.NORM2_ASC:
        return _cmp(norm2((ax, ay)), norm2((bx, by)))
    if options.tie == TieBreak.LEX:
        return _cmp((ax, ay), (bx, by))
    raise ValueError(f"Unknown tie-break rule: {options.tie!r}")


def compare_by_argument_default(a: Any, b: Any) -> Ordering:
    """Сравнение с настройками по умолчанию: (0, 0) последним, луч — по norm2."""
    return compare_by_argument(a, b, DEFAULT_ARG_SORT_OPTIONS)


# =============================================================================
# ORDERING DRIVER
# =============================================================================


def argument_sort_key(
    to_xy: Optional[Callable[[T], Any]] = None,
    options: Optional[ArgSortOptions] = None,
) -> Callable[[T], Any]:
    """
    key-функция для sorted() / list.sort() на основе compare_by_argument.

    Args:
        to_xy: Проекция элемента в точку (None — элемент сам является точкой)
        options: Настройки компаратора (None — default)

    Returns:
        Callable, пригодный как аргумент key=

    Examples:
        >>> sorted([(0, -1), (-1, 0), (1, 0)], key=argument_sort_key())
        [(1, 0), (-1, 0), (0, -1)]
    """
    opts = options if options is not None else DEFAULT_ARG_SORT_OPTIONS
    project = to_xy if to_xy is not None else as_xy

    def _compare_items(p: T, q: T) -> int:
        return compare_by_argument(project(p), project(q), opts)

    return functools.cmp_to_key(_compare_items)


def sort_by_argument(
    items: MutableSequence[T],
    to_xy: Callable[[T], Any],
    options: ArgSortOptions = DEFAULT_ARG_SORT_OPTIONS,
) -> None:
    """
    Сортировка на месте произвольных элементов по углу их точек.

    Элементы не обязаны быть точками: to_xy проецирует запись в (x, y).
    Сортировка стабильна; компаратор задаёт полный порядок, поэтому результат
    не зависит от входной перестановки (кроме равных по проекции элементов).

    Args:
        items: Изменяемая последовательность (list или совместимая)
        to_xy: Проекция элемента в точку
        options: Настройки компаратора

    Raises:
        OriginForbidden: FORBID и среди точек есть (0, 0); порядок items после
            исключения не определён
    """
    logger.debug(
        "Sorting %d items by argument (origin=%s, tie=%s)",
        len(items),
        options.origin.value,
        options.tie.value,
    )
    key = argument_sort_key(to_xy, options)
    if isinstance(items, list):
        items.sort(key=key)
        return
    for i, item in enumerate(sorted(items, key=key)):
        items[i] = item


def sort_by_argument_default(
    items: MutableSequence[T],
    to_xy: Callable[[T], Any],
) -> None:
    """Сортировка на месте с настройками по умолчанию."""
    sort_by_argument(items, to_xy, DEFAULT_ARG_SORT_OPTIONS)


def sorted_by_argument(
    items: Iterable[T],
    to_xy: Optional[Callable[[T], Any]] = None,
    options: Optional[ArgSortOptions] = None,
) -> list[T]:
    """
    Новый отсортированный по углу список; исходная коллекция не изменяется.

    Examples:
        >>> sorted_by_argument([(2, 2), (1, 1), (3, 3)])
        [(1, 1), (2, 2), (3, 3)]
    """
    return sorted(items, key=argument_sort_key(to_xy, options))
