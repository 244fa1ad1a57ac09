"""
Coordinate — Целочисленная точка на плоскости и опции угловой сортировки

Immutable Pydantic модели и enum-политики для сортировки по углу (argument sort):
- Coordinate: пара (x, y) в signed 64-bit диапазоне
- OriginPolicy: куда ставить начало координат (0, 0)
- TieBreak: порядок точек на одном луче
- ArgSortOptions: неизменяемая пара (OriginPolicy, TieBreak)

Модели не зависят от src.core.math (math импортирует domain, не наоборот).
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import validate_arg_sort_options


# =============================================================================
# ГРАНИЦЫ КОМПОНЕНТ
# =============================================================================

# Signed 64-bit (совпадает с numerical_safeguards.I64_MIN / I64_MAX)
COORD_COMPONENT_MIN: Final[int] = -(2**63)
COORD_COMPONENT_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ENUMS
# =============================================================================


class OriginPolicy(str, Enum):
    """
    Политика для начала координат (0, 0), у которого угол не определён.

    - FIRST: (0, 0) раньше всех ненулевых точек
    - LAST: (0, 0) позже всех ненулевых точек (default, "не ломается")
    - FORBID: любое сравнение с (0, 0) — нарушение контракта (OriginForbidden)
    """

    FIRST = "first"
    LAST = "last"
    FORBID = "forbid"


class TieBreak(str, Enum):
    """
    Порядок точек с одинаковым направлением (на одном луче из начала координат).

    - NORM2_ASC: по квадрату расстояния до начала координат, по возрастанию
    - LEX: лексикографически по (x, y)
    """

    NORM2_ASC = "norm2_asc"
    LEX = "lex"


# =============================================================================
# COORDINATE MODEL
# =============================================================================


class Coordinate(BaseModel):
    """
    Целочисленная точка (или вектор из начала координат).

    Immutable модель (frozen=True). Компоненты ограничены signed 64-bit.
    Для |x|, |y| <= 2^62 все промежуточные cross/dot/norm2 помещаются
    в 128 бит (предусловие, см. numerical_safeguards.is_within_safe_range).
    """

    x: int = Field(..., ge=COORD_COMPONENT_MIN, le=COORD_COMPONENT_MAX, description="Абсцисса")
    y: int = Field(..., ge=COORD_COMPONENT_MIN, le=COORD_COMPONENT_MAX, description="Ордината")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def of(cls, x: int, y: int) -> "Coordinate":
        """Позиционный конструктор: Coordinate.of(1, 2)."""
        return cls(x=x, y=y)

    @property
    def xy(self) -> tuple[int, int]:
        """Координата как кортеж (x, y)."""
        return (self.x, self.y)

    @property
    def is_origin(self) -> bool:
        """True для вырожденного нулевого вектора (0, 0)."""
        return self.x == 0 and self.y == 0


# =============================================================================
# ARG SORT OPTIONS
# =============================================================================


class ArgSortOptions(BaseModel):
    """
    Настройки компаратора по углу.

    Default: (LAST, NORM2_ASC). Tie-break обязателен: без него точки
    на одном луче сравнивались бы как равные.
    """

    origin: OriginPolicy = Field(OriginPolicy.LAST, description="Политика для (0, 0)")
    tie: TieBreak = Field(TieBreak.NORM2_ASC, description="Порядок на одном луче")

    model_config = {"frozen": True}

    @field_validator("origin", "tie", mode="before")
    @classmethod
    def normalize_case(cls, v: Any) -> Any:
        """Имена политик принимаются без учёта регистра ("FIRST" == "first")."""
        if isinstance(v, str) and not isinstance(v, Enum):
            return v.lower()
        return v

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ArgSortOptions":
        """
        Построение опций из dict с предварительной проверкой JSON Schema контракта.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует arg_sort_options
        """
        validate_arg_sort_options(data)
        return cls(**data)


DEFAULT_ARG_SORT_OPTIONS: Final[ArgSortOptions] = ArgSortOptions()
