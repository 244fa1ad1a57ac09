"""
JSON Schema Contract Validators

Модуль для валидации dict-payload'ов согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- coordinate.json — целочисленная точка {x, y} (signed 64-bit)
- arg_sort_options.json — политики компаратора {origin, tie}
- point_set.json — набор точек для сортировки + опциональные опции
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем, в каталоге schema/ (устанавливаются вместе с пакетом).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir if schema_dir is not None else Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'coordinate')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class CoordinateValidator(ContractValidator):
    """Валидатор для coordinate контракта."""

    def __init__(self):
        super().__init__("coordinate")


class ArgSortOptionsValidator(ContractValidator):
    """Валидатор для arg_sort_options контракта."""

    def __init__(self):
        super().__init__("arg_sort_options")


class PointSetValidator(ContractValidator):
    """Валидатор для point_set контракта."""

    def __init__(self):
        super().__init__("point_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_coordinate(data: Dict[str, Any]) -> None:
    """
    Валидация coordinate данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoordinateValidator().validate(data)


def validate_arg_sort_options(data: Dict[str, Any]) -> None:
    """
    Валидация arg_sort_options данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ArgSortOptionsValidator().validate(data)


def validate_point_set(data: Dict[str, Any]) -> None:
    """
    Валидация point_set данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PointSetValidator().validate(data)
