"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/max/enum)
- Интеграция с Pydantic моделями
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ArgSortOptionsValidator,
    CoordinateValidator,
    PointSetValidator,
    SchemaLoader,
    validate_arg_sort_options,
    validate_coordinate,
    validate_point_set,
)
from src.core.domain import ArgSortOptions, Coordinate, OriginPolicy, TieBreak
from src.core.math import sorted_by_argument
from src.core.math.numerical_safeguards import I64_MAX, I64_MIN


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_point_set():
    """Валидный point_set для тестирования."""
    return {
        "points": [
            {"x": 0, "y": -1},
            {"x": 1, "y": 0},
            {"x": -1, "y": 0},
            {"x": 0, "y": 1},
        ],
        "options": {"origin": "forbid", "tie": "lex"},
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_all_schemas_load(self):
        loader = SchemaLoader()
        for name in ("coordinate", "arg_sort_options", "point_set"):
            schema = loader.load_schema(name)
            assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("coordinate") is loader.load_schema("coordinate")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COORDINATE CONTRACT
# =============================================================================


class TestCoordinateContract:
    """Тесты coordinate контракта"""

    def test_valid(self):
        validate_coordinate({"x": 3, "y": -4})
        validate_coordinate({"x": I64_MIN, "y": I64_MAX})

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            validate_coordinate({"x": 1})

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            validate_coordinate({"x": 1.5, "y": 0})
        with pytest.raises(ValidationError):
            validate_coordinate({"x": "1", "y": 0})

    def test_out_of_range(self):
        with pytest.raises(ValidationError):
            validate_coordinate({"x": I64_MAX + 1, "y": 0})

    def test_additional_property(self):
        assert not CoordinateValidator().is_valid({"x": 1, "y": 2, "z": 3})

    def test_pydantic_dump_complies(self):
        """Сериализация Coordinate соответствует контракту"""
        validate_coordinate(Coordinate(x=-2, y=5).model_dump(mode="json"))


# =============================================================================
# ARG SORT OPTIONS CONTRACT
# =============================================================================


class TestArgSortOptionsContract:
    """Тесты arg_sort_options контракта"""

    def test_valid(self):
        validate_arg_sort_options({"origin": "first", "tie": "norm2_asc"})
        validate_arg_sort_options({})

    def test_unknown_enum(self):
        with pytest.raises(ValidationError):
            validate_arg_sort_options({"origin": "middle"})
        with pytest.raises(ValidationError):
            validate_arg_sort_options({"tie": "random"})

    def test_iter_errors_reports_all(self):
        errors = list(ArgSortOptionsValidator().iter_errors({"origin": "x", "tie": "y"}))
        assert len(errors) == 2

    def test_pydantic_dump_complies(self):
        for origin in OriginPolicy:
            for tie in TieBreak:
                dumped = ArgSortOptions(origin=origin, tie=tie).model_dump(mode="json")
                validate_arg_sort_options(dumped)


# =============================================================================
# POINT SET CONTRACT
# =============================================================================


class TestPointSetContract:
    """Тесты point_set контракта"""

    def test_valid(self, valid_point_set):
        validate_point_set(valid_point_set)

    def test_options_optional(self, valid_point_set):
        del valid_point_set["options"]
        validate_point_set(valid_point_set)

    def test_points_required(self):
        with pytest.raises(ValidationError):
            validate_point_set({"options": {}})

    def test_bad_point(self, valid_point_set):
        valid_point_set["points"].append({"x": 1})
        assert not PointSetValidator().is_valid(valid_point_set)

    def test_payload_to_sorted_points(self, valid_point_set):
        """Валидный payload → модели → сортировка по углу"""
        validate_point_set(valid_point_set)
        points = [Coordinate(**p) for p in valid_point_set["points"]]
        options = ArgSortOptions.from_payload(valid_point_set["options"])
        ordered = sorted_by_argument(points, options=options)
        assert [c.xy for c in ordered] == [(1, 0), (0, 1), (-1, 0), (0, -1)]
