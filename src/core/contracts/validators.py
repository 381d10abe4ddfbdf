"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления квадратичных целых согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema
(Draft 2020-12) для проверки соответствия данных схеме.

Схемы:
- quadratic_value.json — значение (regular_part, surd_part, denominator, radicand)

Контракт проверяет только форму данных. Инварианты кольца (squarefree
радиканд, чётность частей при знаменателе 2) проверяются при создании
значения и сигнализируются InvalidConstruction.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.quadratic_value import QuadraticValue
from src.core.domain.ring import ring_for


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'quadratic_value')

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

        # Meta-validation самой схемы
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
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class QuadraticValueValidator(ContractValidator):
    """Валидатор для quadratic_value контракта."""

    def __init__(self):
        super().__init__("quadratic_value")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quadratic_value(data: Dict[str, Any]) -> None:
    """
    Валидация quadratic_value данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    QuadraticValueValidator().validate(data)


def dump_quadratic_value(value: QuadraticValue) -> Dict[str, Any]:
    """
    JSON-представление значения по контракту quadratic_value.

    degree_override в контракт не входит.

    Examples:
        φ → {"regular_part": 1, "surd_part": 1, "denominator": 2, "radicand": 5}
    """
    return {
        "regular_part": value.regular_part,
        "surd_part": value.surd_part,
        "denominator": value.denominator,
        "radicand": value.ring.radicand,
    }


def load_quadratic_value(data: Dict[str, Any]) -> QuadraticValue:
    """
    Создание значения из JSON-представления.

    Сначала проверяется схема, затем инварианты кольца и значения.

    Raises:
        jsonschema.ValidationError: Нарушена форма данных
        InvalidConstruction: Радиканд не squarefree или некорректная чётность
    """
    validate_quadratic_value(data)
    return QuadraticValue.make(
        int(data["regular_part"]),
        int(data["surd_part"]),
        ring_for(int(data["radicand"])),
        int(data["denominator"]),
    )
