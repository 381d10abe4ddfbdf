"""
Contract Validation Module

Модуль для валидации JSON контрактов обмена квадратичными целыми.
"""

from .validators import (
    ContractValidator,
    QuadraticValueValidator,
    SchemaLoader,
    dump_quadratic_value,
    load_quadratic_value,
    validate_quadratic_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuadraticValueValidator",
    # Functions
    "validate_quadratic_value",
    "dump_quadratic_value",
    "load_quadratic_value",
]
