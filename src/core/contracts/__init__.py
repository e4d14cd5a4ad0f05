"""
Contract Validation Module

Модуль для валидации JSON контрактов (файлы кейсов пакетного режима).
"""

from .validators import (
    BatchCasesValidator,
    ContractValidator,
    SchemaLoader,
    validate_batch_cases,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BatchCasesValidator",
    # Functions
    "validate_batch_cases",
]
