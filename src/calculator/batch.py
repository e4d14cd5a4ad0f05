"""Batch Runner — пакетная проверка кейсов сложения.

Каждый кейс: разобрать оба операнда, сложить, сравнить каноническую
запись суммы (или вид пойманной ошибки) с ожиданием.

Источники кейсов:
- DEFAULT_CASES: встроенный регрессионный набор
- load_cases(path): JSON файл {"cases": [...]}, проверенный по схеме
  batch_cases.json (jsonschema), затем собранный в модели BatchCase (pydantic)
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from src.core.contracts import validate_batch_cases
from src.core.domain.batch_case import BatchCase, ExpectedError
from src.core.domain.errors import FractionError
from src.core.domain.parsing import parse

logger = logging.getLogger(__name__)


# =============================================================================
# ВСТРОЕННЫЕ КЕЙСЫ
# =============================================================================


DEFAULT_CASES: Tuple[BatchCase, ...] = (
    BatchCase(left="1 1/2", right="2 1/2", expected="4"),
    BatchCase(left="1/2", right="1/4", expected="3/4"),
    BatchCase(left="1 1/2", right="1/2", expected="2"),
    BatchCase(left="-1/2", right="1/2", expected="0"),
    BatchCase(
        left="1/0",
        right="1",
        expected_error=ExpectedError.INVALID_ARGUMENT,
        description="denominator 0 raises InvalidFractionArgument",
    ),
    BatchCase(
        left="Hallo Welt",
        right="1",
        expected_error=ExpectedError.FORMAT,
        description="invalid text raises FractionFormatError",
    ),
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CaseOutcome:
    """Результат одного кейса."""

    case: BatchCase
    passed: bool

    # Фактическая сумма или вид ошибки
    actual: str

    # Детали для отчёта
    details: str


# =============================================================================
# RUNNER
# =============================================================================


def run_case(case: BatchCase) -> CaseOutcome:
    """Выполнение одного кейса.

    Ошибки ядра (FractionError) не пробрасываются: кейс проходит, если вид
    ошибки совпал с expected_error, иначе проваливается. Прочие исключения
    пробрасываются вызывающему.
    """
    logger.debug("Running case: %s", case.label)

    try:
        total = parse(case.left) + parse(case.right)
    except FractionError as e:
        kind = ExpectedError.of(e)
        if case.expected_error is kind:
            return CaseOutcome(
                case=case,
                passed=True,
                actual=kind.value,
                details=f"{type(e).__name__} raised",
            )
        if case.expected_error is not None:
            details = f"expected {case.expected_error.value} error, got {kind.value}: {e}"
        else:
            details = f"exception: {e}"
        return CaseOutcome(case=case, passed=False, actual=kind.value, details=details)

    actual = str(total)

    if case.expected_error is not None:
        return CaseOutcome(
            case=case,
            passed=False,
            actual=actual,
            details=f"no exception raised (expected {case.expected_error.value}), got {actual}",
        )

    if actual != case.expected:
        return CaseOutcome(
            case=case,
            passed=False,
            actual=actual,
            details=f"expected {case.expected}, got {actual}",
        )

    return CaseOutcome(case=case, passed=True, actual=actual, details="")


def run_cases(cases: Iterable[BatchCase]) -> List[CaseOutcome]:
    """Выполнение набора кейсов по порядку."""
    outcomes = [run_case(case) for case in cases]

    for outcome in outcomes:
        if not outcome.passed:
            logger.info("Case failed: %s (%s)", outcome.case.label, outcome.details)

    return outcomes


def load_cases(path: Path) -> List[BatchCase]:
    """Загрузка кейсов из JSON файла.

    Raises:
        OSError: Если файл не читается
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если документ не соответствует batch_cases.json
        pydantic.ValidationError: Если кейс не собирается в BatchCase
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_batch_cases(data)

    cases = [BatchCase.model_validate(item) for item in data["cases"]]
    logger.debug("Loaded %d cases from %s", len(cases), path)
    return cases
