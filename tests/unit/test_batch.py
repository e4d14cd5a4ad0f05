"""
Тесты для пакетного режима: контракт batch_cases.json, модель BatchCase, runner

Проверяет:
1. Валидность самой схемы и валидацию документов
2. Pydantic модель BatchCase (ровно одно ожидание, frozen)
3. run_case / run_cases для сумм и ожидаемых ошибок
4. load_cases из файла
"""

import json
from pathlib import Path

import pydantic
import pytest
from jsonschema import ValidationError

from src.calculator.batch import DEFAULT_CASES, CaseOutcome, load_cases, run_case, run_cases
from src.core.contracts import BatchCasesValidator, SchemaLoader, validate_batch_cases
from src.core.domain import (
    BatchCase,
    ExpectedError,
    FractionFormatError,
    FractionOverflowError,
    InvalidFractionArgument,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_document():
    """Валидный документ кейсов."""
    return {
        "schema_version": "1",
        "cases": [
            {"left": "1/2", "right": "1/3", "expected": "5/6"},
            {"left": "abc", "right": "1", "expected_error": "format"},
            {
                "left": "1 1/2",
                "right": "2 1/2",
                "expected": "4",
                "description": "mixed numbers add up to a whole number",
            },
        ],
    }


@pytest.fixture
def cases_file(tmp_path: Path, valid_document) -> Path:
    path = tmp_path / "cases.json"
    path.write_text(json.dumps(valid_document), encoding="utf-8")
    return path


# =============================================================================
# CONTRACT TESTS
# =============================================================================


class TestBatchCasesContract:
    """Тесты JSON Schema batch_cases"""

    def test_schema_is_valid(self) -> None:
        """Схема проходит meta-validation при загрузке"""
        schema = SchemaLoader().load_schema("batch_cases")
        assert schema["title"] == "Batch addition cases"

    def test_unknown_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_valid_document(self, valid_document) -> None:
        validate_batch_cases(valid_document)
        assert BatchCasesValidator().is_valid(valid_document)

    def test_missing_cases(self) -> None:
        with pytest.raises(ValidationError):
            validate_batch_cases({})

    def test_empty_cases(self) -> None:
        with pytest.raises(ValidationError):
            validate_batch_cases({"cases": []})

    def test_both_expectations_rejected(self) -> None:
        doc = {"cases": [{"left": "1", "right": "1", "expected": "2", "expected_error": "format"}]}
        assert not BatchCasesValidator().is_valid(doc)

    def test_no_expectation_rejected(self) -> None:
        doc = {"cases": [{"left": "1", "right": "1"}]}
        assert not BatchCasesValidator().is_valid(doc)

    def test_unknown_error_kind_rejected(self) -> None:
        doc = {"cases": [{"left": "1", "right": "1", "expected_error": "division"}]}
        errors = list(BatchCasesValidator().iter_errors(doc))
        assert errors

    def test_additional_property_rejected(self) -> None:
        doc = {"cases": [{"left": "1", "right": "1", "expected": "2", "extra": 1}]}
        assert not BatchCasesValidator().is_valid(doc)


# =============================================================================
# MODEL TESTS
# =============================================================================


class TestBatchCase:
    """Тесты модели BatchCase"""

    def test_expected_sum(self) -> None:
        case = BatchCase(left="1/2", right="1/4", expected="3/4")
        assert case.expected_error is None
        assert case.label == "1/2 + 1/4 == 3/4"

    def test_expected_error_from_string(self) -> None:
        case = BatchCase.model_validate({"left": "x", "right": "1", "expected_error": "format"})
        assert case.expected_error is ExpectedError.FORMAT
        assert case.label == "x + 1 == format"

    def test_description_used_as_label(self) -> None:
        case = BatchCase(left="1", right="1", expected="2", description="one plus one")
        assert case.label == "one plus one"

    def test_requires_exactly_one_expectation(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="exactly one"):
            BatchCase(left="1", right="1")

        with pytest.raises(pydantic.ValidationError, match="exactly one"):
            BatchCase(left="1", right="1", expected="2", expected_error=ExpectedError.FORMAT)

    def test_frozen(self) -> None:
        case = BatchCase(left="1", right="1", expected="2")
        with pytest.raises(pydantic.ValidationError):
            case.left = "2"

    def test_error_classification(self) -> None:
        assert ExpectedError.of(FractionFormatError("x")) is ExpectedError.FORMAT
        assert ExpectedError.of(InvalidFractionArgument("x")) is ExpectedError.INVALID_ARGUMENT
        assert ExpectedError.of(FractionOverflowError("x")) is ExpectedError.OVERFLOW


# =============================================================================
# RUNNER TESTS
# =============================================================================


class TestRunner:
    """Тесты run_case / run_cases / load_cases"""

    def test_default_cases_all_pass(self) -> None:
        outcomes = run_cases(DEFAULT_CASES)
        assert len(outcomes) == 6
        assert all(outcome.passed for outcome in outcomes)

    def test_passing_sum(self) -> None:
        outcome = run_case(BatchCase(left="1/2", right="1/3", expected="5/6"))
        assert outcome == CaseOutcome(
            case=outcome.case, passed=True, actual="5/6", details=""
        )

    def test_wrong_sum(self) -> None:
        outcome = run_case(BatchCase(left="1/2", right="1/3", expected="2/5"))
        assert not outcome.passed
        assert outcome.actual == "5/6"
        assert outcome.details == "expected 2/5, got 5/6"

    def test_expected_error_raised(self) -> None:
        outcome = run_case(
            BatchCase(left="9223372036854775807", right="1", expected_error="overflow")
        )
        assert outcome.passed
        assert outcome.actual == "overflow"
        assert outcome.details == "FractionOverflowError raised"

    def test_expected_error_not_raised(self) -> None:
        outcome = run_case(BatchCase(left="1", right="1", expected_error="format"))
        assert not outcome.passed
        assert outcome.actual == "2"
        assert "no exception raised" in outcome.details

    def test_wrong_error_kind(self) -> None:
        outcome = run_case(BatchCase(left="1/0", right="1", expected_error="format"))
        assert not outcome.passed
        assert outcome.actual == "invalid_argument"
        assert outcome.details.startswith("expected format error, got invalid_argument")

    def test_unexpected_error(self) -> None:
        outcome = run_case(BatchCase(left="abc", right="1", expected="1"))
        assert not outcome.passed
        assert outcome.details == 'exception: Invalid format: "abc"'

    def test_load_cases(self, cases_file: Path) -> None:
        cases = load_cases(cases_file)
        assert [case.left for case in cases] == ["1/2", "abc", "1 1/2"]
        assert all(outcome.passed for outcome in run_cases(cases))

    def test_load_cases_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"cases": [{"left": "1"}]}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_cases(path)

    def test_load_cases_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_cases(path)
