"""Bruchrechner CLI — командная оболочка над ядром дробей.

Режимы (по числу позиционных аргументов):
- 0 аргументов:        интерактивный режим (два запроса ввода, сумма)
- 1 аргумент "test":   пакетный режим (встроенные кейсы или --cases FILE)
- 2 аргумента:         прямое вычисление суммы
- иначе:               справка

Коды завершения:
- 0: успех
- 1: ошибка вычисления, проваленный кейс, EOF на запросе ввода
- 2: неверное использование, невалидный файл кейсов
"""

import argparse
import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Final, List, Mapping, Optional, Sequence, TextIO

import jsonschema
import pydantic

from src.calculator.batch import DEFAULT_CASES, load_cases, run_cases
from src.calculator.console import Console
from src.core.domain.errors import FractionError
from src.core.domain.fraction import Fraction
from src.core.domain.parsing import parse

logger = logging.getLogger(__name__)

PROG: Final[str] = "bruchrechner"

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_USAGE: Final[int] = 2

# Переменные окружения
ENV_NO_COLOR: Final[str] = "NO_COLOR"
ENV_LOG_LEVEL: Final[str] = "BRUCHRECHNER_LOG_LEVEL"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Операнд вида "-1/2" argparse принимает за опцию
_NEGATIVE_OPERAND: Final = re.compile(r"-[0-9]")

HELP_TEXT: Final[str] = f"""\
Usage:
  {PROG}                    -> interactive mode
  {PROG} test               -> test mode
  {PROG} "1/2" "1/4"        -> computes the sum (output: 3/4)
  {PROG} "1 1/2" "2 1/2"    -> computes the sum (output: 4)"""

FORMATS_TEXT: Final[str] = (
    "Accepted formats: whole number (3), fraction (5/7), mixed number (2 3/8)"
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CliConfig:
    """Конфигурация запуска.

    Опции командной строки приоритетнее переменных окружения.
    """

    use_color: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    cases_path: Optional[Path] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace, environ: Mapping[str, str]) -> "CliConfig":
        use_color = not args.no_color and not environ.get(ENV_NO_COLOR)
        log_level = (args.log_level or environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL
        return cls(use_color=use_color, log_level=log_level, cases_path=args.cases)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Exact fraction calculator: adds whole numbers, fractions and mixed numbers.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "operands",
        nargs="*",
        help='"test", or two fractions to add (e.g. "1 1/2" "2 1/2")',
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: ${ENV_LOG_LEVEL} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--cases",
        type=Path,
        default=None,
        help="JSON file with test cases for test mode",
    )
    return parser


def _protect_negative_operands(argv: Sequence[str]) -> List[str]:
    """Вставка "--" перед первым отрицательным операндом."""
    argv = list(argv)
    if "--" in argv:
        return argv
    for i, arg in enumerate(argv):
        if _NEGATIVE_OPERAND.match(arg):
            return argv[:i] + ["--"] + argv[i:]
    return argv


# =============================================================================
# РЕЖИМЫ
# =============================================================================


def format_sum(a: Fraction, b: Fraction, total: Fraction) -> str:
    return f"{a} + {b} = {total}"


def read_fraction(prompt: str, stdin: TextIO, console: Console) -> Fraction:
    """Запрос дроби до первого успешного разбора.

    Raises:
        EOFError: Если ввод закончился
    """
    while True:
        console.write(prompt)
        line = stdin.readline()
        if not line:
            raise EOFError("input closed")
        try:
            return parse(line)
        except FractionError as e:
            logger.debug("Rejected input %r: %s", line, e)
            console.line(f"Input error: {e}. Please try again.")


def run_interactive(stdin: TextIO, console: Console) -> int:
    console.line("Bruchrechner - interactive mode")
    console.line(FORMATS_TEXT)
    console.line()

    try:
        a = read_fraction("Please enter the first fraction: ", stdin, console)
        b = read_fraction("Please enter the second fraction: ", stdin, console)
    except EOFError:
        console.line()
        console.fail("Aborted: no more input.")
        return EXIT_FAILURE

    try:
        total = a + b
    except FractionError as e:
        console.fail(f"Error: {e}")
        return EXIT_FAILURE

    console.line()
    console.line(format_sum(a, b, total))
    return EXIT_OK


def run_direct(left: str, right: str, console: Console) -> int:
    try:
        a = parse(left)
        b = parse(right)
        total = a + b
    except FractionError as e:
        console.fail(f"Calculation error: {e}")
        console.line(HELP_TEXT)
        return EXIT_FAILURE

    console.line(format_sum(a, b, total))
    return EXIT_OK


def run_tests(config: CliConfig, console: Console) -> int:
    if config.cases_path is not None:
        try:
            cases = load_cases(config.cases_path)
        except (OSError, json.JSONDecodeError) as e:
            console.fail(f"Cannot read cases file {config.cases_path}: {e}")
            return EXIT_USAGE
        except jsonschema.ValidationError as e:
            console.fail(f"Invalid cases file {config.cases_path}: {e.message}")
            return EXIT_USAGE
        except pydantic.ValidationError as e:
            console.fail(f"Invalid case in {config.cases_path}: {e}")
            return EXIT_USAGE
    else:
        cases = list(DEFAULT_CASES)

    console.line("Running tests...")
    console.line()

    outcomes = run_cases(cases)
    for outcome in outcomes:
        console.write(f"Test: {outcome.case.label} ... ")
        if outcome.passed:
            console.ok(f"OK ({outcome.details})" if outcome.details else "OK")
        else:
            console.fail(f"FAILED ({outcome.details})")

    failed = sum(1 for outcome in outcomes if not outcome.passed)
    console.line()
    console.line(f"Tests finished: {len(outcomes) - failed} passed, {failed} failed.")
    return EXIT_OK if failed == 0 else EXIT_FAILURE


# =============================================================================
# ENTRY POINT
# =============================================================================


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Точка входа console script.

    Потоки и окружение внедряются для тестов; по умолчанию sys.stdin,
    sys.stdout и os.environ.
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    environ = os.environ if environ is None else environ

    args = build_parser().parse_args(_protect_negative_operands(argv))
    config = CliConfig.from_args(args, environ)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console(stdout, use_color=config.use_color)
    operands = args.operands

    if not operands:
        logger.debug("Mode: interactive")
        return run_interactive(stdin, console)

    if len(operands) == 1 and operands[0].lower() == "test":
        logger.debug("Mode: test (cases=%s)", config.cases_path or "built-in")
        return run_tests(config, console)

    if len(operands) == 2:
        logger.debug("Mode: direct")
        return run_direct(operands[0], operands[1], console)

    logger.debug("Mode: help (%d operands)", len(operands))
    console.line(HELP_TEXT)
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
