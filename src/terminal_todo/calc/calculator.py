# src/terminal_todo/calc/calculator.py

"""
Interactive four-function calculator.

Asks for a first number, an operator and a second number (one line each),
prints `Result: <value>` and exits. Any bad input ends the run with a message.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum

from ..core.ports import Emitter, LineSource
from ..errors import CalculatorError, DivisionByZeroError, InvalidNumberError, UnknownOperatorError

logger = logging.getLogger(__name__)


class Operator(StrEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def parse_number(text: str) -> float:
    raw = (text or "").strip()
    # float() also takes digit separators ("1_000"); plain literals only.
    if "_" in raw:
        raise InvalidNumberError(raw)
    try:
        return float(raw)
    except ValueError:
        raise InvalidNumberError(raw) from None


def parse_operator(text: str) -> Operator:
    raw = (text or "").strip()
    try:
        return Operator(raw)
    except ValueError:
        raise UnknownOperatorError(raw) from None


def calculate(left: float, op: Operator, right: float) -> float:
    if op is Operator.ADD:
        return left + right
    if op is Operator.SUB:
        return left - right
    if op is Operator.MUL:
        return left * right
    if right == 0.0:
        raise DivisionByZeroError()
    return left / right


def format_number(value: float) -> str:
    """`4.0` -> `4`, `2.5` -> `2.5`; inf/nan keep their float spelling."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def run_calculator(source: LineSource, emit: Emitter = print) -> int:
    """Run one calculation. Returns the process exit code (0 ok, 1 error or no input)."""

    def ask(question: str) -> str | None:
        emit(question)
        return source.read_line("")

    try:
        raw = ask("Enter first number:")
        if raw is None:
            return 1
        left = parse_number(raw)

        raw_op = ask("Enter operator (+, -, *, /):")
        if raw_op is None:
            return 1

        raw = ask("Enter second number:")
        if raw is None:
            return 1
        right = parse_number(raw)

        # All three lines are read before the operator is checked.
        op = parse_operator(raw_op)
        result = calculate(left, op, right)
    except CalculatorError as e:
        logger.debug("Calculator input rejected: %s", e.message)
        emit(e.message)
        return 1

    logger.debug("Calculated %s %s %s = %s", left, op.value, right, result)
    emit(f"Result: {format_number(result)}")
    return 0
