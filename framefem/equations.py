"""Evaluation of arithmetic formulas with named variables."""

from __future__ import annotations

import math
import re
from collections.abc import Callable

_NUMBER = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NAME = re.compile(r"[A-Za-z_][A-Za-z_0-9]*")
_OPERATORS = set("+-*/^(),")

_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sqrt": math.sqrt,
    "abs": abs,
}
_CONSTANTS = {"pi": math.pi}


class FormulaError(ValueError):
    """Raised when a formula cannot be evaluated."""


def _tokenize(formula: str) -> list[str]:
    tokens: list[str] = []
    pos = 0
    while pos < len(formula):
        char = formula[pos]
        if char.isspace():
            pos += 1
            continue
        match = _NUMBER.match(formula, pos) or _NAME.match(formula, pos)
        if match:
            tokens.append(match.group())
            pos = match.end()
        elif char in _OPERATORS:
            tokens.append(char)
            pos += 1
        else:
            raise FormulaError(f"unexpected character {char!r} in {formula!r}")
    return tokens


class _Parser:
    def __init__(self, tokens: list[str], variables: dict[str, float]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._variables = variables

    def _peek(self) -> str | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _take(self) -> str:
        token = self._peek()
        if token is None:
            raise FormulaError("unexpected end of formula")
        self._pos += 1
        return token

    def _expect(self, token: str) -> None:
        if self._take() != token:
            raise FormulaError(f"expected {token!r}")

    def parse(self) -> float:
        value = self._expression()
        if self._peek() is not None:
            raise FormulaError(f"unexpected token {self._peek()!r}")
        return value

    def _expression(self) -> float:
        value = self._term()
        while self._peek() in ("+", "-"):
            if self._take() == "+":
                value += self._term()
            else:
                value -= self._term()
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._peek() in ("*", "/"):
            if self._take() == "*":
                value *= self._unary()
            else:
                value /= self._unary()
        return value

    def _unary(self) -> float:
        if self._peek() == "-":
            self._take()
            return -self._unary()
        if self._peek() == "+":
            self._take()
            return self._unary()
        return self._power()

    def _power(self) -> float:
        base = self._primary()
        if self._peek() == "^":
            self._take()
            return base ** self._unary()
        return base

    def _primary(self) -> float:
        token = self._take()
        if token == "(":
            value = self._expression()
            self._expect(")")
            return value
        if _NUMBER.fullmatch(token):
            return float(token)
        if _NAME.fullmatch(token):
            if token in self._variables:
                return self._variables[token]
            if token in _FUNCTIONS and self._peek() == "(":
                self._take()
                argument = self._expression()
                self._expect(")")
                return float(_FUNCTIONS[token](argument))
            if token in _CONSTANTS:
                return _CONSTANTS[token]
            raise FormulaError(f"unknown variable {token!r}")
        raise FormulaError(f"unexpected token {token!r}")


class EquationHandler:
    """Holds named variables and evaluates formulas that refer to them."""

    def __init__(self, variables: dict[str, float] | None = None) -> None:
        self._variables: dict[str, float] = dict(variables or {})

    def set_variable(self, name: str, value: float) -> None:
        """Set or replace a variable."""
        if not _NAME.fullmatch(name):
            raise FormulaError(f"invalid variable name {name!r}")
        self._variables[name] = float(value)

    def get_variables(self) -> dict[str, float]:
        """Return a copy of the variables."""
        return dict(self._variables)

    def calculate_formula(self, formula: str) -> float:
        """Evaluate the formula; raise FormulaError if it is invalid."""
        tokens = _tokenize(formula)
        if not tokens:
            raise FormulaError("empty formula")
        try:
            result = _Parser(tokens, self._variables).parse()
        except (ZeroDivisionError, OverflowError, ValueError, TypeError) as exc:
            if isinstance(exc, FormulaError):
                raise
            raise FormulaError(f"cannot evaluate {formula!r}: {exc}") from exc
        if isinstance(result, complex):
            raise FormulaError(f"{formula!r} has no real value")
        return float(result)

    def copy(self) -> EquationHandler:
        """Return an independent handler with the same variables."""
        return EquationHandler(self._variables)