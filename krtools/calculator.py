"""A reverse Polish calculator reading whitespace-separated tokens."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from typing import NamedTuple

STACK_MAX_SIZE = 100

_NUMBER = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Evaluation(NamedTuple):
    """The final value and the error messages raised while computing it."""

    result: float
    errors: list[str]


class RPNCalculator:
    """A bounded operand stack; problems are recorded in ``errors`` and evaluation goes on."""

    def __init__(self) -> None:
        self.stack: list[float] = []
        self.errors: list[str] = []

    def push(self, value: float) -> None:
        """Push ``value``, recording an error if the stack is full."""
        if len(self.stack) < STACK_MAX_SIZE:
            self.stack.append(value)
        else:
            self.errors.append(f"Error: stack full, can't push {value:g}.")

    def pop(self) -> float:
        """Pop the top value; an empty stack records an error and yields 0.0."""
        if self.stack:
            return self.stack.pop()
        self.errors.append("Error: stack empty.")
        return 0.0

    def apply(self, token: str) -> None:
        """Push a number, or apply the operator named by the token's first character."""
        match = _NUMBER.match(token)
        if match:
            self.push(float(match.group()))
            return
        if not token:
            return
        op = token[0]
        if op == "+":
            self.push(self.pop() + self.pop())
        elif op == "-":
            right = self.pop()
            self.push(self.pop() - right)
        elif op == "*":
            self.push(self.pop() * self.pop())
        elif op == "/":
            right = self.pop()
            if right != 0.0:
                self.push(self.pop() / right)
            else:
                self.errors.append("Error: zero divisor.")
        elif op == "%":
            right = self.pop()
            if right != 0.0 and int(right) != 0:
                self.push(math.fmod(int(self.pop()), int(right)))
            else:
                self.errors.append("Error: zero divisor.")
        else:
            self.errors.append("Error: unknown command.")


def evaluate(text: str) -> Evaluation:
    """Run every token of ``text`` and pop the result."""
    calc = RPNCalculator()
    for token in text.split():
        calc.apply(token)
    result = calc.pop()
    return Evaluation(result, list(calc.errors))


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate stdin and print the result."""
    result, errors = evaluate(sys.stdin.read())
    for message in errors:
        print(message)
    print(f"result: {result:.8g}")
    return 0