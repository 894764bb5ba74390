"""Extraction of ``${...}`` expressions embedded in strings."""

from __future__ import annotations

from collections.abc import Iterable

EXPR_START = "${"
EXPR_END = "}"


class NestedExpressionError(ValueError):
    """Raised when an expression contains another ``${`` opening."""

    def __init__(self, message: str = "nested expressions are not allowed") -> None:
        super().__init__(message)


class ConditionExpressionError(ValueError):
    """Raised when a condition is not a single standalone expression."""


def extract_expressions(text: str) -> list[str]:
    """Return the bodies of all complete, non-nested ``${...}`` expressions.

    Braces inside an expression are balanced, so dictionary literals such as
    ``${{"key": 1}}`` are kept whole. An unterminated expression is skipped;
    an expression containing another ``${`` raises
    :class:`NestedExpressionError`.
    """
    expressions: list[str] = []
    start = 0
    while start < len(text):
        start_idx = text.find(EXPR_START, start)
        if start_idx == -1:
            break

        depth = 1
        end = start_idx + len(EXPR_START)
        while end < len(text):
            char = text[end]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    break
            elif text.startswith(EXPR_START, end):
                raise NestedExpressionError()
            end += 1

        if depth != 0:
            start += 1
            continue

        expressions.append(text[start_idx + len(EXPR_START) : end])
        start = end + 1
    return expressions


def is_standalone_expression(text: str) -> bool:
    """True if ``text`` is exactly one complete expression and nothing else."""
    expressions = extract_expressions(text)
    return len(expressions) == 1 and text == EXPR_START + expressions[0] + EXPR_END


def parse_condition_expressions(conditions: Iterable[str]) -> list[str]:
    """Validate condition strings and return them with ``${`` and ``}`` removed.

    Every condition must be a standalone expression.
    """
    expressions: list[str] = []
    for condition in conditions:
        if not is_standalone_expression(condition):
            raise ConditionExpressionError("only standalone expressions are allowed")
        expressions.append(condition.strip("${}"))
    return expressions