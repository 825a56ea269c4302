"""Search operators: parsing, rendering, and the free-text candidate.

The query field accepts a mix of operators and plain words:

    stream:social sender:alice@example.com lunch plans

parses to

    [("stream", "social"), ("sender", "alice@example.com"),
     ("search", "lunch plans")]

Operands cannot contain spaces; "+" stands in for one.
"""

from __future__ import annotations

from typing import Callable

from rich.markup import escape

from ..models.candidate import Operator, OperatorsCandidate

# Parser contract: raw query text -> ordered operators (may be empty)
OperatorParser = Callable[[str], list[Operator]]

# Fixed phrases for operators whose operand selects a predefined view
_IS_PHRASES: dict[str, str] = {
    "private": "Narrow to all private messages",
    "starred": "Narrow to starred messages",
    "mentioned": "Narrow to mentioned messages",
}

# Phrase prefixes for operators that take a free operand
_OPERAND_PHRASES: dict[str, str] = {
    "stream": "Narrow to stream",
    "subject": "Narrow to subject",
    "sender": "Narrow to sender",
    "pm-with": "Narrow to private messages with",
    "search": "Search for",
    "in": "Narrow to messages in",
}

UNKNOWN_OPERATOR_PHRASE = "Narrow to (unknown operator)"


def _decode_operand(operand: str) -> str:
    return operand.replace("+", " ")


def _encode_operand(operand: str) -> str:
    return operand.replace(" ", "+")


def parse_operators(text: str) -> list[Operator]:
    """Parse query text into (operator, operand) pairs.

    Tokens of the form name:operand become operators. Every other token
    is collected into a single trailing ("search", ...) operator.
    """
    operators: list[Operator] = []
    search_words: list[str] = []

    for token in text.split():
        name, sep, operand = token.partition(":")
        if sep and name:
            operators.append((name.lower(), _decode_operand(operand)))
        else:
            search_words.append(token)

    if search_words:
        operators.append(("search", " ".join(search_words)))
    return operators


def unparse_operators(operators: list[Operator] | tuple[Operator, ...]) -> str:
    """Render operators back into normalized query text."""
    parts = []
    for name, operand in operators:
        if name == "search":
            parts.append(operand)
        else:
            parts.append(f"{name}:{_encode_operand(operand)}")
    return " ".join(parts)


def describe_operator(operator: Operator) -> str:
    """Human-readable phrase for a single operator."""
    name, operand = operator
    if name == "is":
        return _IS_PHRASES.get(operand, UNKNOWN_OPERATOR_PHRASE)
    prefix = _OPERAND_PHRASES.get(name)
    if prefix is None:
        return UNKNOWN_OPERATOR_PHRASE
    return f"{prefix} {operand}"


def describe_operators(operators: list[Operator] | tuple[Operator, ...]) -> str:
    """Join the phrases of all operators with ", "."""
    return ", ".join(describe_operator(op) for op in operators)


class OperatorCandidateBuilder:
    """Turns typed text into the free-text/operators suggestion."""

    def __init__(self, parser: OperatorParser = parse_operators):
        self._parser = parser

    def build(self, query_text: str) -> OperatorsCandidate | None:
        """Build the operators candidate, or None when nothing parses."""
        operators = self._parser(query_text)
        if not operators:
            return None
        return OperatorsCandidate(query=query_text, operators=tuple(operators))

    def describe(self, candidate: OperatorsCandidate) -> str:
        """Description of the candidate, escaped for markup rendering."""
        return escape(describe_operators(candidate.operators))
