"""Gate-level description of a solved SOP/POS expression."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

LITERAL_RE = re.compile(r"x_(\d+)('?)")
FACTOR_RE = re.compile(r"\(([^()]*)\)")


@dataclass(frozen=True)
class Literal:
    """A variable, optionally negated."""

    variable: int
    negated: bool = False


@dataclass(frozen=True)
class Clause:
    """One AND gate (SOP) or OR gate (POS) worth of literals."""

    literals: Tuple[Literal, ...]


@dataclass(frozen=True)
class CircuitDefinition:
    """Clauses of a solved expression, or a constant "0"/"1"."""

    mode: str
    clauses: Tuple[Clause, ...] = field(default_factory=tuple)
    constant: Optional[str] = None


def parse_literal(token: str) -> Optional[Literal]:
    """Parse ``x_<n>`` with an optional trailing quote; None if it does not match."""
    match = LITERAL_RE.match(token.strip())
    if not match:
        return None
    return Literal(variable=int(match.group(1)), negated=match.group(2) == "'")


def _literals(tokens) -> Tuple[Literal, ...]:
    parsed = (parse_literal(tok) for tok in tokens)
    return tuple(lit for lit in parsed if lit is not None)


def _parse_sop(expression: str) -> List[Clause]:
    clauses = []
    for term in expression.split(" + "):
        tokens = [m.group(0) for m in LITERAL_RE.finditer(term)]
        clauses.append(Clause(_literals(tokens)))
    return [c for c in clauses if c.literals]


def _parse_pos(expression: str) -> List[Clause]:
    clauses = []
    for factor in FACTOR_RE.finditer(expression):
        raw = [v.strip() for v in factor.group(1).split("+")]
        clauses.append(Clause(_literals(v for v in raw if v)))
    return [c for c in clauses if c.literals]


def build_circuit_definition(expression: str, is_sop: bool) -> CircuitDefinition:
    """Split a solver expression into clauses of literals.

    ``"0"`` and ``"1"`` become constants without clauses.
    """
    mode = "SOP" if is_sop else "POS"
    normalized = expression.strip()
    if normalized in ("0", "1"):
        return CircuitDefinition(mode=mode, constant=normalized)

    clauses = _parse_sop(normalized) if is_sop else _parse_pos(normalized)
    return CircuitDefinition(mode=mode, clauses=tuple(clauses))


__all__ = [
    "Clause",
    "CircuitDefinition",
    "Literal",
    "build_circuit_definition",
    "parse_literal",
]
