"""Boolean minimization and expression helpers for the K-Map Solver."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

from sympy import And, Not, Or, Symbol, symbols
from sympy.logic.boolalg import false, true

from .circuit import CircuitDefinition, build_circuit_definition

logger = logging.getLogger(__name__)

MIN_VARIABLES = 2
MAX_VARIABLES = 5
FORMS = ("sop", "pos")


@dataclass(frozen=True)
class Implicant:
    """A cube over the variables together with the positions it covers."""

    term: str
    minterms: Tuple[int, ...]


@dataclass(frozen=True)
class SolverResult:
    """Minimized expression and the groups that justify it.

    For POS the groups and terms describe the zero-cubes, i.e. the
    groupings of the complement.
    """

    expression: str
    groups: List[List[int]]
    terms: List[str]
    form: str = "sop"


def get_variables(n: int):
    """Return SymPy symbols (x_0, x_1, ...) for the requested variable count."""
    if n < 1:
        raise ValueError("Number of variables must be positive.")
    return tuple(symbols(" ".join(f"x_{i}" for i in range(n)), seq=True))


def variable_names(n: int) -> List[str]:
    """Return the display names x_0 .. x_{n-1}, most significant first."""
    return [f"x_{i}" for i in range(n)]


def _seed_groups(
    variables: int, positions: Iterable[int]
) -> List[Tuple[Implicant, ...]]:
    groups: List[List[Implicant]] = [[] for _ in range(variables + 1)]
    for m in positions:
        term = format(m, f"0{variables}b")
        groups[term.count("1")].append(Implicant(term, (m,)))
    return [tuple(g) for g in groups]


def _diff_index(t1: str, t2: str) -> int:
    """Index of the single differing position, or -1."""
    diff = -1
    for i, (a, b) in enumerate(zip(t1, t2)):
        if a != b:
            if diff != -1:
                return -1
            diff = i
    return diff


def _combine_round(
    groups: Sequence[Tuple[Implicant, ...]],
) -> Tuple[List[Tuple[Implicant, ...]], List[Implicant]]:
    """Run one combination pass.

    Returns the next-round groups and the cubes of this round that did not
    combine with anything.
    """
    next_groups: List[List[Implicant]] = [[] for _ in groups]
    combined: set = set()
    for i in range(len(groups) - 1):
        seen = {imp.term for imp in next_groups[i]}
        for t1 in groups[i]:
            for t2 in groups[i + 1]:
                diff = _diff_index(t1.term, t2.term)
                if diff == -1:
                    continue
                term = t1.term[:diff] + "-" + t1.term[diff + 1 :]
                if term not in seen:
                    seen.add(term)
                    next_groups[i].append(
                        Implicant(term, tuple(sorted(t1.minterms + t2.minterms)))
                    )
                combined.add(t1.term)
                combined.add(t2.term)
    primes = [
        imp
        for imp in itertools.chain.from_iterable(groups)
        if imp.term not in combined
    ]
    return [tuple(g) for g in next_groups], primes


def prime_implicants(
    variables: int, minterms: Iterable[int], dontcares: Iterable[int] = ()
) -> List[Implicant]:
    """Return the prime implicants in generation order, deduplicated by term."""
    current = _seed_groups(variables, itertools.chain(minterms, dontcares))
    primes: List[Implicant] = []
    while any(current):
        current, found = _combine_round(current)
        primes.extend(found)

    unique: List[Implicant] = []
    seen_terms = set()
    for pi in primes:
        if pi.term not in seen_terms:
            seen_terms.add(pi.term)
            unique.append(pi)
    return unique


def coverage_table(
    required: Sequence[int], primes: Sequence[Implicant]
) -> Dict[int, Tuple[Implicant, ...]]:
    """Map each required position to the primes that cover it."""
    return {m: tuple(pi for pi in primes if m in pi.minterms) for m in required}


def _uncovered(remaining: Sequence[int], chosen: Implicant) -> List[int]:
    return [m for m in remaining if m not in chosen.minterms]


def essential_implicants(
    required: Sequence[int], primes: Sequence[Implicant]
) -> Tuple[List[Implicant], List[int]]:
    """Extract essential primes.

    Returns the essentials in the order their positions appear and the
    required positions they leave uncovered.
    """
    coverage = coverage_table(required, primes)
    remaining = list(required)
    chosen: List[Implicant] = []
    while remaining:
        found: List[Implicant] = []
        for m in remaining:
            if len(coverage[m]) == 1 and coverage[m][0] not in found:
                found.append(coverage[m][0])
        found = [pi for pi in found if pi not in chosen]
        if not found:
            break
        for pi in found:
            chosen.append(pi)
            remaining = _uncovered(remaining, pi)
    return chosen, remaining


def greedy_cover(
    remaining: Sequence[int],
    primes: Sequence[Implicant],
    chosen: Sequence[Implicant] = (),
) -> List[Implicant]:
    """Fill the cover by repeatedly taking the prime covering most positions.

    Ties go to the first prime in generation order. This is a heuristic and
    does not guarantee a minimum cover.
    """
    picked = list(chosen)
    remaining = list(remaining)
    while remaining:
        best = None
        best_count = 0
        for pi in primes:
            if pi in picked:
                continue
            count = sum(1 for m in remaining if m in pi.minterms)
            if count > best_count:
                best, best_count = pi, count
        if best is None:
            break
        picked.append(best)
        remaining = _uncovered(remaining, best)
    return picked[len(chosen) :]


def format_term(term: str, names: Sequence[str]) -> str:
    """Render a cube as an SOP product, e.g. ``-10`` -> ``x_1x_2'``."""
    pieces = []
    for bit, name in zip(term, names):
        if bit == "1":
            pieces.append(name)
        elif bit == "0":
            pieces.append(f"{name}'")
    return "".join(pieces) if pieces else "1"


def format_pos(terms: Sequence[str], names: Sequence[str]) -> str:
    """Render zero-cubes as a product of sums, e.g. ``(x_0 + x_1')``."""
    if any(set(term) == {"-"} for term in terms):
        return "0"

    factors = []
    for term in terms:
        literals = []
        for bit, name in zip(term, names):
            if bit == "0":
                literals.append(name)
            elif bit == "1":
                literals.append(f"{name}'")
        factors.append(f"({' + '.join(literals)})" if literals else "(0)")
    return "".join(factors)


def _run_qm(
    variables: int, minterms: List[int], dontcares: List[int]
) -> Tuple[List[List[int]], List[str]]:
    if not minterms:
        return [], []
    if len(minterms) + len(dontcares) == 1 << variables:
        return [minterms + dontcares], ["-" * variables]

    primes = prime_implicants(variables, minterms, dontcares)
    essentials, remaining = essential_implicants(minterms, primes)
    extra = greedy_cover(remaining, primes, essentials)
    logger.debug(
        "%d primes, %d essential, %d greedy", len(primes), len(essentials), len(extra)
    )
    cover = essentials + extra
    return [list(pi.minterms) for pi in cover], [pi.term for pi in cover]


def minimize(
    variables: int,
    minterms: Iterable[int],
    dontcares: Iterable[int] = (),
    form: str = "sop",
) -> SolverResult:
    """Minimize a function given by its true and don't-care positions.

    ``form`` selects ``"sop"`` or ``"pos"``. The POS result is derived from a
    minimization of the complement; its groups are the zero-groupings.
    """
    form = form.lower()
    if form not in FORMS:
        raise ValueError(f"Unknown form {form!r}; expected 'sop' or 'pos'.")

    ones = sorted(set(minterms))
    dcs = sorted(set(dontcares))
    names = variable_names(variables)

    if form == "sop":
        groups, terms = _run_qm(variables, ones, dcs)
        expression = " + ".join(format_term(t, names) for t in terms) or "0"
        return SolverResult(expression, groups, terms, form)

    fixed = set(ones) | set(dcs)
    zeros = [m for m in range(1 << variables) if m not in fixed]
    if not zeros:
        return SolverResult("1", [], [], form)
    groups, terms = _run_qm(variables, zeros, dcs)
    return SolverResult(format_pos(terms, names), groups, terms, form)


def circuit_to_sympy(definition: CircuitDefinition, vars_tuple: Sequence[Symbol]):
    """Build a SymPy expression from a parsed circuit definition."""
    if definition.constant is not None:
        return true if definition.constant == "1" else false

    def lit(literal):
        var = vars_tuple[literal.variable]
        return Not(var) if literal.negated else var

    if definition.mode == "SOP":
        return Or(*(And(*(lit(l) for l in c.literals)) for c in definition.clauses))
    return And(*(Or(*(lit(l) for l in c.literals)) for c in definition.clauses))


def expression_to_sympy(expression: str, vars_tuple, form: str = "sop"):
    """Parse a solver expression (SOP or POS text) into SymPy."""
    definition = build_circuit_definition(expression, form.lower() == "sop")
    return circuit_to_sympy(definition, vars_tuple)


def truth_minterms(expr, vars_tuple) -> List[int]:
    """Return indices whose assignments make the expression evaluate to True."""
    mins = []
    for idx, bits in enumerate(itertools.product([0, 1], repeat=len(vars_tuple))):
        subs = {var: bool(bit) for var, bit in zip(vars_tuple, bits)}
        if bool(expr.xreplace(subs)):
            mins.append(idx)
    return mins


def validate_variable_count(n: int) -> None:
    """Ensure the variable count is one the K-map supports (2-5)."""
    if not MIN_VARIABLES <= n <= MAX_VARIABLES:
        raise ValueError(
            f"Variable count must be between {MIN_VARIABLES} and {MAX_VARIABLES}, got {n}."
        )


def validate_minterm_range(minterms: Iterable[int], n: int) -> None:
    """Ensure all minterms are within the range for the current variable count."""
    max_valid = (1 << n) - 1
    invalid = [m for m in minterms if m < 0 or m > max_valid]
    if invalid:
        raise ValueError(
            f"Minterms out of range for {n} variables (0-{max_valid}): {sorted(set(invalid))}"
        )


def validate_disjoint(minterms: Iterable[int], dontcares: Iterable[int]) -> None:
    """Ensure no position is listed both as a minterm and a don't care."""
    overlap: FrozenSet[int] = frozenset(minterms) & frozenset(dontcares)
    if overlap:
        raise ValueError(
            f"Positions listed as both minterm and don't care: {sorted(overlap)}"
        )
