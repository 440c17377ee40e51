"""Truth table helpers: cell values, position sets and canonical notation."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple


class CellValue(IntEnum):
    FALSE = 0
    TRUE = 1
    DONT_CARE = 2


def index_to_bits(index: int, variables: int) -> List[int]:
    """Return the bits of ``index``, most significant (x_0) first."""
    return [(index >> i) & 1 for i in range(variables - 1, -1, -1)]


def bits_to_index(bits: Iterable[int]) -> int:
    """Inverse of ``index_to_bits``."""
    value = 0
    for bit in bits:
        value = (value << 1) | (bit & 1)
    return value


def build_table_from_sets(
    variables: int, minterms: Iterable[int], dontcares: Iterable[int] = ()
) -> List[CellValue]:
    """Build a full truth table; out-of-range positions are ignored."""
    size = 1 << variables
    table = [CellValue.FALSE] * size
    for m in minterms:
        if 0 <= m < size:
            table[m] = CellValue.TRUE
    for d in dontcares:
        if 0 <= d < size:
            table[d] = CellValue.DONT_CARE
    return table


def sets_from_table(
    variables: int, table: Sequence[int]
) -> Tuple[List[int], List[int], List[int]]:
    """Return ``(minterms, dontcares, maxterms)`` in ascending order."""
    minterms: List[int] = []
    dontcares: List[int] = []
    maxterms: List[int] = []
    for i in range(1 << variables):
        value = table[i] if i < len(table) else CellValue.FALSE
        if value == CellValue.TRUE:
            minterms.append(i)
        elif value == CellValue.DONT_CARE:
            dontcares.append(i)
        else:
            maxterms.append(i)
    return minterms, dontcares, maxterms


def _join(xs: Sequence[int]) -> str:
    return ",".join(str(x) for x in xs) if xs else "∅"


def format_sigma_pi(variables: int, table: Sequence[int]) -> Tuple[str, str]:
    """Return the Σm and ΠM notations, e.g. ``f(x) = Σm(1,3) d(2)``."""
    minterms, dontcares, maxterms = sets_from_table(variables, table)
    d_part = f" d({_join(dontcares)})" if dontcares else ""
    sigma = f"f(x) = Σm({_join(minterms)})" + d_part
    pi = f"f(x) = ΠM({_join(maxterms)})" + d_part
    return sigma, pi


__all__ = [
    "CellValue",
    "bits_to_index",
    "build_table_from_sets",
    "format_sigma_pi",
    "index_to_bits",
    "sets_from_table",
]
