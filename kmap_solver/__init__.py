"""Convenience exports for core K-Map solver helpers."""

from .logic import (
    Implicant,
    SolverResult,
    circuit_to_sympy,
    essential_implicants,
    expression_to_sympy,
    format_pos,
    format_term,
    get_variables,
    greedy_cover,
    minimize,
    prime_implicants,
    truth_minterms,
    validate_disjoint,
    validate_minterm_range,
    validate_variable_count,
)
from .kmap_engine import (
    GroupRect,
    cell_coordinates,
    gray_codes,
    grid_dimensions,
    map_count,
    map_dimensions,
    minimal_cyclic_interval,
    minterm_index,
    rect_cells,
    resolve_rectangles,
)
from .circuit import CircuitDefinition, Clause, Literal, build_circuit_definition
from .truth_table import (
    CellValue,
    bits_to_index,
    build_table_from_sets,
    format_sigma_pi,
    index_to_bits,
    sets_from_table,
)

__all__ = [
    "CellValue",
    "CircuitDefinition",
    "Clause",
    "GroupRect",
    "Implicant",
    "Literal",
    "SolverResult",
    "bits_to_index",
    "build_circuit_definition",
    "build_table_from_sets",
    "cell_coordinates",
    "circuit_to_sympy",
    "essential_implicants",
    "expression_to_sympy",
    "format_pos",
    "format_sigma_pi",
    "format_term",
    "get_variables",
    "gray_codes",
    "greedy_cover",
    "grid_dimensions",
    "index_to_bits",
    "map_count",
    "map_dimensions",
    "minimal_cyclic_interval",
    "minimize",
    "minterm_index",
    "prime_implicants",
    "rect_cells",
    "resolve_rectangles",
    "sets_from_table",
    "truth_minterms",
    "validate_disjoint",
    "validate_minterm_range",
    "validate_variable_count",
]
