import matplotlib.pyplot as plt
import streamlit as st

from kmap_solver import (
    build_circuit_definition,
    build_table_from_sets,
    expression_to_sympy,
    format_sigma_pi,
    get_variables,
    map_count,
    minimize,
    truth_minterms,
    validate_disjoint,
    validate_minterm_range,
    validate_variable_count,
)
from kmap_solver.plotting import FIGURE_SIZES, draw_kmap

# ------------------------------- page setup -------------------------------

st.set_page_config(page_title="K-Map Solver", layout="wide")
st.title("🧮 K-Map Solver")
st.markdown("---")

n = st.number_input("Number of variables:", min_value=2, max_value=5, value=4, step=1)
n = int(n)
form = st.radio("Form:", ["SOP", "POS"], horizontal=True)
raw_mins = st.text_input("Minterms (e.g. 1,3,5,7):")
raw_dcs = st.text_input("Don't cares (optional):")


def parse_positions(raw: str):
    return [int(x.strip()) for x in raw.split(",") if x.strip()]


# ------------------------------- solve -------------------------------
if st.button("Solve 🚀"):
    try:
        validate_variable_count(n)
        mins = parse_positions(raw_mins)
        dcs = parse_positions(raw_dcs) if raw_dcs else []
        validate_minterm_range(mins, n)
        validate_minterm_range(dcs, n)
        validate_disjoint(mins, dcs)

        result = minimize(n, mins, dcs, form.lower())
        st.success(f"**{form}:**  \nF = {result.expression}")

        sigma, pi = format_sigma_pi(n, build_table_from_sets(n, mins, dcs))
        circuit = build_circuit_definition(result.expression, form == "SOP")
        vars_tuple = get_variables(n)
        produced = truth_minterms(
            expression_to_sympy(result.expression, vars_tuple, form), vars_tuple
        )
        required = set(mins)
        allowed = required | set(dcs)
        verified = required <= set(produced) <= allowed

        steps = (
            f"• variables: {n}\n"
            f"• {sigma}\n"
            f"• {pi}\n"
            f"• groups = {result.groups if result.groups else '—'}\n"
            f"• gates: {len(circuit.clauses)} {'AND' if form == 'SOP' else 'OR'}"
            f"{' (constant ' + circuit.constant + ')' if circuit.constant else ''}\n"
            f"• result ({form}): F = {result.expression}\n"
            f"• check against the truth table: {'ok' if verified else 'MISMATCH'}"
        )
        st.text_area("Details:", steps, height=200)

        # ------------------------------- K-map -------------------------------
        with st.container():
            st.markdown("### 🗺️ K-Map")
            caption = "Groups of zeros (POS)" if form == "POS" else "Groups of ones (SOP)"
            st.caption(caption)

            maps = map_count(n)
            width, height = FIGURE_SIZES[n]
            fig, axes = plt.subplots(1, maps, figsize=(width * maps, height), squeeze=False)
            for index, ax in enumerate(axes[0]):
                draw_kmap(
                    n,
                    mins,
                    dcs,
                    result.groups,
                    map_index=index if maps > 1 else None,
                    ax=ax,
                )
            st.pyplot(fig)

    except Exception as e:
        st.error(f"Could not solve:\n{e}")
