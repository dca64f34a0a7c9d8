# contradictions.py
"""
Contradictions UI: contradictory cases of the truth table.

REQUISITOS:
    st.session_state['dataset']      -> DataFrame indexado por case label
    st.session_state['truth_table']  -> truth table normalizada (OUT, cases)
    st.session_state['outcome']      -> columna del outcome

EXPORTA:
    st.session_state['contradictions'] -> DataFrame de casos contradictorios
"""

import json

import streamlit as st
import pandas as pd
import altair as alt

from core.config import CROSSOVER, DCC_COLUMN
from core.contradictions import (
    contradiction_records,
    deviant_cases,
    filter_contradictions,
    summarize_contradictions,
)
from core.errors import ContradictionError
from core.membership import binarize
from core.truth_table import RowClass

ROW_CLASS_LABELS = {
    "Consistent rows (OUT = 1)": RowClass.CONSISTENT,
    "Inconsistent rows (OUT = 0)": RowClass.INCONSISTENT,
    "Both": RowClass.BOTH,
}

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def validate_prerequisites():
    """Validate required data is available in session state."""
    required_keys = [
        ("dataset", "Upload the dataset in the 'Start' module"),
        ("truth_table", "Upload the truth table in the 'Start' module"),
        ("outcome", "Select the outcome column in the 'Start' module"),
    ]
    return [
        (key, message) for key, message in required_keys
        if st.session_state.get(key) is None
    ]


def outcome_chart(members, outcome):
    """Outcome membership of every member case against the 0.5 crossover."""
    plot_df = members.reset_index().rename(columns={members.index.name or "index": "case"})
    plot_df["Y_crisp"] = binarize(plot_df[outcome]).map({1: "member", 0: "non-member"})

    points = alt.Chart(plot_df).mark_circle(size=120).encode(
        x=alt.X("case:N", sort=None, title="Case"),
        y=alt.Y(f"{outcome}:Q", scale=alt.Scale(domain=[0, 1]), title=f"Membership in {outcome}"),
        color=alt.Color("Y_crisp:N", title="Outcome"),
        tooltip=["case", outcome, "row"],
    )
    rule = alt.Chart(pd.DataFrame({"y": [CROSSOVER]})).mark_rule(strokeDash=[4, 4]).encode(y="y:Q")
    return (points + rule).properties(height=320)


# -------------------------------------------------------------------
# UI principal
# -------------------------------------------------------------------

def show():
    st.title("🔎 Contradictory Cases")

    missing = validate_prerequisites()
    if missing:
        st.error("Missing data. Please complete these steps first:")
        for key, message in missing:
            st.markdown(f"**{key}** → {message}")
        return

    dataset = st.session_state["dataset"]
    truth_table = st.session_state["truth_table"]
    outcome = st.session_state["outcome"]

    st.markdown(
        "Cases that belong to a truth table row but are **non-members of "
        f"{outcome}** (membership < {CROSSOVER}) are contradictions."
    )

    choice = st.radio("Truth table rows", list(ROW_CLASS_LABELS), index=0, horizontal=True)
    row_class = ROW_CLASS_LABELS[choice]

    try:
        contra = filter_contradictions(dataset, truth_table, row_class, outcome=outcome)
        tt_dcc = deviant_cases(dataset, truth_table, outcome=outcome)
    except ContradictionError as e:
        st.error(str(e))
        return

    st.session_state["contradictions"] = contra

    # -------------------------------------------------------------------
    # Resultados
    # -------------------------------------------------------------------

    summary = summarize_contradictions(contra)
    colA, colB, colC = st.columns(3)
    with colA:
        st.metric("Contradictions", summary["total"])
    with colB:
        st.metric("In consistent rows", summary["consistent row"])
    with colC:
        st.metric("In inconsistent rows", summary["inconsistent row"])

    if contra.empty:
        st.success("No contradictory cases in the selected rows.")
    else:
        st.dataframe(contra, use_container_width=True)

    with st.expander("Truth table with deviant cases (dcc)"):
        shown = tt_dcc.copy()
        shown["cases"] = [",".join(sorted(c)) for c in shown["cases"]]
        shown[DCC_COLUMN] = [",".join(c) for c in shown[DCC_COLUMN]]
        st.dataframe(shown, use_container_width=True)

    # -------------------------------------------------------------------
    # Visualización
    # -------------------------------------------------------------------

    st.markdown("---")
    st.subheader("📈 Member cases vs. outcome")

    case_rows = {}
    for row_id, cases in zip(truth_table.index, truth_table["cases"]):
        for label in cases:
            case_rows[label] = str(row_id)
    members = dataset[dataset.index.astype(str).isin(list(case_rows))].copy()
    if members.empty:
        st.info("The truth table assigns no cases.")
    else:
        members["row"] = [case_rows[str(l)] for l in members.index]
        st.altair_chart(outcome_chart(members, outcome), use_container_width=True)

    # -------------------------------------------------------------------
    # Exportar
    # -------------------------------------------------------------------

    st.markdown("---")
    st.subheader("⬇️ Exportar")

    col1, col2 = st.columns(2)
    with col1:
        csv = contra.to_csv(index=True).encode("utf-8")
        st.download_button("Descargar CSV", csv, "contradictions.csv", "text/csv")
    with col2:
        json_str = json.dumps(
            {"outcome": outcome, "row_class": row_class.value,
             "contradictions": contradiction_records(contra, outcome=outcome)},
            indent=2,
        )
        st.download_button("Descargar JSON", json_str, "contradictions.json", "application/json")


# end of file
