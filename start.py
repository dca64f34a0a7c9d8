import streamlit as st
import pandas as pd

from core.errors import ContradictionError
from core.loaders import load_truth_table, read_table, set_case_labels
from core.membership import is_fuzzy, membership_columns
from core.sample_data import OUTCOME, illustrative_dataset, illustrative_truth_table

# ============================================================
#  START PAGE: DATASET & TRUTH TABLE INPUT
# ============================================================

DELIMITERS = {
    "Auto-detect": None,
    "Comma (,)": ",",
    "Semicolon (;)": ";",
    "Tab": "\t",
    "Pipe (|)": "|",
}


def load_sample():
    """Put the illustrative dataset and truth table into session state."""
    st.session_state["dataset"] = illustrative_dataset()
    st.session_state["truth_table"] = illustrative_truth_table()
    st.session_state["outcome"] = OUTCOME


def show():

    st.markdown("""
    <div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 25px; border-radius: 15px; margin-bottom: 30px">
        <h1 style="color: white; margin: 0">Data Input</h1>
        <p style="color: rgba(255,255,255,0.9); margin: 10px 0 0 0">
            Upload the calibrated dataset and the truth table built from it
        </p>
    </div>
    """, unsafe_allow_html=True)

    if st.button("Load illustrative data (cases A–T, outcome Y)"):
        load_sample()
        st.success("Illustrative dataset and truth table loaded.")

    # ============================================================
    # 1. DATASET
    # ============================================================

    st.markdown("## 1. Dataset")

    col1, col2 = st.columns([1, 2])
    with col1:
        delimiter_option = st.selectbox("CSV Delimiter:", list(DELIMITERS), key="dataset_delimiter")
    with col2:
        uploaded_data = st.file_uploader(
            "Calibrated dataset (one row per case)",
            type=["csv", "txt", "xlsx"],
            key="dataset_uploader",
        )

    if uploaded_data is not None:
        try:
            raw = read_table(uploaded_data, name=uploaded_data.name, sep=DELIMITERS[delimiter_option])
        except (ValueError, UnicodeDecodeError) as e:
            st.error(f"Error reading file: {str(e)}")
            return

        columns = raw.columns.tolist()
        col_a, col_b = st.columns(2)
        with col_a:
            case_column = st.selectbox(
                "Case label column:",
                ["(row number)"] + columns,
                index=1 if columns and not pd.api.types.is_numeric_dtype(raw[columns[0]]) else 0,
                help="Column holding the unique case IDs",
            )
        with col_b:
            outcome_col = st.selectbox(
                "Outcome column (Y):",
                columns,
                index=len(columns) - 1 if columns else 0,
            )

        try:
            if case_column == "(row number)":
                dataset = raw.reset_index(drop=True)
                dataset.index = (dataset.index + 1).astype(str)
                dataset.index.name = "case"
            else:
                dataset = set_case_labels(raw, case_column)
        except ContradictionError as e:
            st.error(str(e))
            return

        st.session_state["dataset"] = dataset
        st.session_state["outcome"] = outcome_col

        c1, c2 = st.columns(2)
        with c1:
            st.metric("Cases", dataset.shape[0])
        with c2:
            st.metric("Columns", dataset.shape[1])

        if not dataset.index.is_unique:
            st.warning("Case labels are not unique; the filter will reject this dataset.")

        outside = [c for c in membership_columns(dataset) if not is_fuzzy(dataset[c])]
        if outside:
            st.warning(
                "These numeric columns have scores outside [0, 1]; calibrate them before "
                f"filtering: {', '.join(map(str, outside))}"
            )

    if st.session_state.get("dataset") is not None:
        with st.expander("📄 Dataset preview"):
            st.dataframe(st.session_state["dataset"], use_container_width=True)

    # ============================================================
    # 2. TRUTH TABLE
    # ============================================================

    st.markdown("---")
    st.markdown("## 2. Truth Table")
    st.caption(
        "Needs an **OUT** column (1, 0, ? or C) and a **cases** column listing the "
        "case labels of each row, comma-separated (as printed by the R QCA package)."
    )

    uploaded_tt = st.file_uploader(
        "Truth table",
        type=["csv", "txt", "json"],
        key="truth_table_uploader",
    )

    if uploaded_tt is not None:
        try:
            st.session_state["truth_table"] = load_truth_table(uploaded_tt, name=uploaded_tt.name)
            st.success(f"Truth table loaded: **{uploaded_tt.name}**")
        except (ContradictionError, ValueError) as e:
            st.error(f"Error reading truth table: {str(e)}")
            return

    if st.session_state.get("truth_table") is not None:
        with st.expander("📄 Truth table preview"):
            shown = st.session_state["truth_table"].copy()
            shown["cases"] = [",".join(sorted(c)) for c in shown["cases"]]
            st.dataframe(shown, use_container_width=True)

    if st.session_state.get("dataset") is not None and st.session_state.get("truth_table") is not None:
        st.info("Inputs ready. Continue to **Contradictions** in the sidebar.")


# For direct execution
if __name__ == "__main__":
    show()
