import streamlit as st

def show():
    # ======= PAGE CONFIG =======
    st.title("About This Tool")
    st.markdown("---")

    # ======= INTRO =======
    st.header("Purpose")
    st.write(
        """
        In Qualitative Comparative Analysis (QCA) a truth table lists, for every
        configuration of conditions, the cases that belong to it and whether the
        configuration is classified as consistent with the outcome. What the
        standard truth table does not show is the set-membership values of the
        **contradictory cases**: cases sitting in a row whose own membership in
        the outcome is below 0.5.

        This tool looks those cases up in the underlying dataset, so you do not
        have to cross-reference case IDs by hand.
        """
    )

    # ======= APPROACH =======
    st.header("How Contradictions Are Found")
    st.write(
        """
        1. Pick the truth table rows to inspect: **consistent** (OUT = 1),
           **inconsistent** (OUT = 0) or **both**.
        2. Collect the case labels listed in those rows.
        3. Keep the cases whose outcome membership is **< 0.5**.
        4. Tag each case with the kind of row it came from.

        Results keep the row order of the dataset. Rows marked `?` or `C` in the
        truth table are never selected.
        """
    )

    # ======= INPUTS =======
    st.header("Inputs")
    st.write(
        """
        **Dataset**: one row per case, a column of unique case labels, condition
        and outcome memberships in [0, 1]. Scores outside [0, 1] are rejected,
        never clipped.

        **Truth table**: built elsewhere (for example `truthTable()` from the R
        QCA package with `show.cases = TRUE`) from the same dataset and outcome.
        It needs an `OUT` column and a `cases` column. A case label the dataset
        does not contain is an error.
        """
    )

    # ======= NAVIGATION =======
    st.header("Navigation")
    st.write(
        """
        **1. Start →** upload the dataset and truth table, or load the
        illustrative data.

        **2. Contradictions →** choose the rows, review and export the cases.

        The same filter is available from the command line: `qca-contra --help`.
        """
    )
