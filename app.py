# app.py
"""
Main app router for the QCA contradiction filter
"""

import streamlit as st
from streamlit_option_menu import option_menu

# Page config
st.set_page_config(
    page_title="QCA · Contradictory Cases",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Import modules (with error handling)
def safe_import(module_name):
    """Safely import a page module."""
    try:
        if module_name == "start":
            import start
            return start
        elif module_name == "contradictions":
            import modules.contradictions as contradictions
            return contradictions
        elif module_name == "about":
            import about
            return about
    except ImportError as e:
        st.sidebar.error(f"Module {module_name} not found: {e}")
        return None

# Header
def draw_header():
    st.markdown("""
    <div style="background-color:#283044;padding:20px;border-radius:10px;margin-bottom:20px">
        <h1 style="color:white;margin:0">QCA · Contradictory Cases</h1>
        <p style="color:#cccccc;margin:5px 0 0 0">
            Look up the contradictory cases of a truth table in the underlying dataset
        </p>
    </div>
    """, unsafe_allow_html=True)

# Initialize session state
def init_session_state():
    defaults = {
        "dataset": None,
        "truth_table": None,
        "outcome": None,
        "contradictions": None,
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v

PAGES = {
    "Start": "start",
    "Contradictions": "contradictions",
    "About": "about",
}

# Sidebar menu
with st.sidebar:
    selected = option_menu(
        menu_title="Navigation",
        options=list(PAGES),
        icons=["house", "search", "info-circle"],
        default_index=0,
        styles={
            "container": {"padding": "5px"},
            "nav-link": {"font-size": "14px", "margin": "2px"},
            "nav-link-selected": {"background-color": "#283044"},
        }
    )

# Initialize
init_session_state()
draw_header()

# Routing
module = safe_import(PAGES[selected])
if module:
    module.show()
else:
    st.error(f"Module '{PAGES[selected]}' not available")
