# core/config.py
"""
Runtime configuration for the contradiction filter.

Values are module-level constants; the ones that make sense to change
per deployment can be overridden through environment variables.
"""

import os


# ======================================================
# QCA CONSTANTS
# ======================================================

# Crisp-set crossover: memberships below it are non-members.
CROSSOVER = 0.5

# Truth table columns read by the filter
OUT_COLUMN = "OUT"
CASES_COLUMN = "cases"

# Column added to contradiction tables
TYPE_COLUMN = "type"

# Column added by deviant_cases()
DCC_COLUMN = "dcc"


# ======================================================
# ENVIRONMENT OVERRIDES
# ======================================================

DEFAULT_OUTCOME = os.environ.get("QCA_CONTRA_OUTCOME", "Y").strip() or "Y"
EXPORT_DIR = os.environ.get("QCA_CONTRA_EXPORT_DIR", "exports").strip() or "exports"
LOG_LEVEL = os.environ.get("QCA_CONTRA_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
