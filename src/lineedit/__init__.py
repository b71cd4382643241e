# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	lineedit: base window + command spine for linear-data editing tools.
#
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
