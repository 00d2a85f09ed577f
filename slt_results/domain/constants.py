"""
Domain Constants: sentinel strings and defaults shared by the normalizer.

The sentinels follow the sqllogictest result conventions:
NULL cells and empty strings must stay distinguishable in expectation files.
"""

# =============================================================================
# Cell Sentinels
# =============================================================================

NULL_STR = "NULL"
EMPTY_STR = "(empty)"

NAN_STR = "NaN"
INFINITY_STR = "Infinity"
NEG_INFINITY_STR = "-Infinity"

TRUE_STR = "true"
FALSE_STR = "false"

# Escape for embedded NUL characters in text cells
NUL_ESCAPE = "\\0"

# =============================================================================
# Numeric Canonicalization
# =============================================================================

# Fractional digits kept after rounding floats and decimals
DEFAULT_ROUND_DIGITS = 12

# Working precision floor for the decimal context (decimal module default)
MIN_DECIMAL_PRECISION = 28

# =============================================================================
# Row Expansion
# =============================================================================

# Marks stripped leading whitespace on expanded lines (one per character)
INDENT_MARKER = "-"

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_FILENAME = "default.yaml"
CONFIG_SECTION = "normalization"
