"""Alphabet and grid constants — single source of truth.

The alphabet omits vowels and easily-confused characters so codes do not
spell words. The first ten digits are encoded in pairs (one latitude
digit, one longitude digit, base 20); any further digits each select one
cell of a 5-row by 4-column grid.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Symbols
# ---------------------------------------------------------------------------

CODE_ALPHABET: str = "23456789CFGHJMPQRVWX"
"""Digit symbols, ordered by value."""

ENCODING_BASE: int = len(CODE_ALPHABET)

SEPARATOR: str = "+"
SEPARATOR_POSITION: int = 8
"""Number of digits before the separator in a full code."""

PADDING_CHARACTER: str = "0"

# ---------------------------------------------------------------------------
# Coordinate range (WGS 84 degrees)
# ---------------------------------------------------------------------------

LATITUDE_MAX: int = 90
LONGITUDE_MAX: int = 180

# ---------------------------------------------------------------------------
# Digit counts
# ---------------------------------------------------------------------------

MIN_DIGIT_COUNT: int = 2
MAX_DIGIT_COUNT: int = 15
PAIR_CODE_LENGTH: int = 10
GRID_CODE_LENGTH: int = MAX_DIGIT_COUNT - PAIR_CODE_LENGTH

GRID_COLUMNS: int = 4
GRID_ROWS: int = 5

# Cell size in degrees after each digit pair.
PAIR_RESOLUTIONS: tuple[float, ...] = (20.0, 1.0, 0.05, 0.0025, 0.000125)

# Integer scale factors. Pair precision is one unit per 10-digit cell;
# the final precisions are one unit per 15-digit cell on each axis.
PAIR_PRECISION: int = ENCODING_BASE**3
PAIR_FIRST_PLACE_VALUE: int = ENCODING_BASE ** (PAIR_CODE_LENGTH // 2 - 1)
GRID_LAT_FIRST_PLACE_VALUE: int = GRID_ROWS ** (GRID_CODE_LENGTH - 1)
GRID_LNG_FIRST_PLACE_VALUE: int = GRID_COLUMNS ** (GRID_CODE_LENGTH - 1)
FINAL_LAT_PRECISION: int = PAIR_PRECISION * GRID_ROWS**GRID_CODE_LENGTH
FINAL_LNG_PRECISION: int = PAIR_PRECISION * GRID_COLUMNS**GRID_CODE_LENGTH

# ---------------------------------------------------------------------------
# Shortening
# ---------------------------------------------------------------------------

MIN_TRIMMABLE_CODE_LENGTH: int = 6

SHORTEN_SAFETY_FACTOR: float = 0.3
"""Fraction of the removed prefix's cell size the reference point may lie
from the code center, per axis, for that prefix to be removed. Must stay
below 0.5 so recovery picks the same prefix back."""

MAX_SHORTEN_SAFETY_FACTOR: float = 0.5
"""Largest accepted safety factor, per call or via configuration."""

SHORTEN_REMOVAL_SIZES: tuple[int, ...] = (8, 6, 4)
"""Prefix lengths tried by ``shorten``, largest first."""
