"""Open Location Code codec — composable operations.

Converts between coordinates and codes, and between full and short codes.
The codec is split into focused modules:
- **_alphabet**: symbol/value lookups
- **_validation**: syntax rules, short/full classification
- **_encoding**: coordinate → code
- **_decoding**: code → area
- **_shortening**: shorten against a reference, recover the nearest full code
- **_report**: JSON-ready inspection reports

Every operation is a pure function; the module holds no mutable state
and is safe to call from any number of threads.
"""

from __future__ import annotations

from pluscode.codec._alphabet import digit_symbol, digit_value
from pluscode.codec._decoding import decode
from pluscode.codec._encoding import (
    clip_latitude,
    encode,
    normalize_longitude,
    validate_code_length,
)
from pluscode.codec._report import describe
from pluscode.codec._shortening import recover_nearest, shorten
from pluscode.codec._validation import (
    check,
    check_full,
    check_short,
    is_full,
    is_short,
    is_valid,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "check",
    "check_full",
    "check_short",
    "clip_latitude",
    "decode",
    "describe",
    "digit_symbol",
    "digit_value",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "normalize_longitude",
    "recover_nearest",
    "shorten",
    "validate_code_length",
]
