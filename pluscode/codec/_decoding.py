"""Code to area decoding.

Bounds are accumulated as integer offsets from the south-west corner of
the map, in units of the finest cell, and converted to degrees with one
division each. Cell edges at the poles and the antimeridian therefore
come out exact.
"""

from __future__ import annotations

from pluscode.codec._alphabet import digit_value
from pluscode.codec._validation import check
from pluscode.core.constants import (
    ENCODING_BASE,
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_LAT_FIRST_PLACE_VALUE,
    GRID_LNG_FIRST_PLACE_VALUE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_FIRST_PLACE_VALUE,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.exceptions import InvalidCodeError, ShortCodeError
from pluscode.models.area import CodeArea

# Finest-cell units per pair-phase unit on each axis.
_LAT_GRID_SCALE = GRID_ROWS**GRID_CODE_LENGTH
_LNG_GRID_SCALE = GRID_COLUMNS**GRID_CODE_LENGTH


def decode(code: str) -> CodeArea:
    """Decode a full code into the area it represents.

    Args:
        code: A valid full code, optionally padded, any case.

    Returns:
        The ``CodeArea`` with the number of digits decoded as
        ``code_length``.

    Raises:
        InvalidCodeError: If the code is malformed.
        ShortCodeError: If the code is short; recover it first with
            ``recover_nearest``.
    """
    try:
        check(code)
    except InvalidCodeError as exc:
        raise InvalidCodeError(exc.message, operation="decode", rule=exc.rule) from exc
    if code.find(SEPARATOR) < SEPARATOR_POSITION:
        msg = f"Code {code!r} is short; recover it with a reference location first"
        raise ShortCodeError(msg, operation="decode")

    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()

    # Pair phase, in units of the 10-digit cell.
    pair_digits = min(len(digits), PAIR_CODE_LENGTH)
    lat_units = 0
    lng_units = 0
    place_value = PAIR_FIRST_PLACE_VALUE
    for i in range(0, pair_digits, 2):
        lat_units += digit_value(digits[i]) * place_value
        lng_units += digit_value(digits[i + 1]) * place_value
        if i < pair_digits - 2:
            place_value //= ENCODING_BASE

    lat_lo = lat_units * _LAT_GRID_SCALE
    lng_lo = lng_units * _LNG_GRID_SCALE
    lat_size = place_value * _LAT_GRID_SCALE
    lng_size = place_value * _LNG_GRID_SCALE

    # Grid phase, in units of the finest cell.
    if len(digits) > PAIR_CODE_LENGTH:
        row_value = GRID_LAT_FIRST_PLACE_VALUE
        col_value = GRID_LNG_FIRST_PLACE_VALUE
        for i in range(PAIR_CODE_LENGTH, len(digits)):
            row, col = divmod(digit_value(digits[i]), GRID_COLUMNS)
            lat_lo += row * row_value
            lng_lo += col * col_value
            if i < len(digits) - 1:
                row_value //= GRID_ROWS
                col_value //= GRID_COLUMNS
        lat_size = row_value
        lng_size = col_value

    lat_origin = LATITUDE_MAX * FINAL_LAT_PRECISION
    lng_origin = LONGITUDE_MAX * FINAL_LNG_PRECISION
    return CodeArea(
        latitude_lo=(lat_lo - lat_origin) / FINAL_LAT_PRECISION,
        longitude_lo=(lng_lo - lng_origin) / FINAL_LNG_PRECISION,
        latitude_hi=(lat_lo + lat_size - lat_origin) / FINAL_LAT_PRECISION,
        longitude_hi=(lng_lo + lng_size - lng_origin) / FINAL_LNG_PRECISION,
        code_length=len(digits),
    )
