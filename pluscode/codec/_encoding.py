"""Coordinate to code encoding.

Coordinates are scaled to integers at the finest (15-digit) resolution
before any digit is extracted, so every code length is derived from the
same integer and floating point error cannot move a point between
cells at different lengths.
"""

from __future__ import annotations

import math

from pluscode.codec._alphabet import digit_symbol
from pluscode.core.constants import (
    ENCODING_BASE,
    FINAL_LAT_PRECISION,
    FINAL_LNG_PRECISION,
    GRID_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    MIN_DIGIT_COUNT,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.exceptions import UnsupportedLengthError

# Number of integer units spanning each axis at the finest resolution.
_LAT_UNITS = 2 * LATITUDE_MAX * FINAL_LAT_PRECISION
_LNG_UNITS = 2 * LONGITUDE_MAX * FINAL_LNG_PRECISION


def clip_latitude(latitude: float) -> float:
    """Clip a latitude into ``[-90, 90]``."""
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Normalise a longitude into ``[-180, 180)``."""
    if -LONGITUDE_MAX <= longitude < LONGITUDE_MAX:
        return longitude
    longitude = (longitude + LONGITUDE_MAX) % (2 * LONGITUDE_MAX) - LONGITUDE_MAX
    # Float modulo of a tiny negative number can round up to the full period.
    if longitude >= LONGITUDE_MAX:
        longitude -= 2 * LONGITUDE_MAX
    return longitude


def validate_code_length(code_length: int) -> None:
    """Raise ``UnsupportedLengthError`` unless ``code_length`` can be encoded.

    Supported lengths are 2, 4, 6, 8 and every length from 10 to 15.
    """
    if isinstance(code_length, bool) or not isinstance(code_length, int):
        raise UnsupportedLengthError(code_length, f"Code length must be an int, got {code_length!r}")
    if code_length < MIN_DIGIT_COUNT or code_length > MAX_DIGIT_COUNT:
        raise UnsupportedLengthError(
            code_length,
            f"Code length {code_length} outside [{MIN_DIGIT_COUNT}, {MAX_DIGIT_COUNT}]",
        )
    if code_length < PAIR_CODE_LENGTH and code_length % 2 == 1:
        raise UnsupportedLengthError(
            code_length, f"Code length {code_length} must be even below {PAIR_CODE_LENGTH}"
        )


def encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> str:
    """Encode a coordinate into a full code of ``code_length`` digits.

    Latitude is clipped to ``[-90, 90]`` and longitude normalised into
    ``[-180, 180)``. A latitude of exactly 90 is encoded as the largest
    representable value below the pole, i.e. into the topmost cell.

    Args:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        code_length: Significant digits to produce (default 10).

    Returns:
        The upper-case code, padded with ``0`` up to the separator when
        ``code_length`` is below 8.

    Raises:
        UnsupportedLengthError: If ``code_length`` is not supported.
    """
    validate_code_length(code_length)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    lat_val = math.floor(round((latitude + LATITUDE_MAX) * FINAL_LAT_PRECISION, 6))
    lng_val = math.floor(round((longitude + LONGITUDE_MAX) * FINAL_LNG_PRECISION, 6))
    lat_val = min(max(lat_val, 0), _LAT_UNITS - 1)
    lng_val %= _LNG_UNITS

    # Digits are collected least significant first.
    digits: list[str] = []
    if code_length > PAIR_CODE_LENGTH:
        for _ in range(GRID_CODE_LENGTH):
            lat_val, row = divmod(lat_val, GRID_ROWS)
            lng_val, col = divmod(lng_val, GRID_COLUMNS)
            digits.append(digit_symbol(row * GRID_COLUMNS + col))
    else:
        lat_val //= GRID_ROWS**GRID_CODE_LENGTH
        lng_val //= GRID_COLUMNS**GRID_CODE_LENGTH

    for _ in range(PAIR_CODE_LENGTH // 2):
        lat_val, lat_digit = divmod(lat_val, ENCODING_BASE)
        lng_val, lng_digit = divmod(lng_val, ENCODING_BASE)
        digits.append(digit_symbol(lng_digit))
        digits.append(digit_symbol(lat_digit))

    code = "".join(reversed(digits))
    if code_length >= SEPARATOR_POSITION:
        return code[:SEPARATOR_POSITION] + SEPARATOR + code[SEPARATOR_POSITION:code_length]
    return code[:code_length] + PADDING_CHARACTER * (SEPARATOR_POSITION - code_length) + SEPARATOR
