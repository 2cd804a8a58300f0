"""Shortening full codes against a reference location, and recovering them.

A full code can drop 4, 6 or 8 leading digits when the reference point
is close enough to the code's center that the dropped prefix can be
regenerated from the reference alone. Recovery rebuilds the prefix from
the reference and then checks the neighbouring prefixes, since the
reference may sit across a cell edge from the original code.
"""

from __future__ import annotations

import logging
import math

from pluscode.codec._decoding import decode
from pluscode.codec._encoding import clip_latitude, encode, normalize_longitude
from pluscode.codec._validation import check
from pluscode.core.constants import (
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_SHORTEN_SAFETY_FACTOR,
    MIN_TRIMMABLE_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
    SHORTEN_REMOVAL_SIZES,
    SHORTEN_SAFETY_FACTOR,
)
from pluscode.core.exceptions import (
    CodeClassError,
    InvalidCodeError,
    PlusCodeError,
    RecoveryError,
    UnsupportedParameterError,
)

logger = logging.getLogger("pluscode.codec.shortening")

# Latitude/longitude steps (in cells) tried around the naive candidate.
_NEIGHBOUR_SHIFTS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


def _prefix_resolution(prefix_length: int) -> float:
    """Cell size in degrees of a prefix of ``prefix_length`` digits."""
    return PAIR_RESOLUTIONS[prefix_length // 2 - 1]


def _longitude_delta(a: float, b: float) -> float:
    """Difference ``a - b`` wrapped into ``[-180, 180)``."""
    return (a - b + LONGITUDE_MAX) % (2 * LONGITUDE_MAX) - LONGITUDE_MAX


def shorten(
    code: str,
    latitude: float,
    longitude: float,
    *,
    safety_factor: float = SHORTEN_SAFETY_FACTOR,
) -> str:
    """Remove as many leading digits as the reference location allows.

    Args:
        code: A valid, full, unpadded code.
        latitude: Reference latitude in degrees.
        longitude: Reference longitude in degrees.
        safety_factor: Fraction of the removed prefix's cell size the
            reference may lie from the code center on either axis.
            Must be greater than 0 and at most 0.5.

    Returns:
        The short code, or the upper-cased full code when the reference
        is too far away for any prefix to be removed.

    Raises:
        InvalidCodeError: If the code is malformed.
        CodeClassError: If the code is short, padded, or too short to trim.
        UnsupportedParameterError: If ``safety_factor`` is out of range.
    """
    if not 0.0 < safety_factor <= MAX_SHORTEN_SAFETY_FACTOR:
        msg = (
            f"Safety factor {safety_factor!r} must be greater than 0 "
            f"and at most {MAX_SHORTEN_SAFETY_FACTOR}"
        )
        raise UnsupportedParameterError(msg, operation="shorten", rule="SAFETY_FACTOR")

    try:
        check(code)
    except InvalidCodeError as exc:
        raise InvalidCodeError(exc.message, operation="shorten", rule=exc.rule) from exc
    if code.find(SEPARATOR) < SEPARATOR_POSITION:
        msg = f"Cannot shorten {code!r}: already a short code"
        raise CodeClassError(msg, operation="shorten", rule="SHORT_CODE")
    if PADDING_CHARACTER in code:
        msg = f"Cannot shorten {code!r}: padded codes cannot be shortened"
        raise CodeClassError(msg, operation="shorten", rule="PADDED_CODE")

    code = code.upper()
    area = decode(code)
    if area.code_length < MIN_TRIMMABLE_CODE_LENGTH:
        msg = f"Cannot shorten {code!r}: needs at least {MIN_TRIMMABLE_CODE_LENGTH} digits"
        raise CodeClassError(msg, operation="shorten", rule="TOO_SHORT")

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    distance = max(
        abs(area.latitude_center - latitude),
        abs(_longitude_delta(area.longitude_center, longitude)),
    )

    for removed in SHORTEN_REMOVAL_SIZES:
        # A short code keeps at least one digit.
        if removed >= area.code_length:
            continue
        if distance < _prefix_resolution(removed) * safety_factor:
            logger.debug("Shortened %s to %s (removed %d digits)", code, code[removed:], removed)
            return code[removed:]

    logger.debug("Reference too far from %s to shorten (%.6f deg)", code, distance)
    return code


def recover_nearest(code: str, latitude: float, longitude: float) -> str:
    """Recover the full code nearest the reference location.

    Full codes are returned upper-cased. For a short code, the missing
    prefix is taken from the reference location, then the cells one
    prefix-step away in latitude and/or longitude are compared and the
    candidate whose center is closest to the reference wins. Ties go to
    the candidate needing fewer steps, then to the lexicographically
    smaller code.

    Args:
        code: A valid short or full code.
        latitude: Reference latitude in degrees.
        longitude: Reference longitude in degrees.

    Returns:
        The recovered full code.

    Raises:
        InvalidCodeError: If the code is malformed.
        RecoveryError: If no candidate is a valid full code.
    """
    try:
        check(code)
    except InvalidCodeError as exc:
        raise InvalidCodeError(exc.message, operation="recover_nearest", rule=exc.rule) from exc

    code = code.upper()
    separator = code.find(SEPARATOR)
    if separator == SEPARATOR_POSITION:
        return code

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)

    prefix_length = SEPARATOR_POSITION - separator
    resolution = _prefix_resolution(prefix_length)
    naive = decode(encode(latitude, longitude)[:prefix_length] + code)

    candidates: list[tuple[float, int, str]] = []
    for lat_step, lng_step in _NEIGHBOUR_SHIFTS:
        center_lat = naive.latitude_center + lat_step * resolution
        if not -LATITUDE_MAX <= center_lat <= LATITUDE_MAX:
            continue
        center_lng = naive.longitude_center + lng_step * resolution
        try:
            candidate = encode(center_lat, center_lng, naive.code_length)
            area = decode(candidate)
        except PlusCodeError as exc:
            logger.debug("Skipping recovery candidate for %s: %s", code, exc)
            continue
        distance = math.hypot(
            area.latitude_center - latitude,
            _longitude_delta(area.longitude_center, longitude),
        )
        candidates.append((distance, abs(lat_step) + abs(lng_step), candidate))

    if not candidates:
        msg = f"No valid full code recovered from {code!r} near ({latitude}, {longitude})"
        raise RecoveryError(msg)

    _, steps, recovered = min(candidates)
    logger.debug("Recovered %s as %s (%d step(s) from naive prefix)", code, recovered, steps)
    return recovered
