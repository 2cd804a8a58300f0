"""Batch helpers over iterables of points and codes.

Each helper applies one codec operation across its input. Helpers that
accept untrusted codes degrade per item: one bad code is logged and
reported in place, it never aborts the rest of the batch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pluscode.codec import describe, encode, recover_nearest, shorten, validate_code_length
from pluscode.core.config import CodecConfig
from pluscode.core.exceptions import PlusCodeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pluscode.models.report import CodeReport

logger = logging.getLogger("pluscode.utils.batch")


def encode_points(
    points: Iterable[tuple[float, float]],
    *,
    code_length: int | None = None,
    config: CodecConfig | None = None,
) -> list[str]:
    """Encode ``(lat, lng)`` points.

    Args:
        points: Coordinates as ``(latitude, longitude)`` tuples.
        code_length: Digits per code; defaults to
            ``config.default_code_length``.
        config: Codec defaults (``CodecConfig()`` when omitted).

    Raises:
        UnsupportedLengthError: If the length is not supported. Checked
            before any point is encoded.
    """
    config = config or CodecConfig()
    length = config.default_code_length if code_length is None else code_length
    validate_code_length(length)
    codes = [encode(latitude, longitude, length) for latitude, longitude in points]
    logger.info("Encoded %d point(s) at length %d", len(codes), length)
    return codes


def describe_codes(codes: Iterable[str]) -> list[CodeReport]:
    """Build an inspection report for every code, valid or not."""
    reports = [describe(code) for code in codes]
    invalid = sum(1 for report in reports if not report.is_valid)
    if invalid:
        logger.warning("%d of %d code(s) failed validation", invalid, len(reports))
    logger.info("Described %d code(s)", len(reports))
    return reports


def shorten_codes(
    codes: Iterable[str],
    latitude: float,
    longitude: float,
    *,
    config: CodecConfig | None = None,
) -> list[str | None]:
    """Shorten every code against one reference location.

    Returns:
        One entry per input: the shortened code, or ``None`` where the
        code could not be shortened (malformed, short, or padded).
    """
    config = config or CodecConfig()
    results: list[str | None] = []
    for code in codes:
        try:
            results.append(
                shorten(code, latitude, longitude, safety_factor=config.shorten_safety_factor)
            )
        except PlusCodeError as exc:
            logger.warning("Cannot shorten %r: %s", code, exc)
            results.append(None)
    return results


def recover_codes(codes: Iterable[str], latitude: float, longitude: float) -> list[str | None]:
    """Recover every short code against one reference location.

    Returns:
        One entry per input: the full code, or ``None`` where the input
        was malformed.
    """
    results: list[str | None] = []
    for code in codes:
        try:
            results.append(recover_nearest(code, latitude, longitude))
        except PlusCodeError as exc:
            logger.warning("Cannot recover %r: %s", code, exc)
            results.append(None)
    return results
