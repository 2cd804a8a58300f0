"""Inspection reports for code strings."""

from __future__ import annotations

from pluscode.codec._decoding import decode
from pluscode.codec._validation import check
from pluscode.core.constants import PADDING_CHARACTER, SEPARATOR, SEPARATOR_POSITION
from pluscode.core.exceptions import MalformedCodeError
from pluscode.models.report import AreaBounds, CodeReport


def describe(code: str) -> CodeReport:
    """Build a ``CodeReport`` for ``code``.

    Never raises for malformed input: the error is carried in the report
    instead, so the result is safe to collect over untrusted data.
    """
    try:
        check(code)
    except MalformedCodeError as exc:
        return CodeReport(code=code, error={k: str(v) for k, v in exc.to_error_dict().items()})

    normalized = code.upper()
    if code.find(SEPARATOR) < SEPARATOR_POSITION:
        return CodeReport(code=code, normalized=normalized, is_valid=True, is_short=True)

    area = decode(normalized)
    return CodeReport(
        code=code,
        normalized=normalized,
        is_valid=True,
        is_full=True,
        is_padded=PADDING_CHARACTER in code,
        area=AreaBounds(
            **area.to_dict(),
            latitude_center=area.latitude_center,
            longitude_center=area.longitude_center,
        ),
    )
