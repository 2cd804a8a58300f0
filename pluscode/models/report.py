"""Pydantic schema for a code inspection report.

``describe`` produces one ``CodeReport`` per code: its validity class,
the decoded area for full codes, and the structured error for invalid
ones. Reports serialise with ``model_dump()`` / ``model_dump_json()``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Schema version for forward compatibility
SCHEMA_VERSION = "pluscode-report-v1"


class AreaBounds(BaseModel):
    """Decoded area of a full code.

    Attributes:
        latitude_lo: Southern edge in degrees.
        longitude_lo: Western edge in degrees.
        latitude_hi: Northern edge in degrees.
        longitude_hi: Eastern edge in degrees.
        latitude_center: Center latitude in degrees.
        longitude_center: Center longitude in degrees.
        code_length: Number of significant digits decoded.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    latitude_center: float
    longitude_center: float
    code_length: int


class CodeReport(BaseModel):
    """Inspection result for a single code string.

    Attributes:
        schema_version: Report schema identifier.
        code: The code as given.
        normalized: Upper-cased code (empty when invalid).
        is_valid: Whether the code passed ``check``.
        is_short: Whether the code is a valid short code.
        is_full: Whether the code is a valid full code.
        is_padded: Whether the code carries padding characters.
        area: Decoded area, present for full codes only.
        error: Structured error payload, present for invalid codes only.
    """

    schema_version: str = SCHEMA_VERSION
    code: str
    normalized: str = ""
    is_valid: bool = False
    is_short: bool = False
    is_full: bool = False
    is_padded: bool = False
    area: AreaBounds | None = None
    error: dict[str, str] = Field(default_factory=dict)
