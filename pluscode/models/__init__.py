"""Data models and schemas.

- CodeArea: Decoded bounding box of a full code
- CodeReport: Pydantic inspection report for a code string
"""

from pluscode.models.area import CodeArea
from pluscode.models.report import AreaBounds, CodeReport

__all__ = [
    "AreaBounds",
    "CodeArea",
    "CodeReport",
]
