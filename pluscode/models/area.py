"""Data model for a decoded code area.

A CodeArea is the rectangle of latitude/longitude a full code stands for,
together with the number of digits that produced it. It is the output of
``decode`` and the input to the shortening and recovery operations.
"""

from __future__ import annotations

from dataclasses import dataclass

from pluscode.core.constants import LATITUDE_MAX, LONGITUDE_MAX


@dataclass(frozen=True, slots=True)
class CodeArea:
    """The bounding box of a decoded code.

    All values are WGS 84 degrees.

    Attributes:
        latitude_lo: Southern edge (inclusive).
        longitude_lo: Western edge (inclusive).
        latitude_hi: Northern edge (exclusive).
        longitude_hi: Eastern edge (exclusive).
        code_length: Number of significant digits decoded.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int

    @property
    def latitude_center(self) -> float:
        """Latitude of the area center, never above the pole."""
        return min(self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2, LATITUDE_MAX)

    @property
    def longitude_center(self) -> float:
        """Longitude of the area center, never beyond the antimeridian."""
        return min(
            self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2, LONGITUDE_MAX
        )

    @property
    def center(self) -> tuple[float, float]:
        """Area center as ``(lat, lng)``."""
        return (self.latitude_center, self.longitude_center)

    def contains(self, latitude: float, longitude: float) -> bool:
        """Whether the point lies inside the area (south/west edges inclusive)."""
        return (
            self.latitude_lo <= latitude < self.latitude_hi
            and self.longitude_lo <= longitude < self.longitude_hi
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return {
            "latitude_lo": self.latitude_lo,
            "longitude_lo": self.longitude_lo,
            "latitude_hi": self.latitude_hi,
            "longitude_hi": self.longitude_hi,
            "code_length": self.code_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> CodeArea:
        """Deserialise from a plain dict.

        Raises:
            KeyError: If a bound or ``code_length`` is missing.
            TypeError: If a value is not numeric, or ``code_length`` is not
                an integer.
        """
        values = {}
        for key in ("latitude_lo", "longitude_lo", "latitude_hi", "longitude_hi"):
            raw = data[key]
            if not isinstance(raw, (int, float)) or isinstance(raw, bool):
                msg = f"{key} must be a number, got {type(raw).__name__}"
                raise TypeError(msg)
            values[key] = float(raw)

        code_length = data["code_length"]
        if not isinstance(code_length, int) or isinstance(code_length, bool):
            msg = f"code_length must be an integer, got {type(code_length).__name__}"
            raise TypeError(msg)

        return cls(code_length=code_length, **values)
