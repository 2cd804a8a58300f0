"""Tests for shortening full codes and recovering them.

Covers:
- Removal of 8, 6 and 4 leading digits depending on reference distance
- Codes that cannot be shortened (too far, padded, short, malformed)
- Recovery across latitude cell edges, the antimeridian and the poles
- Shorten → recover returns the original code
"""

from __future__ import annotations

import logging

import pytest

from pluscode.codec import encode, recover_nearest, shorten
from pluscode.core.exceptions import CodeClassError, InvalidCodeError, UnsupportedParameterError

CODE = "9C3W9QCJ+2VX"
CENTER_LAT = 51.3701125
CENTER_LNG = -1.217765625

# (reference lat, reference lng, expected short code)
SHORTEN_VECTORS = [
    (CENTER_LAT, CENTER_LNG, "+2VX"),
    (CENTER_LAT + 0.000755, CENTER_LNG, "CJ+2VX"),
    (CENTER_LAT - 0.000755, CENTER_LNG, "CJ+2VX"),
    (CENTER_LAT, CENTER_LNG - 0.000755, "CJ+2VX"),
    (CENTER_LAT, CENTER_LNG + 0.000755, "CJ+2VX"),
    (CENTER_LAT + 0.0149, CENTER_LNG, "CJ+2VX"),
    (CENTER_LAT + 0.0151, CENTER_LNG, "9QCJ+2VX"),
    (CENTER_LAT + 0.299, CENTER_LNG, "9QCJ+2VX"),
    (CENTER_LAT, CENTER_LNG - 0.299, "9QCJ+2VX"),
    (CENTER_LAT + 0.301, CENTER_LNG, CODE),
    (CENTER_LAT, CENTER_LNG + 5.0, CODE),
]


class TestShorten:
    """shorten() removal sizes."""

    @pytest.mark.parametrize(("lat", "lng", "short"), SHORTEN_VECTORS)
    def test_shorten(self, lat: float, lng: float, short: str) -> None:
        assert shorten(CODE, lat, lng) == short

    @pytest.mark.parametrize(("lat", "lng", "short"), SHORTEN_VECTORS)
    def test_recover_shortened(self, lat: float, lng: float, short: str) -> None:
        assert recover_nearest(short, lat, lng) == CODE

    def test_lower_case_input(self) -> None:
        assert shorten(CODE.lower(), CENTER_LAT, CENTER_LNG) == "+2VX"

    def test_reference_longitude_is_normalised(self) -> None:
        assert shorten(CODE, CENTER_LAT, CENTER_LNG + 360.0) == "+2VX"

    def test_wider_safety_factor_removes_more(self) -> None:
        lat = CENTER_LAT + 0.000755
        assert shorten(CODE, lat, CENTER_LNG, safety_factor=0.5) == "+2VX"

    def test_eight_digit_code_keeps_digits(self) -> None:
        assert shorten("9C3W9QCJ+", CENTER_LAT, CENTER_LNG) == "CJ+"

    def test_shortens_against_reference_across_antimeridian(self) -> None:
        # 6VGXGX2X+2X is centered at (0.5000625, 179.9998125).
        code = encode(0.5000625, 179.9999375)
        assert code == "6VGXGX2X+2X"
        short = shorten(code, 0.5000625, -179.9999)
        assert short == "+2X"
        assert recover_nearest(short, 0.5000625, -179.9999) == code

    def test_logs_decision(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pluscode.codec.shortening"):
            shorten(CODE, CENTER_LAT, CENTER_LNG)
        assert "removed 8 digits" in caplog.text


class TestShortenErrors:
    """Codes that shorten() refuses."""

    def test_short_code(self) -> None:
        with pytest.raises(CodeClassError) as excinfo:
            shorten("9QCJ+2VX", CENTER_LAT, CENTER_LNG)
        assert excinfo.value.rule == "SHORT_CODE"
        assert excinfo.value.operation == "shorten"

    def test_padded_code(self) -> None:
        with pytest.raises(CodeClassError) as excinfo:
            shorten("9C3W0000+", CENTER_LAT, CENTER_LNG)
        assert excinfo.value.rule == "PADDED_CODE"

    def test_malformed_code(self) -> None:
        with pytest.raises(InvalidCodeError) as excinfo:
            shorten("9C3W9QCJ+2", CENTER_LAT, CENTER_LNG)
        assert excinfo.value.operation == "shorten"
        assert excinfo.value.rule == "SINGLE_GRID_DIGIT"

    @pytest.mark.parametrize("safety_factor", [0.0, -0.3, 0.51, 1.0])
    def test_safety_factor_out_of_range(self, safety_factor: float) -> None:
        with pytest.raises(UnsupportedParameterError) as excinfo:
            shorten(CODE, CENTER_LAT + 0.0015, CENTER_LNG, safety_factor=safety_factor)
        assert excinfo.value.rule == "SAFETY_FACTOR"
        assert excinfo.value.operation == "shorten"
        assert excinfo.value.category == "parameter"

    def test_largest_safety_factor_still_recovers(self) -> None:
        lat = CENTER_LAT + 0.0012
        short = shorten(CODE, lat, CENTER_LNG, safety_factor=0.5)
        assert short == "+2VX"
        assert recover_nearest(short, lat, CENTER_LNG) == CODE


# ---------------------------------------------------------------------------
# Recovery
# ---------------------------------------------------------------------------


class TestRecoverNearest:
    """recover_nearest() candidate selection."""

    def test_full_code_returned_upper_case(self) -> None:
        assert recover_nearest("8fwc2345+g6", 0.0, 0.0) == "8FWC2345+G6"

    def test_padded_full_code_returned(self) -> None:
        assert recover_nearest("8FWC0000+", 0.0, 0.0) == "8FWC0000+"

    def test_reference_across_latitude_edge(self) -> None:
        # Reference sits in the 1-degree cell south of the code.
        assert recover_nearest("9QCJ+2VX", 50.9, -1.2) == CODE

    def test_reference_across_antimeridian(self) -> None:
        assert recover_nearest("G226+22", 0.5, 179.9) == "62G2G226+22"

    def test_reference_near_pole(self) -> None:
        assert recover_nearest("X3X2X2+X2", 89.5, 1.5) == "CFX3X2X2+X2"

    def test_reference_beyond_pole_is_clipped(self) -> None:
        assert recover_nearest("X3X2X2+X2", 95.0, 1.5) == "CFX3X2X2+X2"

    def test_short_code_without_suffix(self) -> None:
        assert recover_nearest("9QCJ+", CENTER_LAT, CENTER_LNG) == "9C3W9QCJ+"

    def test_malformed(self) -> None:
        with pytest.raises(InvalidCodeError) as excinfo:
            recover_nearest("9QCJ+2", CENTER_LAT, CENTER_LNG)
        assert excinfo.value.operation == "recover_nearest"


# ---------------------------------------------------------------------------
# Shorten → recover
# ---------------------------------------------------------------------------

PROPERTY_POINTS = [
    (47.3655913, 8.5249967),
    (-33.8688197, 151.2092955),
    (0.0000001, 0.0000001),
    (89.9999, 1.0),
    (-41.2730625, 174.7859375),
    (1.0, 179.95),
]

REFERENCE_OFFSETS = [
    (0.0, 0.0),
    (0.0007, -0.0007),
    (-0.01, 0.014),
    (0.2, -0.29),
    (-0.29, 0.2),
    (3.0, 3.0),
]


class TestShortenRecoverInverse:
    """recover_nearest(shorten(c, ref), ref) == c."""

    @pytest.mark.parametrize("length", [8, 10, 11, 15])
    @pytest.mark.parametrize(("d_lat", "d_lng"), REFERENCE_OFFSETS)
    @pytest.mark.parametrize(("lat", "lng"), PROPERTY_POINTS)
    def test_inverse(
        self, lat: float, lng: float, d_lat: float, d_lng: float, length: int
    ) -> None:
        code = encode(lat, lng, length)
        ref_lat, ref_lng = lat + d_lat, lng + d_lng
        assert recover_nearest(shorten(code, ref_lat, ref_lng), ref_lat, ref_lng) == code
