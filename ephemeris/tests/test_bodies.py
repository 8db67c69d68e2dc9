"""Tests for body parsing and the sign resolver."""

import math

import pytest
from ephemeris.bodies import (
    SIGN_ELEMENTS,
    AspectType,
    Body,
    Element,
    Sign,
    house_label,
    longitude_to_sign,
    normalize_longitude,
    ordinal,
    round_degrees,
)


def test_longitude_to_sign_boundaries():
    assert longitude_to_sign(0.0) == (Sign.ARIES, 0.0)
    assert longitude_to_sign(30.0) == (Sign.TAURUS, 0.0)
    assert longitude_to_sign(90.0) == (Sign.CANCER, 0.0)
    assert longitude_to_sign(180.0) == (Sign.LIBRA, 0.0)
    assert longitude_to_sign(270.0) == (Sign.CAPRICORN, 0.0)

    sign, degree = longitude_to_sign(29.99)
    assert sign is Sign.ARIES
    assert degree == pytest.approx(29.99)

    sign, degree = longitude_to_sign(359.99)
    assert sign is Sign.PISCES
    assert degree == pytest.approx(29.99)


def test_longitude_to_sign_rounds_degree_to_two_places():
    sign, degree = longitude_to_sign(45.5678)
    assert sign is Sign.TAURUS
    assert degree == 15.57


def test_longitude_to_sign_normalizes_out_of_range_input():
    assert longitude_to_sign(360.0) == (Sign.ARIES, 0.0)
    assert longitude_to_sign(390.0) == (Sign.TAURUS, 0.0)
    sign, degree = longitude_to_sign(-10.0)
    assert sign is Sign.PISCES
    assert degree == pytest.approx(20.0)


def test_longitude_to_sign_non_finite_resolves_to_aries():
    assert longitude_to_sign(math.nan) == (Sign.ARIES, 0.0)
    assert longitude_to_sign(math.inf) == (Sign.ARIES, 0.0)


def test_degree_always_within_sign():
    for tenth in range(0, 3600, 7):
        _, degree = longitude_to_sign(tenth / 10.0)
        assert 0.0 <= degree < 30.0
    for thousandth in range(29_990, 30_000):
        _, degree = longitude_to_sign(thousandth / 1000.0)
        assert 0.0 <= degree < 30.0


def test_longitude_to_sign_carries_rounded_degree_into_next_sign():
    assert longitude_to_sign(29.999) == (Sign.TAURUS, 0.0)
    assert longitude_to_sign(89.996) == (Sign.CANCER, 0.0)
    assert longitude_to_sign(359.999) == (Sign.ARIES, 0.0)
    # Just below the rounding threshold stays put
    assert longitude_to_sign(29.994) == (Sign.ARIES, 29.99)


def test_normalize_longitude_wraps_into_circle():
    assert normalize_longitude(370.0) == pytest.approx(10.0)
    assert normalize_longitude(-10.0) == pytest.approx(350.0)
    assert normalize_longitude(720.0) == 0.0
    assert normalize_longitude(-1e-20) == 0.0


def test_body_parse_accepts_upstream_spellings():
    assert Body.parse("Sun") is Body.SUN
    assert Body.parse("sun") is Body.SUN
    assert Body.parse("North Node") is Body.NORTH_NODE
    assert Body.parse("northNode") is Body.NORTH_NODE
    assert Body.parse("north_node") is Body.NORTH_NODE
    assert Body.parse("true_node") is Body.NORTH_NODE
    assert Body.parse(Body.PLUTO) is Body.PLUTO


def test_body_parse_rejects_unknown_names():
    assert Body.parse("Chiron") is None
    assert Body.parse("") is None
    assert Body.parse(None) is None


def test_body_key():
    assert Body.NORTH_NODE.key == "north_node"
    assert Body.SUN.key == "sun"


def test_sign_elements_cycle_fire_earth_air_water():
    assert SIGN_ELEMENTS[Sign.ARIES] is Element.FIRE
    assert SIGN_ELEMENTS[Sign.TAURUS] is Element.EARTH
    assert SIGN_ELEMENTS[Sign.GEMINI] is Element.AIR
    assert SIGN_ELEMENTS[Sign.CANCER] is Element.WATER
    assert SIGN_ELEMENTS[Sign.PISCES] is Element.WATER


def test_aspect_type_angle_and_orb():
    assert AspectType.OPPOSITION.angle == 180.0
    assert AspectType.SEXTILE.orb == 6.0
    assert AspectType.QUINCUNX.orb == 3.0


def test_house_labels():
    assert house_label(1) == "1st House (Self)"
    assert house_label(10) == "10th House (Career)"
    assert house_label(12) == "12th House (Spirituality)"
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12)] == ["1st", "2nd", "3rd", "4th", "11th", "12th"]


def test_round_degrees_rounds_half_away_from_zero():
    assert round_degrees(0.125) == 0.13
    assert round_degrees(-0.125) == -0.13
    assert round_degrees(1.004) == 1.0
