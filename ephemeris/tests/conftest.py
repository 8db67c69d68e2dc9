"""Ephemeris test configuration."""

from __future__ import annotations

from datetime import UTC, date, datetime, time

import pytest
from astrocritics.schemas.ephemeris import RawChart, RawPosition
from astrocritics.schemas.reading import BirthInfo, BirthLocation
from ephemeris.natal import build_reading

# Ascendant at 0 Aries with equal houses puts each body in house floor(lon / 30) + 1
SAMPLE_POSITIONS = [
    ("Sun", 10.0, 1.0),
    ("Moon", 130.5, 13.2),
    ("Mercury", 355.0, -0.5),
    ("Venus", 70.0, 1.1),
    ("Mars", 100.0, 0.6),
    ("Jupiter", 250.0, 0.1),
    ("Saturn", 200.0, 0.05),
    ("Uranus", 285.0, 0.02),
    ("Neptune", 290.0, 0.01),
    ("Pluto", 230.0, 0.01),
    ("North Node", 45.0, -0.05),
]


@pytest.fixture
def raw_chart() -> RawChart:
    return RawChart(
        planets=[RawPosition(name=n, longitude=lon, speed=s) for n, lon, s in SAMPLE_POSITIONS],
        ascendant=0.0,
        midheaven=270.0,
        house_cusps=None,
        source="remote",
    )


@pytest.fixture
def birth_info() -> BirthInfo:
    return BirthInfo(
        birth_date=date(1990, 6, 15),
        birth_time=time(14, 30),
        location=BirthLocation(name="London", latitude=51.5074, longitude=-0.1278),
    )


@pytest.fixture
def reading(raw_chart, birth_info):
    return build_reading(
        raw_chart,
        birth_info,
        timezone="Europe/London",
        utc_offset_hours=1.0,
        birth_datetime_utc=datetime(1990, 6, 15, 13, 30, tzinfo=UTC),
    )
