"""Shared package test configuration."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime, time

import httpx
import pytest
from astrocritics.schemas.ephemeris import RawChart, RawPosition
from astrocritics.schemas.reading import BirthInfo, BirthLocation
from ephemeris.natal import build_reading


@pytest.fixture
def sample_reading():
    """Reading with the Sun and Moon in trine and Mercury retrograde."""
    positions = [
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
    raw = RawChart(
        planets=[RawPosition(name=n, longitude=lon, speed=s) for n, lon, s in positions],
        ascendant=0.0,
        midheaven=270.0,
        source="remote",
    )
    birth_info = BirthInfo(
        birth_date=date(1990, 6, 15),
        birth_time=time(14, 30),
        location=BirthLocation(name="London", latitude=51.5074, longitude=-0.1278),
    )
    return build_reading(
        raw,
        birth_info,
        timezone="Europe/London",
        utc_offset_hours=1.0,
        birth_datetime_utc=datetime(1990, 6, 15, 13, 30, tzinfo=UTC),
    )


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it answered."""

    def __init__(self, responder):
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(_handler)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_transport():
    return RecordingTransport
