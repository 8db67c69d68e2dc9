"""API test configuration."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from unittest.mock import patch

import pytest
from api.dependencies import get_geocoder, get_llm_client, get_position_provider
from api.main import create_app
from astrocritics.config import reset_settings_cache
from astrocritics.schemas.ephemeris import RawChart, RawPosition
from astrocritics.schemas.reading import BirthInfo, BirthLocation, Coordinates
from ephemeris.natal import build_reading
from httpx import ASGITransport, AsyncClient

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


def sample_raw_chart() -> RawChart:
    return RawChart(
        planets=[RawPosition(name=n, longitude=lon, speed=s) for n, lon, s in SAMPLE_POSITIONS],
        ascendant=0.0,
        midheaven=270.0,
        source="fake",
    )


class FakeGeocoder:
    """Stand-in for the Photon geocoder."""

    def __init__(self, coords: Coordinates | None = None, error: Exception | None = None):
        self.coords = coords or Coordinates(latitude=51.5074, longitude=-0.1278)
        self.error = error
        self.queries: list[str] = []

    async def resolve_coordinates(self, place: str) -> Coordinates:
        self.queries.append(place)
        if self.error is not None:
            raise self.error
        return self.coords


class FakePositionProvider:
    name = "fake"

    def __init__(self, error: Exception | None = None, raw: RawChart | None = None):
        self.error = error
        self.raw = raw
        self.calls: list[tuple] = []

    async def compute_positions(self, moment_utc, latitude, longitude, house_system=None):
        self.calls.append((moment_utc, latitude, longitude, house_system))
        if self.error is not None:
            raise self.error
        return self.raw or sample_raw_chart()


class FakeLLM:
    def __init__(self, reply: str = "Mars says: act now.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple] = []

    async def complete_chat(self, system_prompt, user_message, history=None):
        self.calls.append((system_prompt, user_message, list(history or [])))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_PER_HOUR", "0")
    monkeypatch.setenv("CHAT_RATE_LIMIT_PER_HOUR", "0")
    monkeypatch.setenv("DEFAULT_TIMEZONE", "UTC")
    monkeypatch.setenv("HOUSE_SYSTEM", "placidus")
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def provider():
    return FakePositionProvider()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def london_timezone():
    with patch(
        "api.services.chart_service.resolve_birth_timezone",
        return_value=("Europe/London", False),
    ) as resolver:
        yield resolver


@pytest.fixture
def app(geocoder, provider, llm):
    a = create_app()
    a.dependency_overrides[get_geocoder] = lambda: geocoder
    a.dependency_overrides[get_position_provider] = lambda: provider
    a.dependency_overrides[get_llm_client] = lambda: llm
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_reading():
    birth_info = BirthInfo(
        birth_date=date(1990, 6, 15),
        birth_time=time(14, 30),
        location=BirthLocation(name="London", latitude=51.5074, longitude=-0.1278),
    )
    return build_reading(
        sample_raw_chart(),
        birth_info,
        timezone="Europe/London",
        utc_offset_hours=1.0,
        birth_datetime_utc=datetime(1990, 6, 15, 13, 30, tzinfo=UTC),
    )


@pytest.fixture
def reading_json(sample_reading):
    return sample_reading.model_dump(mode="json")
