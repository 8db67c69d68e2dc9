"""Tests for the Swiss Ephemeris position provider."""

from __future__ import annotations

from datetime import UTC, datetime

import ephemeris.calculator as calculator
import pytest
from astrocritics.services.collaborators import EphemerisError
from ephemeris.bodies import BODY_IDS, Body

MOMENT = datetime(1990, 6, 15, 13, 30, tzinfo=UTC)


class FakeSwe:
    FLG_SWIEPH = 2
    FLG_MOSEPH = 4
    FLG_SPEED = 256

    def __init__(self, *, fail_swiss=(), fail_all=(), fail_houses=False):
        self.fail_swiss = set(fail_swiss)
        self.fail_all = set(fail_all)
        self.fail_houses = fail_houses
        self.house_calls: list[bytes] = []
        self.ephe_path = "unset"

    def set_ephe_path(self, path):
        self.ephe_path = path

    def julday(self, year, month, day, hour):
        return 2448000.5 + hour / 24.0

    def calc_ut(self, jd, body_id, flags):
        if body_id in self.fail_all:
            raise RuntimeError("no ephemeris")
        if flags & self.FLG_SWIEPH and body_id in self.fail_swiss:
            raise RuntimeError("missing se1 file")
        speed = -0.2 if body_id == BODY_IDS[Body.MERCURY] else 1.0
        return (body_id * 30.0 + 5.0, 0.0, 1.0, speed, 0.0, 0.0), flags

    def houses_ex(self, jd, lat, lon, hsys):
        self.house_calls.append(hsys)
        if self.fail_houses and hsys != b"E":
            raise RuntimeError("polar latitude")
        cusps = tuple((15.0 + 30.0 * i) % 360.0 for i in range(12))
        return cusps, (15.0, 285.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@pytest.fixture
def fake_swe(monkeypatch):
    fake = FakeSwe()
    monkeypatch.setattr(calculator, "swe", fake)
    return fake


async def test_compute_positions_returns_all_bodies_and_cusps(fake_swe):
    provider = calculator.SwissEphemerisProvider(ephe_path="/data/ephe")
    raw = await provider.compute_positions(MOMENT, 51.5, -0.12)

    assert fake_swe.ephe_path == "/data/ephe"
    assert [p.name for p in raw.planets] == [b.value for b in Body]
    assert raw.planets[0].longitude == 5.0
    mercury = next(p for p in raw.planets if p.name == "Mercury")
    assert mercury.speed == -0.2
    assert raw.house_cusps[0] == 15.0
    assert len(raw.house_cusps) == 12
    assert raw.ascendant == 15.0
    assert raw.midheaven == 285.0
    assert raw.source == "swisseph"
    assert fake_swe.house_calls == [b"P"]


async def test_compute_positions_uses_requested_house_system(fake_swe):
    provider = calculator.SwissEphemerisProvider(ephe_path="")
    await provider.compute_positions(MOMENT, 51.5, -0.12, house_system="whole_sign")
    assert fake_swe.house_calls == [b"W"]
    assert fake_swe.ephe_path is None


async def test_compute_positions_falls_back_to_moshier(monkeypatch):
    fake = FakeSwe(fail_swiss=set(BODY_IDS.values()))
    monkeypatch.setattr(calculator, "swe", fake)

    raw = await calculator.SwissEphemerisProvider(ephe_path="").compute_positions(MOMENT, 0.0, 0.0)
    assert len(raw.planets) == len(Body)
    assert raw.source == "moshier"


async def test_compute_positions_skips_unavailable_body(monkeypatch):
    fake = FakeSwe(fail_all={BODY_IDS[Body.PLUTO]})
    monkeypatch.setattr(calculator, "swe", fake)

    raw = await calculator.SwissEphemerisProvider(ephe_path="").compute_positions(MOMENT, 0.0, 0.0)
    assert "Pluto" not in [p.name for p in raw.planets]
    assert any("Pluto" in w for w in raw.warnings)


async def test_compute_positions_without_any_body_raises(monkeypatch):
    fake = FakeSwe(fail_all=set(BODY_IDS.values()))
    monkeypatch.setattr(calculator, "swe", fake)

    with pytest.raises(EphemerisError):
        await calculator.SwissEphemerisProvider(ephe_path="").compute_positions(MOMENT, 0.0, 0.0)


async def test_compute_positions_drops_cusps_when_houses_fail(monkeypatch):
    fake = FakeSwe(fail_houses=True)
    monkeypatch.setattr(calculator, "swe", fake)

    raw = await calculator.SwissEphemerisProvider(ephe_path="").compute_positions(MOMENT, 80.0, 0.0)
    assert raw.house_cusps is None
    assert raw.ascendant == 15.0
    assert fake.house_calls == [b"P", b"E"]
    assert any("equal houses" in w for w in raw.warnings)


def test_unknown_default_house_system_becomes_placidus(fake_swe):
    provider = calculator.SwissEphemerisProvider(ephe_path="", house_system="topocentric")
    assert provider.house_system == "placidus"
