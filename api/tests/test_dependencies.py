"""Tests for collaborator wiring."""

from __future__ import annotations

from types import SimpleNamespace

from api.dependencies import get_geocoder, get_llm_client, get_position_provider
from api.main import create_app
from astrocritics.config import reset_settings_cache
from astrocritics.services.astro_api import RemotePositionProvider
from astrocritics.services.geocoding import PhotonGeocoder
from astrocritics.services.llm_client import LLMClient
from ephemeris.calculator import SwissEphemerisProvider


def _request():
    return SimpleNamespace(app=create_app())


async def test_remote_position_provider_selected_by_settings(monkeypatch):
    monkeypatch.setenv("POSITION_PROVIDER", "remote")
    monkeypatch.setenv("ASTRO_API_URL", "https://astro.test/positions")
    reset_settings_cache()
    request = _request()

    provider = get_position_provider(request)
    assert isinstance(provider, RemotePositionProvider)
    assert provider.base_url == "https://astro.test/positions"
    # Created once per application
    assert get_position_provider(request) is provider
    await provider.close()


def test_swisseph_is_the_default_provider(monkeypatch):
    monkeypatch.delenv("POSITION_PROVIDER", raising=False)
    monkeypatch.setenv("HOUSE_SYSTEM", "koch")
    reset_settings_cache()

    provider = get_position_provider(_request())
    assert isinstance(provider, SwissEphemerisProvider)
    assert provider.house_system == "koch"


async def test_geocoder_and_llm_client_are_cached_on_app_state(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    reset_settings_cache()
    request = _request()

    geocoder = get_geocoder(request)
    llm = get_llm_client(request)
    assert isinstance(geocoder, PhotonGeocoder)
    assert isinstance(llm, LLMClient)
    assert llm.configured is True
    assert get_geocoder(request) is geocoder
    assert get_llm_client(request) is llm
    await geocoder.close()
    await llm.close()
