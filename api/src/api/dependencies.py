"""FastAPI dependency injection."""

from __future__ import annotations

import logging

from astrocritics.config import get_settings
from astrocritics.services.astro_api import RemotePositionProvider
from astrocritics.services.collaborators import ChatCompleter, CoordinateResolver, PositionProvider
from astrocritics.services.geocoding import PhotonGeocoder
from astrocritics.services.llm_client import LLMClient, LLMConfig
from ephemeris.calculator import SwissEphemerisProvider
from fastapi import Request

logger = logging.getLogger(__name__)

# app.state attributes holding lazily created collaborators; closed in the lifespan
GEOCODER_STATE_KEY = "_geocoder"
POSITION_PROVIDER_STATE_KEY = "_position_provider"
LLM_CLIENT_STATE_KEY = "_llm_client"
COLLABORATOR_STATE_KEYS = (GEOCODER_STATE_KEY, POSITION_PROVIDER_STATE_KEY, LLM_CLIENT_STATE_KEY)


def _build_position_provider() -> PositionProvider:
    settings = get_settings()
    provider = settings.position_provider.strip().lower()
    if provider == "remote":
        return RemotePositionProvider(settings.astro_api_url, timeout=settings.http_timeout_seconds)
    if provider != "swisseph":
        logger.warning("Unknown POSITION_PROVIDER %r; using swisseph", settings.position_provider)
    return SwissEphemerisProvider(
        ephe_path=settings.swisseph_ephe_path or None,
        house_system=settings.house_system,
    )


def get_geocoder(request: Request) -> CoordinateResolver:
    geocoder = getattr(request.app.state, GEOCODER_STATE_KEY, None)
    if geocoder is None:
        settings = get_settings()
        geocoder = PhotonGeocoder(settings.geocoder_url, timeout=settings.http_timeout_seconds)
        setattr(request.app.state, GEOCODER_STATE_KEY, geocoder)
    return geocoder


def get_position_provider(request: Request) -> PositionProvider:
    provider = getattr(request.app.state, POSITION_PROVIDER_STATE_KEY, None)
    if provider is None:
        provider = _build_position_provider()
        logger.info("Using %s position provider", provider.name)
        setattr(request.app.state, POSITION_PROVIDER_STATE_KEY, provider)
    return provider


def get_llm_client(request: Request) -> ChatCompleter:
    client = getattr(request.app.state, LLM_CLIENT_STATE_KEY, None)
    if client is None:
        settings = get_settings()
        client = LLMClient(LLMConfig.from_settings(settings), timeout=settings.http_timeout_seconds)
        setattr(request.app.state, LLM_CLIENT_STATE_KEY, client)
    return client
