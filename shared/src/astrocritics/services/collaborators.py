"""Interfaces and failures of the external services a chart request depends on."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from astrocritics.schemas.chat import ChatTurn
from astrocritics.schemas.ephemeris import RawChart
from astrocritics.schemas.reading import Coordinates


class UpstreamError(RuntimeError):
    """An external collaborator was unavailable or returned unusable data."""


class GeocodingError(UpstreamError):
    pass


class EphemerisError(UpstreamError):
    pass


class LLMRequestError(UpstreamError):
    pass


class LLMNotConfiguredError(RuntimeError):
    """No API key is configured for the completion endpoint."""


class CoordinateResolver(Protocol):
    async def resolve_coordinates(self, place: str) -> Coordinates: ...


class PositionProvider(Protocol):
    name: str

    async def compute_positions(
        self,
        moment_utc: datetime,
        latitude: float,
        longitude: float,
        house_system: str | None = None,
    ) -> RawChart: ...


class ChatCompleter(Protocol):
    async def complete_chat(
        self,
        system_prompt: str,
        user_message: str,
        history: list[ChatTurn] | None = None,
    ) -> str: ...
