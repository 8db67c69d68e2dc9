"""Position provider backed by a remote positions HTTP API."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

import httpx

from astrocritics.schemas.ephemeris import RawChart, RawPosition
from astrocritics.services.collaborators import EphemerisError

logger = logging.getLogger(__name__)


class RemotePositionProvider:
    """Fetches planets, ascendant and midheaven; the API supplies no house cusps."""

    name = "remote"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def compute_positions(
        self,
        moment_utc: datetime,
        latitude: float,
        longitude: float,
        house_system: str | None = None,
    ) -> RawChart:
        utc = moment_utc.astimezone(UTC)
        params = {
            "date": utc.strftime("%Y-%m-%d"),
            "time": utc.strftime("%H:%M:%S"),
            "lat": f"{latitude}",
            "lng": f"{longitude}",
        }
        logger.info("Requesting positions from %s for %s", self.base_url, utc.isoformat())
        try:
            response = await self._client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Positions API error: %s", exc)
            raise EphemerisError("Failed to get astrological data") from exc

        if not isinstance(data, dict) or not data.get("planets"):
            raise EphemerisError("Positions API returned no planets")

        try:
            planets = [
                RawPosition(name=p["name"], longitude=p["longitude"], speed=p.get("speed"))
                for p in data["planets"]
            ]
            ascendant = float(data["ascendant"])
            midheaven = float(data["midheaven"])
        except (KeyError, TypeError, ValueError) as exc:
            raise EphemerisError(f"Malformed positions payload: {exc}") from exc
        if not (math.isfinite(ascendant) and math.isfinite(midheaven)):
            raise EphemerisError(
                f"Malformed positions payload: non-finite angles (asc={ascendant}, mc={midheaven})"
            )

        warnings = []
        if house_system and house_system != "equal":
            warnings.append(f"house system '{house_system}' unsupported by remote provider, using equal houses")
        return RawChart(
            planets=planets,
            ascendant=ascendant,
            midheaven=midheaven,
            house_cusps=None,
            source=self.name,
            warnings=warnings,
        )

    async def close(self) -> None:
        await self._client.aclose()
