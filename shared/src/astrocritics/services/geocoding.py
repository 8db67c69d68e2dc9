"""Place-name geocoding against a Photon-compatible API."""

from __future__ import annotations

import logging

import httpx

from astrocritics.schemas.reading import Coordinates
from astrocritics.services.collaborators import GeocodingError

logger = logging.getLogger(__name__)


class PhotonGeocoder:
    """Resolves a place name to coordinates using the first city/district match."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def resolve_coordinates(self, place: str) -> Coordinates:
        query = place.strip()
        if not query:
            raise GeocodingError("Location name is empty")

        params = [("layer", "city"), ("layer", "district"), ("q", query), ("limit", "1")]
        logger.info("Geocoding %r", query)
        try:
            response = await self._client.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Geocoding error for %r: %s", query, exc)
            raise GeocodingError("Failed to geocode location") from exc

        features = data.get("features") if isinstance(data, dict) else None
        if not features:
            logger.warning("No geocoding results found for %r", query)
            raise GeocodingError(f"No results found for '{query}'")

        try:
            # GeoJSON coordinates are [longitude, latitude]
            lon, lat = features[0]["geometry"]["coordinates"][:2]
            return Coordinates(latitude=float(lat), longitude=float(lon))
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise GeocodingError(f"Could not extract coordinates for '{query}'") from exc

    async def close(self) -> None:
        await self._client.aclose()
