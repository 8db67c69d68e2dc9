"""Tests for the Photon geocoder."""

from __future__ import annotations

import httpx
import pytest
from astrocritics.services.collaborators import GeocodingError
from astrocritics.services.geocoding import PhotonGeocoder

LONDON = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [-0.1277653, 51.5074456]},
            "properties": {"name": "London", "type": "city"},
        }
    ],
}


async def test_resolve_coordinates_reads_geojson_lon_lat(recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json=LONDON))
    geocoder = PhotonGeocoder("https://photon.test/api", transport=transport)

    coords = await geocoder.resolve_coordinates("  London ")
    await geocoder.close()

    assert coords.latitude == pytest.approx(51.5074456)
    assert coords.longitude == pytest.approx(-0.1277653)
    params = transport.requests[-1].url.params
    assert params.get_list("layer") == ["city", "district"]
    assert params["q"] == "London"
    assert params["limit"] == "1"


async def test_resolve_coordinates_without_features_raises(recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json={"features": []}))
    geocoder = PhotonGeocoder("https://photon.test/api", transport=transport)

    with pytest.raises(GeocodingError, match="No results found for 'Atlantis'"):
        await geocoder.resolve_coordinates("Atlantis")


async def test_resolve_coordinates_upstream_failure_raises(recording_transport):
    transport = recording_transport(lambda request: httpx.Response(503, text="down"))
    geocoder = PhotonGeocoder("https://photon.test/api", transport=transport)

    with pytest.raises(GeocodingError, match="Failed to geocode location"):
        await geocoder.resolve_coordinates("London")


async def test_resolve_coordinates_empty_name_skips_request(recording_transport):
    transport = recording_transport(lambda request: httpx.Response(200, json=LONDON))
    geocoder = PhotonGeocoder("https://photon.test/api", transport=transport)

    with pytest.raises(GeocodingError):
        await geocoder.resolve_coordinates("   ")
    assert transport.requests == []


async def test_resolve_coordinates_malformed_geometry_raises(recording_transport):
    body = {"features": [{"geometry": {"coordinates": [-0.12]}}]}
    transport = recording_transport(lambda request: httpx.Response(200, json=body))
    geocoder = PhotonGeocoder("https://photon.test/api", transport=transport)

    with pytest.raises(GeocodingError, match="Could not extract coordinates"):
        await geocoder.resolve_coordinates("London")
