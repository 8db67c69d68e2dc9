"""Planetary personas for a reading."""

from __future__ import annotations

from astrocritics.schemas.chat import CharactersRequest, CharactersResponse
from astrocritics.services.characters import create_planetary_characters
from fastapi import APIRouter

router = APIRouter()


@router.post("", response_model=CharactersResponse)
async def list_characters(req: CharactersRequest):
    return CharactersResponse(characters=create_planetary_characters(req.reading))
