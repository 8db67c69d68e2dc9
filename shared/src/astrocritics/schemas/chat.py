"""Pydantic schemas for planetary chat and chart commentary."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from ephemeris.bodies import Body, Element, Sign
from pydantic import BaseModel, Field

from astrocritics.schemas.reading import AstrologyReading


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """A raw completion request with a caller-built system prompt."""

    system_prompt: str = Field(min_length=1)
    user_message: str = Field(min_length=1, max_length=4000)
    conversation_history: list[ChatTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    response: str


class PlanetChatRequest(BaseModel):
    """A question put to one planet's persona about a computed reading."""

    reading: AstrologyReading
    planet: str = Field(min_length=1, max_length=40)
    question: str = Field(min_length=1, max_length=4000)
    conversation_history: list[ChatTurn] = Field(default_factory=list)


class PlanetChatResponse(BaseModel):
    planet: Body
    character: str
    response: str


class PlanetaryCharacter(BaseModel):
    """A planet personified for chat."""

    name: str
    body: Body
    sign: Sign
    element: Element
    personality: str
    tarot_card: str
    color: str
    emoji: str


class CharactersRequest(BaseModel):
    reading: AstrologyReading


class CharactersResponse(BaseModel):
    characters: dict[str, PlanetaryCharacter]


class Explanation(BaseModel):
    id: str
    title: str
    content: str


class ExplanationsRequest(BaseModel):
    reading: AstrologyReading


class ExplanationsResponse(BaseModel):
    explanations: list[Explanation]
    timestamp: datetime
