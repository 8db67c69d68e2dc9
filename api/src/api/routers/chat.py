"""Chat completions, raw and through a planet's persona."""

from __future__ import annotations

import logging

from astrocritics.schemas.chat import ChatRequest, ChatResponse, PlanetChatRequest, PlanetChatResponse
from astrocritics.services.characters import build_system_prompt, create_character
from astrocritics.services.collaborators import (
    ChatCompleter,
    LLMNotConfiguredError,
    LLMRequestError,
)
from ephemeris.bodies import Body
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_llm_client

logger = logging.getLogger(__name__)

router = APIRouter()


async def _complete(
    llm: ChatCompleter,
    system_prompt: str,
    user_message: str,
    history,
) -> str:
    try:
        return await llm.complete_chat(system_prompt, user_message, history)
    except LLMNotConfiguredError as exc:
        logger.error("Chat requested without LLM credentials: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc))
    except LLMRequestError as exc:
        logger.error("Chat completion failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc))


@router.post("", response_model=ChatResponse)
async def chat(req: ChatRequest, llm: ChatCompleter = Depends(get_llm_client)):
    response = await _complete(llm, req.system_prompt, req.user_message, req.conversation_history)
    return ChatResponse(response=response)


@router.post("/planet", response_model=PlanetChatResponse)
async def chat_with_planet(req: PlanetChatRequest, llm: ChatCompleter = Depends(get_llm_client)):
    body = Body.parse(req.planet)
    if body is None:
        raise HTTPException(status_code=400, detail=f"Unknown planet: {req.planet}")
    placement = req.reading.placement(body)
    if placement is None:
        raise HTTPException(status_code=400, detail=f"{body.value} is not in this chart")

    character = create_character(body, placement.sign, retrograde=placement.retrograde)
    system_prompt = build_system_prompt(character, req.reading, req.question)
    response = await _complete(llm, system_prompt, req.question, req.conversation_history)
    return PlanetChatResponse(planet=body, character=character.name, response=response)
