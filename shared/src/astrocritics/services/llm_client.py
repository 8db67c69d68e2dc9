"""OpenRouter-compatible LLM client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from astrocritics.config import Settings
from astrocritics.schemas.chat import ChatTurn
from astrocritics.services.collaborators import LLMNotConfiguredError, LLMRequestError

logger = logging.getLogger(__name__)


@dataclass
class LLMConfig:
    """Endpoint, model and sampling parameters for chat completions."""

    api_endpoint: str
    model_id: str
    api_key: str
    max_tokens: int | None = None
    temperature: float = 0.7
    referer: str = ""
    app_title: str = ""
    extra_params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> LLMConfig:
        return cls(
            api_endpoint=settings.openrouter_api_url,
            model_id=settings.openrouter_model,
            api_key=settings.openrouter_api_key,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
            referer=settings.site_url,
            app_title=settings.llm_app_title,
            extra_params={"top_p": settings.llm_top_p},
        )


class LLMClient:
    """Vendor-agnostic LLM client using OpenRouter-compatible API."""

    def __init__(
        self,
        config: LLMConfig,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def configured(self) -> bool:
        return bool(self.config.api_key.strip())

    @staticmethod
    def _raise_for_status_with_context(response: httpx.Response) -> None:
        try:
            response.raise_for_status()
            return
        except httpx.HTTPStatusError as exc:
            detail = response.text.strip()
            try:
                body = response.json()
                if isinstance(body, dict):
                    if isinstance(body.get("error"), dict):
                        detail = body["error"].get("message") or body["error"].get("code") or detail
                    elif body.get("error"):
                        detail = str(body["error"])
                    elif body.get("message"):
                        detail = str(body["message"])
            except ValueError:
                pass
            if len(detail) > 400:
                detail = detail[:400]
            raise LLMRequestError(
                f"LLM API request failed ({response.status_code}) at {response.request.url}: {detail}"
            ) from exc

    async def generate(
        self,
        messages: list[dict[str, str]],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion and return the assistant message content."""
        if not self.configured:
            raise LLMNotConfiguredError("OpenRouter API key not configured")
        config = self.config

        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }
        if config.referer:
            headers["HTTP-Referer"] = config.referer
        if config.app_title:
            headers["X-Title"] = config.app_title

        payload: dict[str, Any] = {
            "model": config.model_id,
            "messages": messages,
            "temperature": temperature if temperature is not None else config.temperature,
        }

        tokens = max_tokens or config.max_tokens
        if tokens:
            payload["max_tokens"] = tokens

        # Merge extra params
        payload.update(config.extra_params)

        endpoint = config.api_endpoint.rstrip("/")
        url = f"{endpoint}/chat/completions"

        logger.info("LLM request to %s model=%s messages=%d", url, config.model_id, len(messages))

        try:
            response = await self._client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise LLMRequestError(f"LLM API unreachable at {url}: {exc}") from exc
        self._raise_for_status_with_context(response)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise LLMRequestError("Invalid response from AI service") from exc
        if not isinstance(content, str) or not content.strip():
            raise LLMRequestError("Invalid response from AI service")

        logger.info("LLM response model=%s tokens=%s", config.model_id, data.get("usage", {}))
        return content

    async def complete_chat(
        self,
        system_prompt: str,
        user_message: str,
        history: list[ChatTurn] | None = None,
    ) -> str:
        """System prompt, then prior turns, then the new user message."""
        messages = [{"role": "system", "content": system_prompt}]
        messages.extend({"role": turn.role, "content": turn.content} for turn in history or [])
        messages.append({"role": "user", "content": user_message})
        return await self.generate(messages)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
