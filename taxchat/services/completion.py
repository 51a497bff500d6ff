"""
Completion service — wraps Google Generative AI calls.

One request, one model call: the configured system instruction plus the
caller's message as the only user turn. No history, no retry, no fallback
model. A failed call surfaces as CompletionError and the router decides what
the caller sees.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Optional

import google.generativeai as genai
from fastapi import Depends

from taxchat.config import Settings, get_settings

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Raised when the completion API call fails for any reason."""


def _first_text(response: Any) -> Optional[str]:
    """
    Return the text of the first generated candidate, or None.

    `response.text` raises when the model produced no parts (safety block,
    empty candidate list), so the candidate is read directly instead.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    text = "".join(getattr(part, "text", "") or "" for part in parts).strip()
    return text or None


class CompletionClient:
    """
    Single-turn chat completion against a Gemini model.
    Construction sets the process-wide Google AI key via `genai.configure`.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str,
        system_prompt: str,
        temperature: float,
        max_output_tokens: int,
        timeout: Optional[float] = None,
    ) -> None:
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.timeout = timeout
        self._generation_config = genai.GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        self._model = genai.GenerativeModel(model_name, system_instruction=system_prompt)

    async def complete(self, message: str) -> Optional[str]:
        """
        Send `message` as the sole user turn and return the generated text.

        Returns None when the model answered without content.
        Raises CompletionError on any failure from the SDK or the network.
        """
        logger.debug("Completion request (%s): %d chars", self.model_name, len(message))
        call = asyncio.to_thread(
            self._model.generate_content,
            message,
            generation_config=self._generation_config,
        )
        try:
            if self.timeout is None:
                response = await call
            else:
                response = await asyncio.wait_for(call, timeout=self.timeout)
        except Exception as exc:
            raise CompletionError(f"{self.model_name} call failed: {exc}") from exc

        text = _first_text(response)
        if text is None:
            logger.warning("Model '%s' returned no content.", self.model_name)
        return text


@lru_cache(maxsize=1)
def _build_client(
    api_key: str,
    model_name: str,
    system_prompt: str,
    temperature: float,
    max_output_tokens: int,
    timeout: Optional[float],
) -> CompletionClient:
    """
    Build the shared client for one configuration.

    `genai.configure` sets the API key process-wide, so only one client is
    cached: a new configuration replaces the old client and re-applies its
    own key instead of leaving a stale client bound to someone else's key.
    """
    return CompletionClient(
        api_key=api_key,
        model_name=model_name,
        system_prompt=system_prompt,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        timeout=timeout,
    )


def get_completion_client(
    settings: Settings = Depends(get_settings),
) -> Optional[CompletionClient]:
    """FastAPI dependency: the shared client, or None when no credential is set."""
    if not settings.completion_configured:
        return None
    return _build_client(
        settings.google_api_key.strip(),
        settings.completion_model,
        settings.system_prompt,
        settings.completion_temperature,
        settings.completion_max_tokens,
        settings.completion_timeout_seconds,
    )
