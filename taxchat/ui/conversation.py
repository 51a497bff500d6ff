"""
Conversation state — the UI side of the chat.

Two pieces of state drive every renderer: the ordered message list and the
`is_loading` flag. Transitions:

  Idle    --send-->              Loading   (user message appended)
  Loading --reply or failure-->  Idle      (assistant message appended)

Each transition is committed as one change, so listeners never observe the
typing indicator alongside the assistant reply that ends it.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from taxchat.ui.models import Message

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "Sorry, I'm having trouble connecting right now. Please try again later."
)

Listener = Callable[["Conversation"], None]


class Conversation:
    """In-memory chat owned by one UI; discarded when the UI goes away."""

    def __init__(self, client: httpx.AsyncClient, endpoint: str = "/api/chat") -> None:
        self._client = client
        self.endpoint = endpoint
        self.draft = ""
        self.is_loading = False
        self._messages: list[Message] = []
        self._listeners: list[Listener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def show_welcome(self) -> bool:
        """The welcome screen (with suggestions) is shown until the first send."""
        return not self._messages

    @property
    def can_send(self) -> bool:
        """Mirrors the send button: disabled while loading or on a blank draft."""
        return not self.is_loading and bool(self.draft.strip())

    def subscribe(self, listener: Listener) -> None:
        """Call `listener(conversation)` after every state change."""
        self._listeners.append(listener)

    async def send(self, content: Optional[str] = None) -> Optional[Message]:
        """
        Send `content`, or the current draft when no content is given.

        Explicit content (a suggestion click) bypasses the draft and leaves it
        untouched; sending the draft clears it. Blank input and sends issued
        while a request is in flight are ignored and return None. Otherwise
        returns the assistant message that ended the exchange.
        """
        text = content or self.draft
        if not text.strip():
            return None
        if self.is_loading:
            logger.debug("Send ignored: a request is already in flight.")
            return None

        if not content:
            self.draft = ""
        self._commit(Message(content=text, role="user"), loading=True)

        try:
            reply = await self._request(text)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Relay request failed: %s", exc)
            reply = CONNECTION_ERROR_MESSAGE
        except BaseException:
            self._commit(None, loading=False)
            raise

        assistant = Message(content=reply, role="assistant")
        self._commit(assistant, loading=False)
        return assistant

    async def _request(self, text: str) -> str:
        response = await self._client.post(self.endpoint, json={"message": text})
        response.raise_for_status()
        data = response.json()
        reply = data.get("response") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise ValueError("relay answered without a 'response' field")
        return reply

    def _commit(self, message: Optional[Message], loading: bool) -> None:
        if message is not None:
            self._messages.append(message)
        self.is_loading = loading
        for listener in self._listeners:
            listener(self)
