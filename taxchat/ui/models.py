"""Message entity held by the conversation UI."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """One turn in the conversation. Frozen: messages are never edited."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    content: str
    role: Literal["user", "assistant"]
    timestamp: datetime = Field(default_factory=_now)
