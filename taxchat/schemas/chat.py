"""Pydantic schemas for the chat relay endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ChatRequest(BaseModel):
    """Body for POST /api/chat — one message, no history."""

    # Optional here so a missing message reaches the router as a 400.
    message: Optional[str] = None


class ChatResponse(BaseModel):
    """Generated reply for a single message."""

    response: str


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx answer from the relay."""

    error: str
