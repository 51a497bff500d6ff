"""
Chat relay — forwards one user message to the completion API.

The relay keeps no state between requests: each call carries exactly one
message and gets exactly one reply (or an error body).
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status

from taxchat.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from taxchat.services.completion import (
    CompletionClient,
    CompletionError,
    get_completion_client,
)
from taxchat.utils.prompts import EMPTY_COMPLETION_FALLBACK

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

MESSAGE_REQUIRED = "Message is required"
NOT_CONFIGURED = "Completion API key not configured"
UPSTREAM_FAILED = "Failed to get response from the completion API"


class RelayError(Exception):
    """An error the relay reports to the caller as {"error": message}."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def chat(
    body: ChatRequest,
    client: Optional[CompletionClient] = Depends(get_completion_client),
) -> ChatResponse:
    """
    Relay a single message to the completion API.

    Checks run in order: missing message (400), missing credential (500),
    then the upstream call. Any upstream failure is logged and answered with
    a generic 500; nothing is retried.
    """
    if not body.message:
        raise RelayError(status.HTTP_400_BAD_REQUEST, MESSAGE_REQUIRED)

    if client is None:
        logger.error("Chat request rejected: GOOGLE_API_KEY is not set.")
        raise RelayError(status.HTTP_500_INTERNAL_SERVER_ERROR, NOT_CONFIGURED)

    try:
        text = await client.complete(body.message)
    except CompletionError:
        logger.exception("Completion API error")
        raise RelayError(status.HTTP_500_INTERNAL_SERVER_ERROR, UPSTREAM_FAILED)

    return ChatResponse(response=text or EMPTY_COMPLETION_FALLBACK)
