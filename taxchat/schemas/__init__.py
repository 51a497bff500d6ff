"""Pydantic schemas package."""

from taxchat.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

__all__ = ["ChatRequest", "ChatResponse", "ErrorResponse"]
