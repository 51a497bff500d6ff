"""Browser chat page (GET /)."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from taxchat.ui.suggestions import all_suggestions

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
def chat_page(request: Request) -> HTMLResponse:
    """
    Chat UI page. Conversation state lives in the page only and is lost on
    reload.
    """
    return templates.TemplateResponse(
        request,
        "index.html",
        {"suggestions": all_suggestions(), "chat_endpoint": "/api/chat"},
    )
