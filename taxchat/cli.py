"""
Terminal chat client — a Conversation rendered to stdout.

Usage:
    taxchat --url http://localhost:8000
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from typing import Optional, TextIO

import httpx

from taxchat.ui.conversation import Conversation
from taxchat.ui.suggestions import SUGGESTION_PROMPTS, all_suggestions

QUIT_COMMANDS = {"/quit", "/exit"}


class TerminalRenderer:
    """Prints messages as they are appended, plus a typing line while loading."""

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self.out = out
        self._rendered = 0

    def welcome(self) -> None:
        print("TaxChatbot — Your Tax Advisor\n", file=self.out)
        print("What's on the agenda today?\n", file=self.out)
        number = 1
        for group, prompts in SUGGESTION_PROMPTS.items():
            print(f"  {group}", file=self.out)
            for prompt in prompts:
                print(f"    [{number}] {prompt}", file=self.out)
                number += 1
        print("\nType a question, a suggestion number, or /quit.\n", file=self.out)

    def __call__(self, conversation: Conversation) -> None:
        for message in conversation.messages[self._rendered:]:
            label = "you" if message.role == "user" else "bot"
            print(f"{label}> {message.content}", file=self.out)
        self._rendered = len(conversation.messages)
        if conversation.is_loading:
            print("bot> …", file=self.out)
        self.out.flush()


def pick_suggestion(line: str, conversation: Conversation) -> Optional[str]:
    """
    Return the suggestion a typed number refers to, or None.
    Suggestion numbers only count on the welcome screen.
    """
    text = line.strip()
    if not (conversation.show_welcome and text.isdigit()):
        return None
    suggestions = all_suggestions()
    index = int(text) - 1
    if 0 <= index < len(suggestions):
        return suggestions[index]
    return None


async def read_line(prompt: str = "> ") -> str:
    """
    Read one line of stdin without blocking the event loop.

    The read runs on a daemon thread, so an interrupted client exits even
    while `input()` is still waiting. Raises EOFError when stdin closes.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def settle(line: Optional[str], exc: Optional[BaseException]) -> None:
        if future.done():
            return
        if exc is not None:
            future.set_exception(exc)
        else:
            future.set_result(line)

    def read() -> None:
        try:
            line, exc = input(prompt), None
        except BaseException as error:
            line, exc = None, error
        if not loop.is_closed():
            loop.call_soon_threadsafe(settle, line, exc)

    threading.Thread(target=read, name="taxchat-stdin", daemon=True).start()
    return await future


async def run_chat(
    base_url: str,
    out: TextIO = sys.stdout,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """Read questions from stdin until EOF or /quit."""
    renderer = TerminalRenderer(out)
    async with httpx.AsyncClient(base_url=base_url, transport=transport) as client:
        conversation = Conversation(client)
        conversation.subscribe(renderer)
        renderer.welcome()
        while True:
            try:
                line = await read_line()
            except EOFError:
                break
            if line.strip() in QUIT_COMMANDS:
                break
            suggestion = pick_suggestion(line, conversation)
            if suggestion is not None:
                await conversation.send(suggestion)
                continue
            conversation.draft = line.strip()
            if conversation.can_send:
                await conversation.send()


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Chat with the TaxChat relay from a terminal.")
    parser.add_argument("--url", default="http://localhost:8000", help="Base URL of the relay")
    args = parser.parse_args()

    try:
        asyncio.run(run_chat(args.url))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
