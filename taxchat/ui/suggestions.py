"""Suggestion prompts offered on the welcome screen, grouped by topic."""

from __future__ import annotations

SUGGESTION_PROMPTS: dict[str, list[str]] = {
    "General Tax Questions": ["What is income tax?", "What are tax brackets?"],
    "Filing Taxes": [
        "Which filing status should I choose?",
        "How do I claim deductions?",
    ],
    "Tax Credits & Deductions": [
        "What is the Child Tax Credit?",
        "How do I claim mortgage interest?",
    ],
    "Specific Situations": [
        "How do I file taxes?",
        "What should I do if I receive tax refund?",
    ],
}


def all_suggestions() -> list[str]:
    """Flatten the groups in display order."""
    return [prompt for prompts in SUGGESTION_PROMPTS.values() for prompt in prompts]
