"""Commit Message - Turn raw model output into a single usable line."""

import re

from git_commit_auto.llm import LLMClient, LLMError

# Opening fence, optionally with an info string (```text) on its own line
_OPEN_FENCE_RE = re.compile(r'^```[\w.+-]*\n|^```')
_CLOSE_FENCE_RE = re.compile(r'```$')


def _clean_once(text: str) -> str:
    cleaned = text.strip()
    cleaned = _OPEN_FENCE_RE.sub('', cleaned, count=1)
    cleaned = _CLOSE_FENCE_RE.sub('', cleaned, count=1).strip()
    return cleaned.split('\n', 1)[0].strip() if cleaned else ""


def clean_commit_message(text: str) -> str:
    """Strip code fences and surrounding whitespace, keep the first line.

    Repeats until the text stops changing, so cleaning twice is the same
    as cleaning once.
    """
    cleaned = _clean_once(text)
    while True:
        again = _clean_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again


def generate_commit_message(client: LLMClient, diff: str) -> str:
    """Ask the client for a message and clean it. Empty output is fatal."""
    response = client.generate(diff)
    message = clean_commit_message(response.content)
    if not message:
        raise LLMError("Failed to parse a valid commit message from Gemini's response.")
    return message
