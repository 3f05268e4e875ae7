"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from git_commit_auto import COMMIT_TYPE_NAMES

_TYPE_EXAMPLES = ", ".join(f"{t}:" for t in COMMIT_TYPE_NAMES)

SYSTEM_PROMPT = f"""You are an expert programmer and commit message generator.
Your task is to write a concise and informative commit message for the given code diff.
The message MUST strictly follow the Conventional Commits specification.
It must be a single line, starting with a type (e.g., {_TYPE_EXAMPLES}), followed by a short description.
Do NOT include any extra text, explanations, or markdown formatting (like ```).
Just provide the single-line commit message."""


@dataclass
class LLMResponse:
    """Raw text returned by a provider, before any cleanup."""
    content: str
    model: str = ""
    attempts: int = 1


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, diff: str) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
