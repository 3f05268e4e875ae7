"""LLM Client Package"""

from git_commit_auto.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT
from git_commit_auto.llm.gemini import GeminiClient, build_payload, extract_text
from git_commit_auto.llm.retry import backoff_delays, retry_call

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "GeminiClient",
    "SYSTEM_PROMPT",
    "build_payload",
    "extract_text",
    "backoff_delays",
    "retry_call",
]
