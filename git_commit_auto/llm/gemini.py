"""Gemini LLM Client"""

import http.client
import json
import socket
import time
import urllib.error
import urllib.parse
import urllib.request
from typing import Callable, Optional

from git_commit_auto.config import Config
from git_commit_auto.llm.base import LLMClient, LLMResponse, LLMError, SYSTEM_PROMPT
from git_commit_auto.llm.retry import retry_call

DIFF_PREFIX = "Here is the diff:\n\n"


def build_payload(system_prompt: str, diff: str, temperature: float, max_output_tokens: int) -> dict:
    """Request body for generateContent."""
    return {
        "systemInstruction": {"parts": [{"text": system_prompt}]},
        "contents": [{"parts": [{"text": DIFF_PREFIX + diff}]}],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }


def extract_text(response) -> str:
    """Return candidates[0].content.parts[0].text.

    Only presence is checked; an empty string is still a valid answer here.
    """
    try:
        text = response["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected response from Gemini: {_summarize(response)}")
    if not isinstance(text, str):
        raise LLMError(f"Unexpected response from Gemini: {_summarize(response)}")
    return text


def _summarize(response) -> str:
    if isinstance(response, dict) and isinstance(response.get("error"), dict):
        return response["error"].get("message", "error without message")
    raw = json.dumps(response)
    return raw if len(raw) <= 200 else raw[:200] + "..."


class GeminiClient(LLMClient):
    """Gemini generateContent client. Requires GEMINI_API_KEY."""

    def __init__(
        self,
        config: Config,
        sleep: Callable[[float], None] = time.sleep,
        on_retry: Optional[Callable[[int, BaseException, float], None]] = None,
    ):
        if not config.api_key:
            raise LLMError("No API key found. Set GEMINI_API_KEY environment variable:\n"
                           "  export GEMINI_API_KEY='your-key-here'")
        self.config = config
        self._sleep = sleep
        self._on_retry = on_retry

    @property
    def name(self) -> str:
        return f"Gemini ({self.config.model})"

    def _request_url(self) -> str:
        return f"{self.config.api_url}?{urllib.parse.urlencode({'key': self.config.api_key})}"

    def _call_api(self, payload: dict) -> dict:
        """Make a single POST to generateContent and decode the JSON body."""
        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(
            self._request_url(),
            data=data,
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        # timeout=None would disable the socket default, so only pass it when set
        kwargs = {} if self.config.timeout is None else {"timeout": self.config.timeout}
        try:
            with urllib.request.urlopen(req, **kwargs) as response:
                return json.loads(response.read().decode('utf-8'))
        except urllib.error.HTTPError as e:
            # HTTPError must come before URLError (it's a subclass)
            raise LLMError(f"Gemini error ({e.code}): {e.reason}")
        except urllib.error.URLError as e:
            raise LLMError(f"Gemini request failed: {e.reason}")
        except socket.timeout:
            raise LLMError(f"Request timed out after {self.config.timeout}s")
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise LLMError("Invalid JSON in Gemini response")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from Gemini: {e}")
        except OSError as e:
            raise LLMError(f"Connection to Gemini lost: {e}")

    def _attempt(self, payload: dict) -> str:
        return extract_text(self._call_api(payload))

    def generate(self, diff: str) -> LLMResponse:
        """Post the diff, retrying failed calls with exponential backoff."""
        payload = build_payload(
            SYSTEM_PROMPT, diff, self.config.temperature, self.config.max_output_tokens
        )
        attempts = self.config.max_attempts
        try:
            text, used = retry_call(
                lambda: self._attempt(payload),
                attempts=attempts,
                initial_delay=self.config.retry_delay,
                retry_on=(LLMError,),
                sleep=self._sleep,
                on_retry=self._on_retry,
            )
        except LLMError as e:
            raise LLMError(f"Failed to get a response from Gemini after {attempts} attempts: {e}")

        return LLMResponse(content=text, model=self.config.model, attempts=used)
