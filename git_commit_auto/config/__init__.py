"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict, field, replace
from pathlib import Path
from typing import Optional

API_KEY_ENV = "GEMINI_API_KEY"

# Environment overrides: variable -> (field, parser)
ENV_OVERRIDES = {
    "GCA_MODEL": ("model", str),
    "GCA_TIMEOUT": ("timeout", float),
    "GCA_CHANGELOG": ("changelog_file", str),
}

# Keys accepted from a config file; the API key only ever comes from the environment
FILE_KEYS = {
    "model", "temperature", "max_output_tokens", "max_attempts",
    "retry_delay", "timeout", "changelog_file",
}


@dataclass(frozen=True)
class Config:
    """Settings for one run. Built once at startup and passed down."""
    model: str = "gemini-2.5-flash-lite"
    api_base: str = "https://generativelanguage.googleapis.com/v1beta/models"
    temperature: float = 0.5
    max_output_tokens: int = 100
    max_attempts: int = 3
    retry_delay: float = 1.0
    timeout: Optional[float] = None  # None leaves urllib's default in place
    changelog_file: str = "CHANGELOG.md"
    api_key: str = field(default="", repr=False)

    @property
    def api_url(self) -> str:
        return f"{self.api_base}/{self.model}:generateContent"

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None and k != "api_key"}

    def validate(self) -> tuple['Config', list[str]]:
        """Return a copy with invalid values reset to defaults, plus warnings."""
        warnings = []
        defaults = Config()
        fixes = {}

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            fixes["model"] = defaults.model

        if not _is_number(self.temperature) or not 0 <= self.temperature <= 2:
            warnings.append(f"Invalid temperature '{self.temperature}', using {defaults.temperature}")
            fixes["temperature"] = defaults.temperature

        for name in ("max_output_tokens", "max_attempts"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                default = getattr(defaults, name)
                warnings.append(f"Invalid {name} '{value}', using {default}")
                fixes[name] = default

        if not _is_number(self.retry_delay) or self.retry_delay < 0:
            warnings.append(f"Invalid retry_delay '{self.retry_delay}', using {defaults.retry_delay}")
            fixes["retry_delay"] = defaults.retry_delay

        if self.timeout is not None and (not _is_number(self.timeout) or self.timeout <= 0):
            warnings.append(f"Invalid timeout '{self.timeout}', using client default")
            fixes["timeout"] = None

        if not isinstance(self.changelog_file, str) or not self.changelog_file.strip():
            warnings.append(f"Invalid changelog_file '{self.changelog_file}', using '{defaults.changelog_file}'")
            fixes["changelog_file"] = defaults.changelog_file

        return (replace(self, **fixes) if fixes else self), warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        filtered = {k: v for k, v in data.items() if k in FILE_KEYS}
        config, warnings = cls(**filtered).validate()
        for warning in warnings:
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigManager:
    """Loads .gcarc (local, then home) and layers the environment on top."""

    CONFIG_FILENAME = ".gcarc"

    def __init__(self, environ: Optional[dict] = None):
        self._environ = os.environ if environ is None else environ
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        base = Config()
        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                base = self._load_from_file(path)
                self._config_path = path
                break

        self._config = self._apply_environment(base)
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, TypeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def _apply_environment(self, config: Config) -> Config:
        overrides = {"api_key": self._environ.get(API_KEY_ENV, "").strip()}
        for var, (name, parse) in ENV_OVERRIDES.items():
            raw = self._environ.get(var)
            if not raw:
                continue
            try:
                overrides[name] = parse(raw)
            except ValueError:
                print(f"Config warning: Invalid {var} '{raw}', ignoring", file=sys.stderr)

        config, warnings = replace(config, **overrides).validate()
        for warning in warnings:
            print(f"Config warning: {warning}", file=sys.stderr)
        return config

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "API_KEY_ENV",
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
]
