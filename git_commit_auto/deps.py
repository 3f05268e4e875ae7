"""Dependency Check - Fail before any side effect if something is missing.

Only git is checked on PATH. The HTTP client and JSON codec that a shell
version would need as separate tools (curl, jq) run in-process here.
"""

import shutil

from git_commit_auto.config import API_KEY_ENV, Config

# External programs we shell out to. HTTP and JSON are handled in-process.
REQUIRED_TOOLS = ("git",)


def check_dependencies(config: Config, tools: tuple[str, ...] = REQUIRED_TOOLS, which=shutil.which) -> list[str]:
    """Return one problem description per missing dependency (empty if all present)."""
    problems = []

    if not config.api_key:
        problems.append(
            f"{API_KEY_ENV} environment variable is not set. Please set it before running this command."
        )

    for tool in tools:
        if which(tool) is None:
            problems.append(f"{tool} is not installed. Please install it to continue.")

    return problems
