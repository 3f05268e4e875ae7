"""Changelog - Record commit messages under a per-day heading."""

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Optional

from git_commit_auto.output import dim

TITLE = "# Changelog"
HEADING_PREFIX = "## "


class ChangelogError(Exception):
    """Raised when the changelog file cannot be read or replaced."""
    pass


def date_heading(day: date) -> str:
    return f"{HEADING_PREFIX}{day.strftime('%Y-%m-%d')}"


def insert_entry(document: str, message: str, day: date) -> str:
    """Return document with `- message` filed under day's heading.

    Placement:
    - heading for the day exists: bullet goes directly below it, so the
      newest entry of the day is listed first
    - otherwise, a `# Changelog` title exists: blank line, heading and
      bullet go right after the first title line
    - otherwise heading and bullet are prepended as a new block
    """
    heading = date_heading(day)
    bullet = f"- {message}"
    # Split on \n only: splitlines() also breaks on \x0c, \x85 and \u2028
    lines = document.split('\n')
    if lines[-1] == "":
        lines.pop()

    if heading in lines:
        idx = lines.index(heading)
        lines[idx + 1:idx + 1] = [bullet]
    else:
        title_idx = next((i for i, line in enumerate(lines) if line.startswith(TITLE)), None)
        if title_idx is not None:
            lines[title_idx + 1:title_idx + 1] = ["", heading, bullet]
        elif any(line.strip() for line in lines):
            lines = [heading, bullet, ""] + lines
        else:
            lines = [heading, bullet]

    return "\n".join(lines) + "\n"


def _atomic_write(path: Path, content: str) -> None:
    """Write to a sibling temp file, then swap it in with os.replace."""
    try:
        tmp = tempfile.NamedTemporaryFile(
            mode='w', dir=path.parent, prefix=f".{path.name}.", suffix='.tmp',
            delete=False, encoding='utf-8'
        )
    except OSError as e:
        raise ChangelogError(f"Could not update {path}: {e}")
    try:
        with tmp:
            tmp.write(content)
        os.replace(tmp.name, path)
    except OSError as e:
        try:
            os.unlink(tmp.name)
        except FileNotFoundError:
            pass
        raise ChangelogError(f"Could not update {path}: {e}")


def update_changelog(message: str, force_create: bool, path: str = "CHANGELOG.md",
                     today: Optional[date] = None) -> bool:
    """Add message to the changelog file.

    A missing file is skipped (returns False) unless force_create is set,
    in which case it is started with a title line.
    """
    changelog = Path(path)
    today = today or date.today()

    if changelog.exists():
        try:
            document = changelog.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ChangelogError(f"Could not read {changelog}: {e}")
    elif force_create:
        print(dim(f"Creating {changelog}..."))
        document = f"{TITLE}\n"
    else:
        return False

    _atomic_write(changelog, insert_entry(document, message, today))
    print(f"Updated {changelog}")
    return True
