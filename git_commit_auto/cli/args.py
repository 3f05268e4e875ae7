"""CLI Argument Parsing"""

import argparse
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import argcomplete
from argcomplete.completers import ChoicesCompleter

from git_commit_auto import __version__

ACTION_WORDS = ('regenerate', 'push', 'changelog')


@dataclass(frozen=True)
class Actions:
    """Which mode to run and which optional steps to take."""
    regenerate: bool = False
    push: bool = False
    changelog: bool = False

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'Actions':
        """Presence-based: order does not matter, unknown words are ignored."""
        present = set(words)
        return cls(**{word: word in present for word in ACTION_WORDS})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='git-commit-auto',
        description='Generate a commit message for staged changes with Gemini and commit it',
        epilog='Examples: git-commit-auto | git-commit-auto push changelog | git-commit-auto regenerate'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    words = parser.add_argument(
        'words', nargs='*', metavar='ACTION',
        help='regenerate: rewrite the last commit message; push: push after committing; '
             'changelog: create CHANGELOG.md if missing'
    )
    words.completer = ChoicesCompleter(ACTION_WORDS)

    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> tuple[Actions, argparse.Namespace]:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args, unknown = parser.parse_known_intermixed_args(argv)
    # Words that follow an unknown option can land in the leftovers
    words = list(args.words) + [token for token in unknown if not token.startswith('-')]
    return Actions.from_words(words), args
