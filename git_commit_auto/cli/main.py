"""CLI Main Entry Point"""

import sys
from datetime import date
from typing import Optional, Sequence

from git_commit_auto.changelog import ChangelogError, update_changelog
from git_commit_auto.config import Config, load_config
from git_commit_auto.deps import check_dependencies
from git_commit_auto.git import GitError, GitRepository, VersionControl
from git_commit_auto.llm import GeminiClient, LLMClient, LLMError
from git_commit_auto.message import generate_commit_message
from git_commit_auto.output import dim, print_error, print_success, print_warning

from git_commit_auto.cli.args import Actions, parse_args
from git_commit_auto.cli.commands import display_config, run_install_completion


def _report_retry(attempt: int, error: BaseException, delay: float) -> None:
    print_warning(f"Gemini API call failed ({error}). Retrying in {delay:g}s...")


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    return 0, False


def _regenerate(repo: VersionControl, client: LLMClient) -> int:
    """Rewrite the last commit's message from its own diff."""
    if not repo.has_parent_commit():
        print_error("The last commit has no parent to diff against; regenerate needs at least two commits.")
        return 1

    diff = repo.last_commit_diff()
    if not diff.strip():
        print("No changes found to generate a commit message.")
        return 0

    message = generate_commit_message(client, diff)

    print(dim("Amending previous commit..."))
    repo.amend(message)
    print_success("Commit amended successfully!")
    return 0


def _commit(actions: Actions, config: Config, repo: VersionControl, client: LLMClient,
            today: Optional[date]) -> int:
    """Commit staged changes, then changelog and push as requested."""
    diff = repo.staged_diff()
    if not diff.strip():
        print("No staged changes found. Did you forget to 'git add'?")
        return 0

    message = generate_commit_message(client, diff)

    repo.commit(message)
    print_success("Commit successful!")

    update_changelog(message, actions.changelog, config.changelog_file, today)

    if actions.push:
        print(dim("Pushing to remote..."))
        repo.push()
        print_success("Push successful!")
    return 0


def run(actions: Actions, config: Config, repo: VersionControl, client: LLMClient,
        today: Optional[date] = None) -> int:
    """Run one commit or regenerate cycle and return the exit code."""
    try:
        if actions.regenerate:
            return _regenerate(repo, client)
        return _commit(actions, config, repo, client, today)
    except (GitError, LLMError, ChangelogError) as e:
        print_error(str(e))
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    actions, args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = load_config()

    problems = check_dependencies(config)
    if problems:
        for problem in problems:
            print_error(problem)
        return 1

    try:
        repo = GitRepository()
        client = GeminiClient(config, on_retry=_report_retry)
    except (GitError, LLMError) as e:
        print_error(str(e))
        return 1

    return run(actions, config, repo, client)


def entry_point() -> None:
    sys.exit(main())
