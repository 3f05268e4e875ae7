"""
Tests for CLI argument handling, terminal output and the main() wiring.

Run with:
    pytest tests/test_display.py -v
"""

import pytest

from git_commit_auto import __version__
from git_commit_auto.cli import main as cli_main
from git_commit_auto.cli.args import Actions, parse_args
from git_commit_auto.config import Config
from git_commit_auto.output import print_error, print_success, print_warning


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_no_arguments_is_plain_commit(self):
        actions, _ = parse_args([])
        assert actions == Actions()

    @pytest.mark.parametrize("argv, expected", [
        (["push"], Actions(push=True)),
        (["regenerate"], Actions(regenerate=True)),
        (["changelog"], Actions(changelog=True)),
        (["push", "changelog"], Actions(push=True, changelog=True)),
        (["changelog", "push"], Actions(push=True, changelog=True)),
    ])
    def test_words_are_order_independent(self, argv, expected):
        actions, _ = parse_args(argv)
        assert actions == expected

    def test_unknown_words_and_options_ignored(self):
        actions, args = parse_args(["please", "push", "--force", "now"])
        assert actions == Actions(push=True)
        assert args.display_config is False

    def test_word_after_unknown_option(self):
        actions, _ = parse_args(["--force", "push"])
        assert actions == Actions(push=True)

    def test_words_around_options(self):
        actions, args = parse_args(["push", "--display-config", "changelog"])
        assert actions == Actions(push=True, changelog=True)
        assert args.display_config is True

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

class TestDiagnostics:

    def test_error_prefix_on_stderr(self, capsys):
        print_error("something broke")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Error: something broke"

    def test_warning_prefix_on_stderr(self, capsys):
        print_warning("retrying")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Warning: retrying"

    def test_success_on_stdout(self, capsys):
        print_success("Commit successful!")
        assert capsys.readouterr().out.strip() == "Commit successful!"

    def test_retry_warning_text(self, capsys):
        cli_main._report_retry(1, Exception("Gemini error (503): Service Unavailable"), 1.0)
        err = capsys.readouterr().err.strip()
        assert err == "Warning: Gemini API call failed (Gemini error (503): Service Unavailable). Retrying in 1s..."


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:

    def test_missing_dependencies_abort_before_git(self, monkeypatch, capsys):
        monkeypatch.setattr(cli_main, "load_config", lambda: Config())
        monkeypatch.setattr(cli_main, "check_dependencies",
                            lambda config: ["GEMINI_API_KEY environment variable is not set."])

        def no_git(*args, **kwargs):
            raise AssertionError("git must not be touched")

        monkeypatch.setattr(cli_main, "GitRepository", no_git)

        assert cli_main.main([]) == 1
        assert "Error: GEMINI_API_KEY" in capsys.readouterr().err

    def test_not_a_repository(self, monkeypatch, capsys):
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(api_key="k"))
        monkeypatch.setattr(cli_main, "check_dependencies", lambda config: [])

        def not_a_repo():
            raise cli_main.GitError("Not inside a git repository")

        monkeypatch.setattr(cli_main, "GitRepository", not_a_repo)

        assert cli_main.main(["push"]) == 1
        assert "Error: Not inside a git repository" in capsys.readouterr().err

    def test_runs_with_parsed_actions(self, monkeypatch):
        seen = {}
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(api_key="k"))
        monkeypatch.setattr(cli_main, "check_dependencies", lambda config: [])
        monkeypatch.setattr(cli_main, "GitRepository", lambda: "repo")

        def fake_run(actions, config, repo, client):
            seen.update(actions=actions, repo=repo, client=client)
            return 0

        monkeypatch.setattr(cli_main, "run", fake_run)

        assert cli_main.main(["changelog", "push"]) == 0
        assert seen["actions"] == Actions(push=True, changelog=True)
        assert seen["repo"] == "repo"
        assert seen["client"].name == "Gemini (gemini-2.5-flash-lite)"

    def test_display_config_skips_dependency_check(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(cli_main, "display_config", lambda: 0)

        def fail(config):
            raise AssertionError("dependency check must not run")

        monkeypatch.setattr(cli_main, "check_dependencies", fail)
        assert cli_main.main(["--display-config"]) == 0
