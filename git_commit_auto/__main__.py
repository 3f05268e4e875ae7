from git_commit_auto.cli.main import entry_point

entry_point()
