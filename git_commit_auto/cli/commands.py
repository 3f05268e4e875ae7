"""CLI Commands"""

import os
import sys

from git_commit_auto.config import API_KEY_ENV, ENV_OVERRIDES, load_config, get_config_path
from git_commit_auto.output import bold, dim, info, success, warning

PROG = 'git-commit-auto'


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .gcarc found)")

    overrides = [var for var in ENV_OVERRIDES if os.environ.get(var)]
    if overrides:
        print(f"  {dim('Environment overrides:')}")
        for var in overrides:
            print(f"    {var}={os.environ[var]}")

    print()
    print(f"  {bold('Settings:')}")
    for key, value in config.to_dict().items():
        print(f"    {key + ':':<19}{info(str(value))}")
    if config.timeout is None:
        print(f"    {'timeout:':<19}{info('client default')}")

    key_state = success('set') if config.api_key else warning('not set')
    print(f"    {API_KEY_ENV + ':':<19}{key_state}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .gcarc (in current directory)")
    print(f"    Global: ~/.gcarc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = f'eval "$(register-python-argcomplete {PROG})"'
    if 'zsh' in shell or 'bash' in shell:
        rc_name = '~/.zshrc' if 'zsh' in shell else '~/.bashrc'
        print(f"Add this line to {dim(os.path.expanduser(rc_name))}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_name)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {PROG} | Out-String | Invoke-Expression\n")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {PROG} | source")

    print(f"\n{dim('After setup, press TAB to complete regenerate, push and changelog.')}")
    return 0
