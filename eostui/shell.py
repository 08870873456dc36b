"""Opening an interactive shell on the host of the selected row."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping, Sequence

DEFAULT_SHELL = "/bin/bash"


def build_shell_command(
    ssh_base_args: Sequence[str],
    ssh_target: str,
    jump_proxy: str,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """The command line that opens the shell.

    With an SSH target the shell is opened through ssh, via the jump proxy
    when one is given; otherwise the local $SHELL is started.
    """
    if ssh_target and jump_proxy:
        return ["ssh", *ssh_base_args, "-t", "-J", jump_proxy, ssh_target]
    if ssh_target:
        return ["ssh", *ssh_base_args, "-t", ssh_target]
    environment = os.environ if env is None else env
    return [environment.get("SHELL") or DEFAULT_SHELL]


def run_shell(argv: Sequence[str]) -> int:
    """Run the command attached to this terminal and return its exit status.

    Raises OSError when the program cannot be started.
    """
    if not argv:
        raise ValueError("no command to run")
    return subprocess.run(list(argv), check=False).returncode