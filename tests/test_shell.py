import sys

import pytest

from eostui.shell import build_shell_command, run_shell


def test_ssh_with_jump_proxy():
    argv = build_shell_command(["-o", "LogLevel=ERROR"], "root@node1", "gateway", {})
    assert argv == ["ssh", "-o", "LogLevel=ERROR", "-t", "-J", "gateway", "root@node1"]


def test_ssh_without_jump_proxy():
    argv = build_shell_command(["-q"], "node1", "", {})
    assert argv == ["ssh", "-q", "-t", "node1"]


def test_local_shell_from_environment():
    assert build_shell_command([], "", "", {"SHELL": "/bin/zsh"}) == ["/bin/zsh"]


def test_local_shell_default():
    assert build_shell_command([], "", "", {}) == ["/bin/bash"]


def test_jump_proxy_without_target_is_local():
    assert build_shell_command(["-q"], "", "gateway", {"SHELL": "/bin/sh"}) == ["/bin/sh"]


def test_base_args_not_modified():
    base = ["-q"]
    build_shell_command(base, "node1", "gateway", {})
    assert base == ["-q"]


def test_run_shell_returns_exit_status():
    assert run_shell([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3
    assert run_shell([sys.executable, "-c", "pass"]) == 0


def test_run_shell_missing_program():
    with pytest.raises(OSError):
        run_shell(["/nonexistent/definitely-not-a-shell"])


def test_run_shell_empty_command():
    with pytest.raises(ValueError):
        run_shell([])