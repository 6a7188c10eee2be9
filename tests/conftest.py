"""
Pytest configuration for tinysh tests.
Every test runs inside its own temporary working directory.
"""
import stat
import pytest
from pathlib import Path

from tinysh.config import ShellContext
from tinysh.shell import TinyShell


@pytest.fixture(autouse=True)
def temp_test_dir(tmp_path, monkeypatch):
    """Run the test from tmp_path; monkeypatch restores the cwd afterwards"""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def bin_dir(tmp_path):
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_script(bin_dir):
    """Create an executable /bin/sh script in bin_dir"""

    def _make(name: str, body: str, directory: Path = None) -> Path:
        script = (directory or bin_dir) / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def home_dir(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def shell_context(bin_dir, home_dir):
    return ShellContext(search_path=(str(bin_dir),), home=str(home_dir))


@pytest.fixture
def make_shell(shell_context):
    """Build a shell whose prompt replays the given lines"""

    def _make(lines=(), context: ShellContext = None):
        return TinyShell(context or shell_context, prompter=ScriptedPrompt(lines))

    return _make


@pytest.fixture
def shell(make_shell):
    return make_shell()


class ScriptedPrompt:
    """Stands in for Prompt, replaying fixed lines then signalling EOF"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.asked = 0

    def ask(self) -> str:
        if not self.lines:
            raise EOFError
        self.asked += 1
        return self.lines.pop(0)
