"""Shared pytest fixtures for claude-wsl tests."""

import pytest
from click.testing import CliRunner

from claude_wsl.core.config import InstallConfig, InstallPaths


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path):
    """An isolated home directory so tests never touch the real ~/.bashrc."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def config(home):
    """Installer config rooted at the isolated home, with quiet output."""
    return InstallConfig(paths=InstallPaths.from_home(home), quiet=True)


@pytest.fixture
def reload_calls(monkeypatch):
    """Replace the shell reload with a recorder that succeeds.

    Returns the list of bashrc paths the installer tried to source.
    """
    calls = []

    def fake_reload(bashrc_path):
        calls.append(bashrc_path)
        return True

    monkeypatch.setattr("claude_wsl.installer.reload_shell", fake_reload)
    return calls
