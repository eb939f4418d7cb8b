"""The claude-wsl installer.

Runs a fixed sequence of steps that is safe to repeat:

1. Create the install directory
2. Copy the notification scripts
3. Register hooks in Claude Code's settings.json
4. Replace the integration block in ~/.bashrc
5. Verify the key scripts are in place (advisory)
6. Try to source ~/.bashrc (best effort)

Steps 1-4 stop the run on the first failure. Nothing is rolled back.
"""

import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from claude_wsl.core.config import InstallConfig
from claude_wsl.core.payload import copy_payload, missing_files
from claude_wsl.core.shellrc import install_block
from claude_wsl.errors import InstallError
from claude_wsl.hooks.settings import install_hooks
from claude_wsl.ui import Console

T = TypeVar("T")


@dataclass
class InstallResult:
    """Outcome of a completed installer run.

    Attributes:
        files_copied: Number of payload files copied
        hooks_added: Events that received a new hook group
        is_update: True if an existing shell block was replaced
        verified: True if all required files were found
        reloaded: True if sourcing the shell file succeeded
    """

    files_copied: int = 0
    hooks_added: list[str] = field(default_factory=list)
    is_update: bool = False
    verified: bool = False
    reloaded: bool = False


def reload_shell(bashrc_path: Path) -> bool:
    """Source the shell file in a throwaway bash, discarding output.

    Returns:
        True if bash ran and exited 0.
    """
    try:
        subprocess.run(
            ["bash", "-c", 'source "$1"', "bash", str(bashrc_path)],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return False
    return True


class Installer:
    """Bring the notification integration to its desired state."""

    def __init__(self, config: InstallConfig, console: Console | None = None) -> None:
        self.config = config
        self.paths = config.paths
        self.console = console or Console(quiet=config.quiet)

    def _fatal_step(
        self, text: str, failure: str, action: Callable[[], T], success: Callable[[T], str]
    ) -> T:
        step = self.console.step(text)
        try:
            value = action()
        except Exception as e:
            step.fail(failure)
            raise InstallError(failure, str(e)) from e
        step.succeed(success(value))
        return value

    def create_install_dir(self) -> None:
        self._fatal_step(
            "Creating installation directory...",
            "Failed to create installation directory",
            lambda: self.paths.install_dir.mkdir(parents=True, exist_ok=True),
            lambda _: "Installation directory created",
        )

    def copy_scripts(self) -> int:
        copied = self._fatal_step(
            "Copying notification scripts...",
            "Failed to copy notification scripts",
            lambda: copy_payload(self.paths.template_dir, self.paths.install_dir),
            lambda files: f"Copied {len(files)} notification scripts",
        )
        return len(copied)

    def configure_hooks(self) -> list[str]:
        return self._fatal_step(
            "Configuring Claude Code hooks...",
            "Failed to configure Claude hooks",
            lambda: install_hooks(self.paths.settings_path, str(self.paths.wrapper_path)),
            lambda _: "Claude Code hooks configured",
        )

    def update_shell(self) -> bool:
        return self._fatal_step(
            "Adding shell integration to .bashrc...",
            "Failed to update .bashrc",
            lambda: install_block(self.paths.bashrc_path, self.paths.install_dir),
            lambda _: "Shell integration added to .bashrc (at end for priority)",
        )

    def verify(self) -> bool:
        step = self.console.step("Verifying files...")
        if missing_files(self.paths.install_dir):
            step.warn("Some files may be missing")
            return False
        step.succeed("All required files are in place")
        return True

    def reload(self) -> bool:
        step = self.console.step("Loading shell integration...")
        if reload_shell(self.paths.bashrc_path):
            step.succeed("Shell integration loaded")
            return True
        step.info("Shell integration will load on next terminal start")
        return False

    def run(self) -> InstallResult:
        """Run every step in order.

        Raises:
            InstallError: If one of the first four steps fails.
        """
        result = InstallResult()

        self.console.section("Installation Steps")
        self.create_install_dir()
        result.files_copied = self.copy_scripts()
        result.hooks_added = self.configure_hooks()
        result.is_update = self.update_shell()

        self.console.section("Testing Installation")
        result.verified = self.verify()

        self.console.section("Installation Complete!")
        result.reloaded = self.reload()
        return result
