"""Installer configuration.

The process environment is read once, at the CLI boundary, and turned into an
InstallConfig that is passed into the installer.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

APP_NAME = "claude-wsl"

WRAPPER_SCRIPT = "notify-wrapper.sh"
NOTIFY_SCRIPT = "notify.sh"


def get_template_dir() -> Path:
    """Get the directory holding the bundled notification scripts."""
    return Path(__file__).resolve().parent.parent / "templates" / "notify"


@dataclass(frozen=True)
class InstallPaths:
    """Resolved absolute paths for one installer run.

    Attributes:
        install_dir: Where the notification scripts are copied
        settings_path: Claude Code's settings.json
        bashrc_path: The shell startup file receiving the integration block
        template_dir: Source directory of the payload scripts
    """

    install_dir: Path
    settings_path: Path
    bashrc_path: Path
    template_dir: Path

    @classmethod
    def from_home(cls, home: Path, template_dir: Path | None = None) -> "InstallPaths":
        home = Path(home).expanduser().absolute()
        return cls(
            install_dir=home / ".local" / "share" / APP_NAME,
            settings_path=home / ".claude" / "settings.json",
            bashrc_path=home / ".bashrc",
            template_dir=template_dir or get_template_dir(),
        )

    @property
    def wrapper_path(self) -> Path:
        """The script every registered hook invokes."""
        return self.install_dir / WRAPPER_SCRIPT


@dataclass(frozen=True)
class InstallConfig:
    """Everything the installer needs to know about its environment.

    Attributes:
        paths: Resolved install paths
        quiet: Suppress step markers and decorative output
        debug: Print tracebacks for unexpected errors
    """

    paths: InstallPaths
    quiet: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "InstallConfig":
        """Build a config from environment variables.

        HOME selects the home directory (Path.home() when unset).
        CI=true or SUPPRESS_SPINNER=true enables quiet mode.
        Any non-empty DEBUG enables tracebacks.
        """
        if env is None:
            env = os.environ

        home = env.get("HOME")
        quiet = env.get("CI") == "true" or env.get("SUPPRESS_SPINNER") == "true"
        return cls(
            paths=InstallPaths.from_home(Path(home) if home else Path.home()),
            quiet=quiet,
            debug=bool(env.get("DEBUG")),
        )
