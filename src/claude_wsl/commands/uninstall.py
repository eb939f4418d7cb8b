"""Uninstall command for claude-wsl-integration.

Removes what install added:
- notification hooks from ~/.claude/settings.json
- the integration block from ~/.bashrc
- the ~/.local/share/claude-wsl directory
"""

import shutil
from pathlib import Path

import click

from claude_wsl.core.config import InstallConfig
from claude_wsl.core.shellrc import uninstall_block
from claude_wsl.errors import ClaudeWslError
from claude_wsl.hooks.settings import uninstall_hooks
from claude_wsl.ui import Console


def remove_install_dir(install_dir: Path) -> bool:
    """Remove the installed scripts.

    Returns:
        True if the directory was removed, False if it didn't exist.
    """
    if install_dir.exists():
        shutil.rmtree(install_dir)
        return True
    return False


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def uninstall(ctx: click.Context, yes: bool) -> None:
    """Remove the integration from your system.

    \b
    1. Removes the notification hooks from ~/.claude/settings.json
    2. Removes the integration block from ~/.bashrc
    3. Removes ~/.local/share/claude-wsl

    Other hooks and the rest of ~/.bashrc are preserved.

    Examples:

        claude-wsl-integration uninstall
        claude-wsl-integration uninstall -y
    """
    config: InstallConfig = ctx.obj["config"]
    paths = config.paths
    console = Console(quiet=config.quiet)

    click.echo("This will remove:")
    click.echo(f"  - Notification hooks from {paths.settings_path}")
    click.echo(f"  - Shell integration from {paths.bashrc_path}")
    click.echo(f"  - Scripts in {paths.install_dir}")
    click.echo()

    if not yes:
        if not click.confirm("Proceed with uninstall?"):
            click.echo("Uninstall cancelled.")
            raise SystemExit(0)

    try:
        hooks_removed = uninstall_hooks(paths.settings_path, str(paths.wrapper_path))
        block_removed = uninstall_block(paths.bashrc_path)
        dir_removed = remove_install_dir(paths.install_dir)
    except (OSError, ClaudeWslError) as e:
        console.error(f"Error: {e}")
        raise SystemExit(1)

    click.echo("Hooks removed." if hooks_removed else "No hooks to remove.")
    click.echo("Shell integration removed." if block_removed else "No shell integration found.")
    click.echo("Scripts removed." if dir_removed else "No scripts found.")
    click.echo()
    click.echo("Claude WSL integration has been uninstalled.")
