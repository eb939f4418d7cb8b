"""Install command for claude-wsl-integration."""

import click
from rich.markup import escape

from claude_wsl.core.config import InstallConfig
from claude_wsl.errors import InstallError
from claude_wsl.installer import Installer, InstallResult
from claude_wsl.ui import Console

README_URL = "https://github.com/fullstacktard/claude-wsl#readme"


def summary(result: InstallResult, config: InstallConfig) -> str:
    """Build the closing message (rich markup) for a fresh install or an update."""
    check = "[red]✓[/red]"

    if result.is_update:
        lines = [
            "[bold]What's New:[/bold]",
            "",
            f"{check} Hook scripts updated",
            f"{check} Shell integration updated",
            f"{check} Notifications active immediately in Claude Code",
            "",
            "[bold]Next:[/bold] Integration is ready. Start using Claude Code!",
        ]
    else:
        loaded = "Shell integration loaded" if result.reloaded else "Shell integration installed"
        lines = [
            "[bold]You're all set![/bold]",
            "",
            f"{check} Visual notifications enabled",
            f"{check} Tab indicators configured",
            f"{check} {loaded}",
            "",
            "[bold]What you'll see:[/bold]",
            "- Orange circle when Claude Code is ready",
            "- Orange spinner while Claude is thinking",
            "- Bell icon when response is ready",
            "- Toast notification on completion",
        ]

    if not result.reloaded:
        lines += ["", "Open a new terminal (or run 'source ~/.bashrc') to activate."]

    lines += [
        "",
        "[bold]Installation:[/bold]",
        f"[dim]  {escape(str(config.paths.install_dir))}/[/dim]",
        "",
        "[bold]Need help?[/bold]",
        f"[red]{README_URL}[/red]",
    ]
    return "\n".join(lines)


@click.command()
@click.pass_context
def install(ctx: click.Context) -> None:
    """Install the integration (default action).

    This command:

    \b
    1. Copies the notification scripts to ~/.local/share/claude-wsl/
    2. Registers hooks in ~/.claude/settings.json
    3. Adds the shell integration block at the end of ~/.bashrc

    Safe to run again: re-running updates the scripts and the block
    without duplicating hooks.

    Examples:

        claude-wsl-integration install
    """
    config: InstallConfig = ctx.obj["config"]
    console = Console(quiet=config.quiet)

    console.header("Claude WSL", "Visual notifications and tab indicators for Claude Code")

    try:
        result = Installer(config, console=console).run()
    except InstallError as e:
        console.error(f"Error: {e.message}")
        raise SystemExit(1)

    console.panel(
        "Update Complete" if result.is_update else "Setup Complete",
        summary(result, config),
    )
