"""CLI entry point for claude-wsl-integration.

Usage:
    claude-wsl-integration              # Install the integration
    claude-wsl-integration install      # Same as above (alias: init)
    claude-wsl-integration uninstall    # Remove the integration
    claude-wsl-integration help         # Show usage
"""

import traceback

import click

from claude_wsl.commands.install import install
from claude_wsl.commands.uninstall import uninstall
from claude_wsl.core.config import InstallConfig
from claude_wsl.ui import Console

PROG_NAME = "claude-wsl-integration"


class IntegrationGroup(click.Group):
    """Command group that reports unknown commands and unexpected errors.

    Both end the process with status 1.
    """

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0] if args else None
        if cmd_name is not None and self.get_command(ctx, cmd_name) is None:
            console = Console()
            console.error(f"Unknown command: {cmd_name}")
            console.error(f"Run '{PROG_NAME} help' for usage information")
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            Console().error(f"Error: {e}")
            config = (ctx.obj or {}).get("config")
            if config is not None and config.debug:
                click.echo(traceback.format_exc(), err=True)
            ctx.exit(1)


@click.group(
    cls=IntegrationGroup,
    invoke_without_command=True,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
@click.version_option(package_name=PROG_NAME, prog_name=PROG_NAME)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Claude WSL Integration - Visual notifications for Claude Code.

    Running without a subcommand installs the integration.

    Examples:

    \b
        claude-wsl-integration            # Install (default action)
        claude-wsl-integration init       # Explicitly install
        claude-wsl-integration install    # Same as init
    """
    ctx.ensure_object(dict)
    # Environment is read here and nowhere else
    if "config" not in ctx.obj:
        ctx.obj["config"] = InstallConfig.from_env()

    if ctx.invoked_subcommand is None:
        ctx.invoke(install)


@click.command("init")
@click.pass_context
def init(ctx: click.Context) -> None:
    """Alias for install."""
    ctx.invoke(install)


@click.command("help")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Show this help message."""
    click.echo(ctx.parent.get_help())


# Register commands
main.add_command(install)
main.add_command(init)
main.add_command(uninstall)
main.add_command(help_command)
