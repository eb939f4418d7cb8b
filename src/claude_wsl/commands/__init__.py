"""CLI commands for claude-wsl-integration."""
