"""Core building blocks for the claude-wsl installer."""
