"""Claude WSL - visual notifications and tab indicators for Claude Code on WSL."""

__version__ = "1.0.0"
