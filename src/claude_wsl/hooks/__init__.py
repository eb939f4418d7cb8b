"""Claude Code hook registration."""
