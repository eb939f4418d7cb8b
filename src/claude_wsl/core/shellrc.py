"""Managed integration block in the user's ~/.bashrc.

Everything between START_MARKER and END_MARKER (inclusive) belongs to the
installer and is regenerated on every run. The block is always moved to the
end of the file so it has the final say over the prompt and tab title.
"""

import re
from pathlib import Path
from typing import NamedTuple

START_MARKER = "# @claude-wsl-start"
END_MARKER = "# @claude-wsl-end"

_EXTRA_NEWLINES = re.compile(r"\n{3,}")

BLOCK_TEMPLATE = """{start}
# Claude WSL Integration
# Loaded at the end to ensure highest priority for title overrides
# Error handling: Never let this block prevent shell from starting

_NOTIFIER_DIR="{install_dir}"

# Silent failures only
if [ -n "$_NOTIFIER_DIR" ] 2>/dev/null; then
    if [ -d "$_NOTIFIER_DIR" ] 2>/dev/null && [ -r "$_NOTIFIER_DIR" ] 2>/dev/null; then
        # Optional user configuration
        if [ -f "$_NOTIFIER_DIR/config.sh" ] 2>/dev/null && [ -r "$_NOTIFIER_DIR/config.sh" ] 2>/dev/null; then
            # shellcheck disable=SC1090
            source "$_NOTIFIER_DIR/config.sh" 2>/dev/null || true
        fi

        # Tab title and prompt integration
        if [ -f "$_NOTIFIER_DIR/claude-notify-wrapper.sh" ] 2>/dev/null && [ -r "$_NOTIFIER_DIR/claude-notify-wrapper.sh" ] 2>/dev/null; then
            # shellcheck disable=SC1090
            source "$_NOTIFIER_DIR/claude-notify-wrapper.sh" 2>/dev/null || true
        fi
    fi
fi

unset _NOTIFIER_DIR 2>/dev/null || true
{end}
"""


class BlockSplit(NamedTuple):
    """Shell file content split around the managed block.

    Attributes:
        prefix: Content before the start marker (whole file if no block)
        present: Whether a complete block was found
        suffix: Content after the end marker
    """

    prefix: str
    present: bool
    suffix: str


def parse_block(content: str) -> BlockSplit:
    """Split content around the first complete managed block.

    A start marker with no end marker after it is not a block; the content
    is returned untouched as the prefix.
    """
    start = content.find(START_MARKER)
    if start == -1:
        return BlockSplit(content, False, "")

    end = content.find(END_MARKER, start)
    if end == -1:
        return BlockSplit(content, False, "")

    return BlockSplit(content[:start], True, content[end + len(END_MARKER) :])


def _collapse(text: str) -> str:
    return _EXTRA_NEWLINES.sub("\n\n", text).rstrip()


def strip_block(content: str) -> tuple[str, bool]:
    """Remove the managed block from content.

    When a block is removed, runs of three or more newlines collapse to two
    and trailing whitespace is trimmed.

    Returns:
        Tuple of (cleaned_content, block_was_removed).
    """
    split = parse_block(content)
    if not split.present:
        return content, False

    return _collapse(split.prefix + split.suffix), True


def render_block(install_dir: Path | str) -> str:
    """Render the integration block for install_dir."""
    return BLOCK_TEMPLATE.format(
        start=START_MARKER, end=END_MARKER, install_dir=install_dir
    )


def render(prefix: str, suffix: str, install_dir: Path | str, present: bool = True) -> str:
    """Build new shell file content from a parsed split.

    The surviving content keeps its own text; the fresh block is appended
    at the end on its own line.
    """
    if present:
        body = _collapse(prefix + suffix)
    else:
        body = prefix + suffix

    if body and not body.endswith("\n"):
        body += "\n"
    return body + render_block(install_dir)


def install_block(bashrc_path: Path, install_dir: Path) -> bool:
    """Write the integration block at the end of bashrc_path.

    Returns:
        True if an existing block was replaced (an update).
    """
    content = bashrc_path.read_text(encoding="utf-8") if bashrc_path.exists() else ""

    split = parse_block(content)
    bashrc_path.write_text(
        render(split.prefix, split.suffix, install_dir, present=split.present),
        encoding="utf-8",
    )
    return split.present


def uninstall_block(bashrc_path: Path) -> bool:
    """Remove the integration block from bashrc_path.

    Returns:
        True if a block was removed.
    """
    if not bashrc_path.exists():
        return False

    cleaned, removed = strip_block(bashrc_path.read_text(encoding="utf-8"))
    if not removed:
        return False

    if cleaned:
        cleaned += "\n"
    bashrc_path.write_text(cleaned, encoding="utf-8")
    return True
