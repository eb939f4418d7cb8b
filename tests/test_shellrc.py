"""Tests for the managed ~/.bashrc block."""

import re

from claude_wsl.core.shellrc import (
    END_MARKER,
    START_MARKER,
    install_block,
    parse_block,
    render,
    render_block,
    strip_block,
    uninstall_block,
)

INSTALL_DIR = "/home/user/.local/share/claude-wsl"


def _install(content: str) -> str:
    split = parse_block(content)
    return render(split.prefix, split.suffix, INSTALL_DIR, present=split.present)


def test_render_block_shape():
    """Test the block starts and ends with the markers."""
    block = render_block(INSTALL_DIR)
    lines = block.splitlines()

    assert lines[0] == START_MARKER
    assert [line for line in lines if line.strip()][-1] == END_MARKER
    assert f'_NOTIFIER_DIR="{INSTALL_DIR}"' in block
    assert "unset _NOTIFIER_DIR" in block


def test_render_block_guards_every_source():
    """Test each source line swallows failures."""
    lines = [line.strip() for line in render_block(INSTALL_DIR).splitlines()]
    sources = [line for line in lines if line.startswith("source ")]

    assert len(sources) == 2
    assert all(line.endswith("2>/dev/null || true") for line in sources)


def test_parse_block_without_marker():
    """Test content without a block is returned whole."""
    split = parse_block("echo hi\n")

    assert split.prefix == "echo hi\n"
    assert split.present is False
    assert split.suffix == ""


def test_parse_block_splits_around_block():
    """Test prefix and suffix exclude the block, markers included."""
    content = f"before\n{START_MARKER}\nstuff\n{END_MARKER}\nafter\n"

    split = parse_block(content)

    assert split.prefix == "before\n"
    assert split.present is True
    assert split.suffix == "\nafter\n"


def test_parse_block_start_without_end():
    """Test an unterminated start marker is not treated as a block."""
    content = f"before\n{START_MARKER}\nno end here\n"

    assert parse_block(content) == (content, False, "")


def test_parse_block_ignores_end_marker_before_start():
    """Test the end marker must come after the start marker."""
    content = f"{END_MARKER}\nmiddle\n{START_MARKER}\nx\n{END_MARKER}\n"

    split = parse_block(content)

    assert split.prefix == f"{END_MARKER}\nmiddle\n"
    assert split.present is True


def test_fresh_append_keeps_content():
    """Test appending to a file without a block."""
    assert _install("echo hi\n") == "echo hi\n" + render_block(INSTALL_DIR)


def test_fresh_append_adds_missing_newline():
    """Test the block always starts on its own line."""
    assert _install("echo hi") == "echo hi\n" + render_block(INSTALL_DIR)


def test_empty_file_gets_only_block():
    """Test an empty file becomes just the block."""
    assert _install("") == render_block(INSTALL_DIR)


def test_replacement_is_idempotent():
    """Test running twice leaves one block at the end."""
    once = _install("export PATH=$PATH:~/bin\n")
    twice = _install(once)

    assert twice == once
    assert twice.count(START_MARKER) == 1
    assert twice.count(END_MARKER) == 1
    assert twice.endswith(render_block(INSTALL_DIR))


def test_replacement_moves_block_to_end():
    """Test a block in the middle is moved after later content."""
    content = f"alias ll='ls -l'\n{START_MARKER}\nold\n{END_MARKER}\nPS1='$ '\n"

    result = _install(content)

    assert result == "alias ll='ls -l'\n\nPS1='$ '\n" + render_block(INSTALL_DIR)
    assert "old" not in result


def test_replacement_collapses_blank_lines():
    """Test removal leaves no run of more than two blank lines."""
    content = f"one\n\n\n\n\n{START_MARKER}\nold\n{END_MARKER}\n\n\n\n\ntwo\n"

    result = _install(content)
    before_block = result[: result.index(START_MARKER)]

    assert not re.search(r"\n{4,}", before_block)
    assert before_block == "one\n\ntwo\n"


def test_strip_block_without_block_is_untouched():
    """Test strip_block leaves content alone when no block exists."""
    assert strip_block("a\n\n\n\nb\n") == ("a\n\n\n\nb\n", False)


def test_install_block_fresh_then_update(tmp_path):
    """Test install_block reports fresh install then update."""
    bashrc = tmp_path / ".bashrc"
    bashrc.write_text("echo hi\n")

    assert install_block(bashrc, INSTALL_DIR) is False
    assert install_block(bashrc, INSTALL_DIR) is True
    assert bashrc.read_text() == "echo hi\n" + render_block(INSTALL_DIR)


def test_install_block_missing_file(tmp_path):
    """Test install_block creates the shell file."""
    bashrc = tmp_path / ".bashrc"

    assert install_block(bashrc, INSTALL_DIR) is False
    assert bashrc.read_text() == render_block(INSTALL_DIR)


def test_uninstall_block_restores_content(tmp_path):
    """Test uninstall_block removes the block and keeps user content."""
    bashrc = tmp_path / ".bashrc"
    bashrc.write_text("echo hi\n")
    install_block(bashrc, INSTALL_DIR)

    assert uninstall_block(bashrc) is True
    assert bashrc.read_text() == "echo hi\n"
    assert uninstall_block(bashrc) is False
