"""Hook registration in Claude Code's settings.json.

Hooks are keyed by (event, command). The nested list-of-groups shape that
settings.json uses is only an output format: a command counts as registered
for an event if any descriptor in any group under that event carries it.
"""

import copy
from pathlib import Path

import orjson

from claude_wsl.errors import SettingsError

# Lifecycle events the notification wrapper listens to
HOOK_EVENTS = ("SessionStart", "UserPromptSubmit", "Notification", "Stop")


def hook_descriptor(command: str) -> dict:
    """Build a single command hook descriptor."""
    return {"type": "command", "command": command}


def _event_groups(hooks: dict, event: str) -> list:
    groups = hooks.setdefault(event, [])
    if not isinstance(groups, list):
        raise SettingsError(f"hooks.{event} in settings.json must be a list")
    return groups


def _get_hooks(document: dict) -> dict:
    hooks = document.setdefault("hooks", {})
    if not isinstance(hooks, dict):
        raise SettingsError("'hooks' in settings.json must be an object")
    return hooks


def is_hook_registered(document: dict, event: str, command: str) -> bool:
    """Check whether any group under event already runs command."""
    hooks = document.get("hooks")
    if not isinstance(hooks, dict):
        return False
    groups = hooks.get(event)
    if not isinstance(groups, list):
        return False

    return any(
        isinstance(group, dict)
        and isinstance(group.get("hooks"), list)
        and any(
            isinstance(hook, dict) and hook.get("command") == command
            for hook in group["hooks"]
        )
        for group in groups
    )


def ensure_hook_registered(document: dict, event: str, command: str) -> dict:
    """Return a copy of document with command registered for event.

    When the command is missing, a new group holding exactly one descriptor
    is appended; existing groups are never modified.

    Raises:
        SettingsError: If 'hooks' or the event entry has the wrong JSON type.
    """
    document = copy.deepcopy(document)
    groups = _event_groups(_get_hooks(document), event)

    if not is_hook_registered(document, event, command):
        groups.append({"hooks": [hook_descriptor(command)]})
    return document


def merge_hooks(
    document: dict, command: str, events: tuple[str, ...] = HOOK_EVENTS
) -> tuple[dict, list[str]]:
    """Register command for every event.

    Returns:
        Tuple of (new_document, events_that_received_a_new_group).
    """
    added = []
    for event in events:
        already = is_hook_registered(document, event, command)
        document = ensure_hook_registered(document, event, command)
        if not already:
            added.append(event)
    return document, added


def unregister_hooks(
    document: dict, command: str, events: tuple[str, ...] = HOOK_EVENTS
) -> dict:
    """Return a copy of document without any descriptor running command.

    Groups and events left empty are dropped, as is 'hooks' itself.
    Descriptors for other commands are left alone.
    """
    document = copy.deepcopy(document)
    hooks = document.get("hooks")
    if not isinstance(hooks, dict):
        return document

    for event in events:
        groups = hooks.get(event)
        if not isinstance(groups, list):
            continue

        kept = []
        for group in groups:
            if isinstance(group, dict) and isinstance(group.get("hooks"), list):
                remaining = [
                    hook
                    for hook in group["hooks"]
                    if not (isinstance(hook, dict) and hook.get("command") == command)
                ]
                if not remaining:
                    continue
                group["hooks"] = remaining
            kept.append(group)

        if kept:
            hooks[event] = kept
        else:
            del hooks[event]

    if not hooks:
        del document["hooks"]
    return document


def load_settings(settings_path: Path) -> dict:
    """Read settings.json, returning an empty dict if missing or unparseable.

    Raises:
        OSError: If the file exists but cannot be read.
        SettingsError: If the file is valid JSON but not an object.
    """
    if not settings_path.exists():
        return {}

    content = settings_path.read_bytes()
    if not content.strip():
        return {}
    try:
        settings = orjson.loads(content)
    except orjson.JSONDecodeError:
        return {}
    if not isinstance(settings, dict):
        raise SettingsError("settings.json must be a JSON object")
    return settings


def write_settings(settings_path: Path, settings: dict) -> None:
    """Write settings.json pretty-printed with 2-space indentation."""
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_bytes(orjson.dumps(settings, option=orjson.OPT_INDENT_2))


def install_hooks(settings_path: Path, command: str) -> list[str]:
    """Register command for all notification events in settings.json.

    The whole document is written back even when nothing was added.

    Returns:
        Events that received a new hook group.
    """
    settings, added = merge_hooks(load_settings(settings_path), command)
    write_settings(settings_path, settings)
    return added


def uninstall_hooks(settings_path: Path, command: str) -> bool:
    """Remove command from settings.json.

    Returns:
        True if the file changed.
    """
    if not settings_path.exists():
        return False

    settings = load_settings(settings_path)
    cleaned = unregister_hooks(settings, command)
    if cleaned == settings:
        return False

    write_settings(settings_path, cleaned)
    return True
