"""Selecting, listing, dropping and truncating task groups."""

from __future__ import annotations

import sys
from typing import TextIO

from .colors import green
from .models import TodoError
from .storage import FileStorage

_NO_GROUP = "no group selected. use 'usegrp <group_name>' to select a group"


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def create_group(storage: FileStorage, group: str) -> None:
    """Select *group* (lower-cased), creating its empty task file if needed."""
    name = group.lower()
    try:
        storage.group_file.write_text(name, encoding="utf-8")
    except OSError as exc:
        raise TodoError(f"couldn't write to file: {exc}") from exc

    path = storage.group_path(name)
    if path.exists():
        return
    try:
        path.write_text("[]", encoding="utf-8")
    except OSError as exc:
        raise TodoError(f"couldn't create group JSON file: {exc}") from exc


def current_group(storage: FileStorage) -> str:
    """Return the selected group, raising TodoError when none is selected."""
    try:
        text = storage.group_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise TodoError(f"couldn't open groups file: {exc}") from exc
    group = text.strip()
    if not group:
        raise TodoError(_NO_GROUP)
    return group


def list_groups(storage: FileStorage, out: TextIO | None = None) -> None:
    """Print every group, highlighting the selected one in green."""
    stream = _stream(out)
    try:
        entries = sorted(storage.data_folder.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise TodoError(f"couldn't list groups: {exc}") from exc

    try:
        selected = current_group(storage)
    except TodoError:
        selected = ""

    no_groups = "" if entries else "(no groups available)"
    print("Available groups:", no_groups, file=stream)
    for entry in entries:
        if entry.is_dir() or not entry.name.endswith(".json"):
            continue
        name = entry.name[: -len(".json")]
        shown = green(name) if name == selected else name
        print("- " + shown, file=stream)


def drop_group(storage: FileStorage, group: str, out: TextIO | None = None) -> None:
    """Delete *group*'s task file, clearing the selection if it was selected."""
    stream = _stream(out)
    path = storage.group_path(group.lower())
    if not path.exists():
        raise TodoError(f"no group exist named : {group}")
    try:
        path.unlink()
    except OSError as exc:
        raise TodoError(f"Error deleting file: {exc}") from exc

    try:
        selected = current_group(storage)
    except TodoError as exc:
        raise TodoError("fetching current group") from exc

    if selected.lower() == group.lower():
        try:
            storage.group_file.write_text("", encoding="utf-8")
        except OSError as exc:
            raise TodoError(f"couldn't write to file: {exc}") from exc
    print("success: Dropped group - ", group, file=stream)


def truncate_group(storage: FileStorage, group: str, out: TextIO | None = None) -> None:
    """Remove every task from *group*, keeping the group itself."""
    stream = _stream(out)
    path = storage.group_path(group.lower())
    if not path.exists():
        raise TodoError(f"no group exist named : {group}")
    try:
        path.write_text("[]", encoding="utf-8")
    except OSError as exc:
        raise TodoError(f"Error truncating file: {exc}") from exc
    print("success: Truncated group - ", group, file=stream)