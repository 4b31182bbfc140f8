"""Command-line entry point for managing grouped todo lists."""

from __future__ import annotations

import sys
from typing import Sequence

from .groups import create_group, drop_group, list_groups, truncate_group
from .models import TodoError
from .storage import FileStorage
from .todo import Todos

VALID_COMMANDS = (
    "usegrp",
    "showgrp",
    "dropgrp",
    "truncategrp",
    "ls",
    "add",
    "done",
)

_MISSING_ARGUMENT = {
    "add": "error: Please provide a group name and a task description.",
    "done": "error: Please provide a task id to mark as done.",
    "usegrp": "Error: Please provide group name to use/create",
    "dropgrp": "Error: Please provide a group name",
    "truncategrp": "Error: Please provide a group name",
}


def _run(storage: FileStorage, command: str, argument: str | None) -> None:
    if command == "add":
        Todos().add(storage, argument or "")
        print("Todo added successfully!")
    elif command == "done":
        Todos().complete(storage, argument or "")
        print(argument, "marked Done")
    elif command == "ls":
        print(Todos().render(storage))
    elif command == "usegrp":
        create_group(storage, argument or "")
        print(f"Using: {argument}")
    elif command == "showgrp":
        list_groups(storage)
    elif command == "dropgrp":
        drop_group(storage, argument or "")
    elif command == "truncategrp":
        truncate_group(storage, argument or "")


def main(argv: Sequence[str] | None = None) -> None:
    """Run one command against the store in the working directory."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        storage = FileStorage(".")
    except OSError as exc:
        print("Error loading store:", exc)
        return

    if not args:
        print("error: Please specify a command")
        return

    command = args[0]
    if command not in VALID_COMMANDS:
        print("error: invalid command", command)
        return

    argument = args[1] if len(args) > 1 else None
    if argument is None and command in _MISSING_ARGUMENT:
        print(_MISSING_ARGUMENT[command])
        return

    try:
        _run(storage, command, argument)
    except (TodoError, OSError) as exc:
        prefix = "error: " if command in ("add", "done") else ""
        print(f"{prefix}{exc}")


if __name__ == "__main__":
    main()