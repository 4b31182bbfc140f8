"""On-disk storage of groups and their todo items."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable

from .models import Item, TodoError

STORE_FOLDER = "store"
CONFIG_FOLDER = "configurations"
DATA_FOLDER = "data"
GROUP_FILE = "group.txt"

_GO_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode(items: Iterable[Item]) -> str:
    text = json.dumps(
        [item.to_dict() for item in items],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    for char, escaped in _GO_ESCAPES.items():
        text = text.replace(char, escaped)
    return text + "\n"


class FileStorage:
    """The store directory layout below *root*, created on construction."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.base_path = Path(root) / STORE_FOLDER
        self.config_folder = self.base_path / CONFIG_FOLDER
        self.data_folder = self.base_path / DATA_FOLDER
        self.group_file = self.config_folder / GROUP_FILE

        for folder in (self.base_path, self.config_folder, self.data_folder):
            folder.mkdir(parents=True, exist_ok=True)
        if not self.group_file.exists():
            self.group_file.touch()

    def group_path(self, group: str) -> Path:
        """Return the JSON file that holds the tasks of *group*."""
        return self.data_folder / f"{group}.json"

    def read(self, file_name: str | os.PathLike[str]) -> list[Item]:
        """Load the items in *file_name*; a missing file holds no items."""
        path = Path(file_name)
        if not path.exists():
            return []
        text = path.read_text(encoding="utf-8")
        stripped = text.lstrip()
        if not stripped:
            raise TodoError(f"{path}: no data to decode")
        try:
            data, _ = json.JSONDecoder().raw_decode(stripped)
        except json.JSONDecodeError as exc:
            raise TodoError(f"{path}: {exc}") from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise TodoError(f"{path}: expected a list of todo items")
        return [Item.from_dict(entry) for entry in data]

    def write(self, file_name: str | os.PathLike[str], items: Iterable[Item]) -> None:
        """Replace the contents of *file_name* with *items* encoded as JSON."""
        Path(file_name).write_text(_encode(items), encoding="utf-8")