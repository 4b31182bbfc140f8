"""Adding, completing, deleting and displaying todo items."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator

from .colors import blue, green, red
from .groups import current_group
from .models import Item, TodoError, new_id
from .storage import FileStorage
from .table import Align, Cell, render_table

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_YELLOW_CIRCLE = "\033[33m●\033[0m"
_GREEN_CIRCLE = "\033[32m●\033[0m"


def _zone_name(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return "UTC"
    local = moment.astimezone()
    if local.utcoffset() == offset and local.tzname():
        return local.tzname() or ""
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{mins:02d}"


def _rfc822(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (
        f"{moment.day:02d} {_MONTHS[moment.month - 1]} {moment.year % 100:02d} "
        f"{moment.hour:02d}:{moment.minute:02d} {_zone_name(moment)}"
    )


class Todos:
    """A working list of todo items for the selected group."""

    def __init__(self) -> None:
        self.items: list[Item] = []

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _load(self, storage: FileStorage) -> tuple[str, list[Item]]:
        group = current_group(storage)
        data = storage.read(storage.group_path(group))
        self.items.extend(data)
        return group, data

    def add(self, storage: FileStorage, task: str) -> Item:
        """Add *task* to the selected group; duplicates are rejected."""
        group, data = self._load(storage)
        if any(item.group == group and item.task == task for item in data):
            raise TodoError("previous task with the same name already exists")
        item = Item(id=new_id(), group=group, task=task)
        self.items.append(item)
        storage.write(storage.group_path(group), self.items)
        return item

    def complete(self, storage: FileStorage, task_id: str) -> Item:
        """Mark the task with *task_id* done and record when."""
        group, _ = self._load(storage)
        for item in self.items:
            if item.id == task_id:
                if item.done:
                    raise TodoError(f"todo with id {task_id} already done")
                item.done = True
                item.completed_at = datetime.now().astimezone()
                storage.write(storage.group_path(group), self.items)
                return item
        raise TodoError(f"todo with id {task_id} not found")

    def delete(self, task_id: str) -> bool:
        """Remove the task with *task_id* from this list."""
        for index, item in enumerate(self.items):
            if item.id == task_id:
                del self.items[index]
                return True
        raise TodoError(f"todo with id {task_id} not found")

    def render(self, storage: FileStorage) -> str:
        """Return the selected group's tasks as a table."""
        group, _ = self._load(storage)
        header = [
            Cell(f"group: {group.upper()}", Align.CENTER),
            Cell("uuid", Align.CENTER),
            Cell("Task", Align.CENTER),
            Cell("Done?", Align.CENTER),
            Cell("CreatedAt", Align.RIGHT),
            Cell("CompletedAt", Align.RIGHT),
        ]
        body = []
        for item in self.items:
            if item.done:
                task, done, circle = green(item.task), green("yes"), _GREEN_CIRCLE
                completed = _rfc822(item.completed_at) if item.completed_at else "pending"
            else:
                task, done, circle = blue(item.task), blue("no"), _YELLOW_CIRCLE
                completed = "pending"
            body.append([
                Cell(circle),
                Cell(item.id),
                Cell(task),
                Cell(done),
                Cell(_rfc822(item.created_at)),
                Cell(completed),
            ])
        footer = [Cell(
            red(f"You have {self.count_pending()} pending todos"),
            Align.CENTER,
            span=6,
        )]
        return render_table(header, body, footer)

    def count_pending(self) -> int:
        """Return how many items are not done."""
        return sum(1 for item in self.items if not item.done)