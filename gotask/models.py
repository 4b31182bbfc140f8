"""Todo item model, identifiers and timestamp encoding."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


class TodoError(Exception):
    """Raised when a todo operation cannot be carried out."""


def new_id() -> str:
    """Return a random 32-character hexadecimal identifier."""
    return secrets.token_hex(16)


def _now() -> datetime:
    return datetime.now().astimezone()


def format_time(moment: datetime) -> str:
    """Encode *moment* as an RFC 3339 timestamp with trimmed fractional seconds."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    seconds = int(offset.total_seconds())
    if seconds == 0:
        return text + "Z"
    sign = "+" if seconds > 0 else "-"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_time(text: str) -> datetime:
    """Decode an RFC 3339 timestamp; sub-microsecond digits are dropped."""
    match = _RFC3339.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise TodoError(f"invalid timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6])
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        delta = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone.utc if not delta else timezone(sign * delta)
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), micro, tzinfo=tz,
        )
    except ValueError as exc:
        raise TodoError(f"invalid timestamp: {text!r}") from exc


def _expect(value: Any, kind: type, name: str, default: Any) -> Any:
    if value is None:
        return default
    if not isinstance(value, kind):
        raise TodoError(f"field {name} has the wrong type: {value!r}")
    return value


@dataclass
class Item:
    """A single task belonging to a group."""

    id: str
    group: str
    task: str
    done: bool = False
    created_at: datetime = field(default_factory=_now)
    completed_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping stored on disk."""
        return {
            "Id": self.id,
            "Group": self.group,
            "Task": self.task,
            "Done": self.done,
            "CreatedAt": format_time(self.created_at),
            "CompletedAt": format_time(self.completed_at or ZERO_TIME),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Item:
        """Build an item from a stored mapping; field names match case-insensitively."""
        if not isinstance(data, dict):
            raise TodoError(f"expected an object for a todo item, got {data!r}")
        fields = {str(key).lower(): value for key, value in data.items()}
        created = _expect(fields.get("createdat"), str, "CreatedAt", None)
        completed = _expect(fields.get("completedat"), str, "CompletedAt", None)
        completed_at = parse_time(completed) if completed is not None else None
        if completed_at == ZERO_TIME:
            completed_at = None
        return cls(
            id=_expect(fields.get("id"), str, "Id", ""),
            group=_expect(fields.get("group"), str, "Group", ""),
            task=_expect(fields.get("task"), str, "Task", ""),
            done=_expect(fields.get("done"), bool, "Done", False),
            created_at=parse_time(created) if created is not None else ZERO_TIME,
            completed_at=completed_at,
        )