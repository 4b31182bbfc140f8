import string
from datetime import datetime, timedelta, timezone

import pytest

from gotask.models import (
    ZERO_TIME,
    Item,
    TodoError,
    format_time,
    new_id,
    parse_time,
)


def test_new_id_is_32_hex_chars():
    ident = new_id()
    assert len(ident) == 32
    assert set(ident) <= set(string.hexdigits.lower())


def test_new_id_is_random():
    assert len({new_id() for _ in range(50)}) == 50


def test_zero_time_encoding():
    assert format_time(ZERO_TIME) == "0001-01-01T00:00:00Z"


def test_time_round_trip_with_offset():
    moment = datetime(2024, 5, 1, 10, 20, 30, 120000, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert parse_time(format_time(moment)) == moment
    assert format_time(moment).endswith("+05:30")


def test_time_round_trip_negative_offset():
    moment = datetime(2023, 12, 31, 23, 59, 59, tzinfo=timezone(-timedelta(hours=7)))
    text = format_time(moment)
    assert parse_time(text) == moment
    assert "." not in text


def test_parse_truncates_nanoseconds():
    parsed = parse_time("2024-05-01T10:20:30.123456789Z")
    assert parsed.microsecond == 123456
    assert parsed.tzinfo == timezone.utc


@pytest.mark.parametrize("bad", ["", "yesterday", "2024-13-01T00:00:00Z", "2024-01-01 00:00:00"])
def test_parse_rejects_invalid(bad):
    with pytest.raises(TodoError):
        parse_time(bad)


def test_item_round_trip_pending():
    item = Item(id=new_id(), group="work", task="write report")
    restored = Item.from_dict(item.to_dict())
    assert restored == item
    assert restored.completed_at is None


def test_item_round_trip_done():
    now = datetime.now().astimezone()
    item = Item(id="abc", group="home", task="dishes", done=True, created_at=now, completed_at=now)
    assert Item.from_dict(item.to_dict()) == item


def test_to_dict_keys_and_zero_completed():
    item = Item(id="abc", group="home", task="dishes")
    data = item.to_dict()
    assert list(data) == ["Id", "Group", "Task", "Done", "CreatedAt", "CompletedAt"]
    assert data["CompletedAt"] == format_time(ZERO_TIME)
    assert data["Done"] is False


def test_from_dict_is_case_insensitive_and_defaults():
    item = Item.from_dict({"id": "x1", "TASK": "read", "done": True})
    assert item.id == "x1"
    assert item.task == "read"
    assert item.group == ""
    assert item.done is True
    assert item.created_at == ZERO_TIME


@pytest.mark.parametrize("bad", [[], "text", {"Done": "yes"}, {"Id": 5}])
def test_from_dict_rejects_bad_data(bad):
    with pytest.raises(TodoError):
        Item.from_dict(bad)