import re

import pytest

from gotask.groups import create_group
from gotask.models import Item, TodoError
from gotask.storage import FileStorage
from gotask.todo import Todos


@pytest.fixture
def storage(tmp_path):
    fs = FileStorage(tmp_path)
    create_group(fs, "work")
    return fs


def _stored(fs):
    return fs.read(fs.group_path("work"))


def test_add_without_group_raises(tmp_path):
    fs = FileStorage(tmp_path)
    with pytest.raises(TodoError, match="no group selected"):
        Todos().add(fs, "write")


def test_add_stores_item(storage):
    item = Todos().add(storage, "write")
    stored = _stored(storage)
    assert [i.task for i in stored] == ["write"]
    assert stored[0].group == "work"
    assert stored[0].id == item.id
    assert re.fullmatch(r"[0-9a-f]{32}", item.id)
    assert stored[0].done is False


def test_add_appends_in_order(storage):
    Todos().add(storage, "first")
    Todos().add(storage, "second")
    assert [i.task for i in _stored(storage)] == ["first", "second"]


def test_add_duplicate_raises(storage):
    Todos().add(storage, "write")
    with pytest.raises(TodoError, match="previous task with the same name already exists"):
        Todos().add(storage, "write")
    assert len(_stored(storage)) == 1


def test_complete_marks_done(storage):
    item = Todos().add(storage, "write")
    Todos().complete(storage, item.id)
    stored = _stored(storage)[0]
    assert stored.done is True
    assert stored.completed_at is not None
    assert stored.completed_at >= stored.created_at


def test_complete_twice_raises(storage):
    item = Todos().add(storage, "write")
    Todos().complete(storage, item.id)
    with pytest.raises(TodoError, match=f"todo with id {item.id} already done"):
        Todos().complete(storage, item.id)


def test_complete_unknown_raises(storage):
    with pytest.raises(TodoError, match="todo with id nope not found"):
        Todos().complete(storage, "nope")


def test_delete_removes_item():
    todos = Todos()
    todos.items.extend([Item(id="a", group="g", task="x"), Item(id="b", group="g", task="y")])
    assert todos.delete("a") is True
    assert [i.id for i in todos] == ["b"]
    with pytest.raises(TodoError, match="todo with id a not found"):
        todos.delete("a")


def test_count_pending():
    todos = Todos()
    todos.items.extend([
        Item(id="a", group="g", task="x"),
        Item(id="b", group="g", task="y", done=True),
        Item(id="c", group="g", task="z"),
    ])
    assert todos.count_pending() == len(todos) - 1


def test_render_shows_tasks(storage):
    first = Todos().add(storage, "write")
    Todos().add(storage, "read")
    Todos().complete(storage, first.id)
    table = Todos().render(storage)
    assert "group: WORK" in table
    assert first.id in table
    assert "write" in table and "read" in table
    assert "You have 1 pending todos" in table
    assert "pending" in table


def test_render_without_group_raises(tmp_path):
    with pytest.raises(TodoError, match="no group selected"):
        Todos().render(FileStorage(tmp_path))