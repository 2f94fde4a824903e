from datetime import datetime, timezone

import pytest

from taskmgr.cli import StatusShortcut
from taskmgr.manager import TaskLookupError, TaskManager
from taskmgr.storage import JsonStorage
from taskmgr.task import Task, TaskStatus


@pytest.fixture
def manager(tmp_path):
    mgr = TaskManager(JsonStorage(tmp_path / "tasks.json"))
    when = datetime(2024, 3, 4, 5, 6, tzinfo=timezone.utc)
    mgr.tasks = [
        Task("abc111", "first", TaskStatus.TODO, when),
        Task("abd222", "second", TaskStatus.TODO, when),
        Task("xyz333", "abcdefghijklmnopqrstuvwxyz", TaskStatus.IN_PROGRESS, when),
    ]
    return mgr


def test_add_task(manager):
    task = manager.add_task("new one")
    assert manager.tasks[-1] is task
    assert task.description == "new one"
    assert task.status is TaskStatus.TODO


def test_find_unique_prefix(manager):
    assert manager.find_task_by_prefix("abc").id == "abc111"


def test_find_none(manager):
    with pytest.raises(TaskLookupError) as info:
        manager.find_task_by_prefix("q")
    assert str(info.value) == "No task found with ID starting with 'q'"


def test_find_ambiguous(manager):
    with pytest.raises(TaskLookupError) as info:
        manager.find_task_by_prefix("ab")
    message = str(info.value)
    assert message.startswith("Ambiguous ID 'ab'. Multiple tasks match:\n")
    assert "  abc1 - first" in message
    assert "  abd2 - second" in message
    assert message.endswith("Please be more specific.")


def test_update_status(manager):
    manager.update_task_status("xyz", StatusShortcut.C)
    assert manager.tasks[2].status is TaskStatus.COMPLETE


def test_update_status_missing(manager):
    with pytest.raises(TaskLookupError):
        manager.update_task_status("nope", StatusShortcut.P)


def test_delete(manager):
    manager.delete_task("abd")
    assert [t.id for t in manager.tasks] == ["abc111", "xyz333"]


def test_delete_ambiguous_keeps_tasks(manager):
    with pytest.raises(TaskLookupError):
        manager.delete_task("a")
    assert len(manager.tasks) == 3


def test_complete_task_exact_id(manager):
    assert manager.complete_task("abc") is False
    assert manager.complete_task("abc111") is True
    assert manager.tasks[0].status is TaskStatus.COMPLETE


def test_save_and_load(manager, tmp_path):
    manager.save()
    other = TaskManager(JsonStorage(tmp_path / "tasks.json"))
    other.load()
    assert other.tasks == manager.tasks


def test_format_tasks(manager):
    lines = manager.format_tasks().splitlines()
    assert lines[0].split() == ["ID", "Description", "Status", "Created"]
    assert lines[1] == "-" * 60
    assert len(lines) == 5
    assert "abcdefghijklmno..." in lines[4]
    assert "InProgress" in lines[4]
    assert lines[4].endswith("2024-03-04 05:06")


def test_show_tasks_prints_table(manager, capsys):
    manager.show_tasks()
    assert capsys.readouterr().out == manager.format_tasks() + "\n"