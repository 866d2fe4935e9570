import io

import pytest

from taskroster.task import Task, TaskType
from taskroster.task_manager import TaskManager, TaskManagerFullError


@pytest.fixture
def manager():
    tm = TaskManager()
    tm.assign_task("Alice", Task(1, TaskType.MEETING, "Discuss project goals"))
    tm.assign_task("Bob", Task(2, TaskType.DEVELOPMENT, "Implement feature X"))
    tm.assign_task("Alice", Task(3, TaskType.TESTING, "Test feature X"))
    tm.assign_task("Charlie", Task(4, TaskType.DOCUMENTATION, "Write docs for feature X"))
    tm.assign_task("Bob", Task(5, TaskType.RESEARCH, "Explore new tech"))
    return tm


def test_ids_assigned_in_order(manager):
    descriptions = {task.task_id: task.description for task in manager.all_tasks()}
    assert descriptions[0] == "Discuss project goals"
    assert descriptions[4] == "Explore new tech"
    assert sorted(descriptions) == list(range(5))


def test_all_tasks_sorted_by_priority(manager):
    priorities = [task.priority for task in manager.all_tasks()]
    assert priorities == sorted(priorities, reverse=True)


def test_complete_task_removes_top_task(manager):
    manager.complete_task("Alice")
    descriptions = [task.description for task in manager.all_tasks()]
    assert "Test feature X" not in descriptions
    assert "Discuss project goals" in descriptions
    assert len(descriptions) == 4


def test_complete_task_unknown_person_is_noop(manager):
    manager.complete_task("Nobody")
    assert len(manager.all_tasks()) == 5


def test_complete_task_person_without_tasks_raises():
    tm = TaskManager()
    tm.assign_task("Dana", Task(5, TaskType.GENERAL, "Weekly team meeting"))
    tm.complete_task("Dana")
    with pytest.raises(RuntimeError):
        tm.complete_task("Dana")


def test_bump_priority_by_type(manager):
    manager.bump_priority_by_type(TaskType.DOCUMENTATION, 2)
    docs = list(manager.tasks_by_type(TaskType.DOCUMENTATION))
    assert [(task.priority, task.task_id) for task in docs] == [(4 + 2, 3)]
    research = list(manager.tasks_by_type(TaskType.RESEARCH))
    assert [task.priority for task in research] == [5]


def test_bump_priority_clamps_at_max():
    tm = TaskManager()
    tm.assign_task("Eve", Task(7, TaskType.DEVELOPMENT, "Implement new feature"))
    tm.bump_priority_by_type(TaskType.DEVELOPMENT, 500)
    assert tm.all_tasks().first().priority == 100


def test_bump_negative_amount_ignored(manager):
    before = list(manager.all_tasks())
    manager.bump_priority_by_type(TaskType.DEVELOPMENT, -3)
    assert list(manager.all_tasks()) == before


def test_tasks_by_type_filters(manager):
    testing = list(manager.tasks_by_type(TaskType.TESTING))
    assert [task.description for task in testing] == ["Test feature X"]
    assert list(manager.tasks_by_type(TaskType.TRAINING)) == []


def test_manager_full_raises():
    tm = TaskManager()
    names = ["Alice", "Bob", "Charlixcx", "Dana", "Eve",
             "Frank", "Grace", "SOPHIE", "Hank", "Bonie"]
    for name in names:
        tm.assign_task(name, Task(1, TaskType.GENERAL))
    with pytest.raises(TaskManagerFullError, match="TaskManager is FULL"):
        tm.assign_task("boom", Task(2, TaskType.DOCUMENTATION, "Write README"))
    tm.assign_task("Bob", Task(1, TaskType.TESTING, "Run system tests"))
    assert len(tm.all_tasks()) == len(names) + 1


def test_failed_assignment_does_not_consume_id():
    tm = TaskManager()
    for index in range(10):
        tm.assign_task(f"p{index}", Task(1))
    with pytest.raises(TaskManagerFullError):
        tm.assign_task("extra", Task(1))
    tm.assign_task("p0", Task(1))
    assert sorted(task.task_id for task in tm.all_tasks()) == list(range(11))


def test_print_all_tasks(manager):
    out = io.StringIO()
    manager.print_all_tasks(file=out)
    assert out.getvalue() == "".join(f"{task}\n" for task in manager.all_tasks())


def test_print_tasks_by_type(manager):
    out = io.StringIO()
    manager.print_tasks_by_type(TaskType.RESEARCH, file=out)
    assert out.getvalue() == (
        "Task ID: 4, Priority: 5, Type: Research, Description: Explore new tech\n"
    )


def test_print_all_employees():
    tm = TaskManager()
    tm.assign_task("Alice", Task(1, TaskType.MEETING, "Discuss project goals"))
    out = io.StringIO()
    tm.print_all_employees(file=out)
    assert out.getvalue() == (
        "Person: Alice\n"
        "Task ID: 0, Priority: 1, Type: Meeting, Description: Discuss project goals\n"
        "\n"
    )


def test_print_defaults_to_stdout(manager, capsys):
    manager.print_tasks_by_type(TaskType.TESTING)
    assert "Description: Test feature X" in capsys.readouterr().out