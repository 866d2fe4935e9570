# taskroster

`taskroster` is a small library for giving prioritised tasks to a team and
working through them in priority order.

## Concepts

- **`taskroster.task.Task`**: a frozen dataclass with `priority`, `task_type`
  (a `TaskType`, `GENERAL` by default), `description` and `task_id` fields.
  The priority is clamped to the range 0–100, where 100 is the highest.
  `with_priority()` and `with_id()` return changed copies. `task_a > task_b`
  holds when `task_a` has the higher priority. When the priorities are equal,
  it holds when `task_a` has the lower id.
- **`taskroster.task.TaskType`**: `MEETING`, `PRESENTATION`, `DOCUMENTATION`,
  `DEVELOPMENT`, `TESTING`, `RESEARCH`, `TRAINING`, `MAINTENANCE`,
  `CUSTOMER_SUPPORT` and `GENERAL`. `str()` of a member gives its display name,
  for example `"Customer Support"`. `task_type_to_string()` does the same, and
  returns `"Unknown Task"` for anything that is not a `TaskType`.
- **`taskroster.sorted_list.SortedList`**: keeps its items in descending
  order, as decided by each item's `>` operator. It provides:
  - `insert()`
  - `remove()`, which removes the first equal item and does nothing if there
    is none
  - `first()`, which raises `IndexError` when the list is empty
  - `filter()` and `apply()`, which return new lists
  - `copy()`
  - `len()`
  - iteration
- **`taskroster.person.Person`**: a named person whose tasks are held in the
  `tasks` attribute, a `SortedList`. `assign_task()` adds a task.
  `highest_priority_task()` returns the top task. `complete_task()` removes the
  top task and returns its id. Both raise `RuntimeError` when the person has
  no tasks.
- **`taskroster.task_manager.TaskManager`**: holds up to ten people.
  - `assign_task(name, task)` stores a copy of the task under the next id in
    sequence, starting at 0. It adds the person if they are new. A new person
    beyond the tenth raises `TaskManagerFullError`.
  - `complete_task(name)` completes that person's top task. Names the manager
    does not know are ignored.
  - `bump_priority_by_type(task_type, amount)` raises the priority of every
    task of that type, still capped at 100. A negative amount is ignored.
  - `all_tasks()` and `tasks_by_type(task_type)` return `SortedList`s that
    gather the tasks of every person.

## Example

```python
from taskroster.task import Task, TaskType
from taskroster.task_manager import TaskManager

manager = TaskManager()
manager.assign_task("Alice", Task(1, TaskType.MEETING, "Discuss project goals"))
manager.assign_task("Bob", Task(2, TaskType.DEVELOPMENT, "Implement feature X"))
manager.assign_task("Alice", Task(3, TaskType.TESTING, "Test feature X"))

manager.complete_task("Alice")  # removes "Test feature X"
manager.bump_priority_by_type(TaskType.DEVELOPMENT, 50)

for task in manager.all_tasks():
    print(task)

manager.print_all_employees()
manager.print_tasks_by_type(TaskType.DEVELOPMENT)
```

A task prints as:

```
Task ID: 1, Priority: 52, Type: Development, Description: Implement feature X
```

A person prints as a `Person: <name>` line followed by one line per task.

`print_all_employees()`, `print_all_tasks()` and `print_tasks_by_type()` each
take an optional `file` argument, which defaults to standard output.

## What it does not do

It is a library only. It has no command-line program. It keeps everything in
memory and saves nothing to disk.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```