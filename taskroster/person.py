"""People who hold tasks."""

from __future__ import annotations

from .sorted_list import SortedList
from .task import Task


class Person:
    """A named person holding tasks ordered by priority."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.tasks: SortedList[Task] = SortedList()

    def assign_task(self, task: Task) -> None:
        """Add ``task`` to this person's tasks."""
        self.tasks.insert(task)

    def complete_task(self) -> int:
        """Remove the highest-priority task and return its id.

        Raises RuntimeError if the person has no tasks.
        """
        task = self.highest_priority_task()
        self.tasks.remove(task)
        return task.task_id

    def highest_priority_task(self) -> Task:
        """Return the highest-priority task.

        Raises RuntimeError if the person has no tasks.
        """
        if not self.tasks:
            raise RuntimeError("No tasks assigned to this person.")
        return self.tasks.first()

    def __str__(self) -> str:
        lines = [f"Person: {self.name}", *(str(task) for task in self.tasks)]
        return "".join(f"{line}\n" for line in lines)