"""Assigning tasks to a bounded set of people."""

from __future__ import annotations

import sys
from typing import TextIO

from .person import Person
from .sorted_list import SortedList
from .task import Task, TaskType

MAX_PERSONS = 10


class TaskManagerFullError(RuntimeError):
    """Raised when a new person would exceed the manager's capacity."""


class TaskManager:
    """Hands out task ids and keeps up to ``MAX_PERSONS`` people."""

    def __init__(self) -> None:
        self._persons: dict[str, Person] = {}
        self._next_id = 0

    def assign_task(self, person_name: str, task: Task) -> None:
        """Give a copy of ``task`` with a fresh id to ``person_name``.

        Raises TaskManagerFullError if the person is new and there is no room.
        """
        person = self._persons.get(person_name)
        if person is None:
            if len(self._persons) >= MAX_PERSONS:
                raise TaskManagerFullError("TaskManager is FULL")
            person = self._persons[person_name] = Person(person_name)
        person.assign_task(task.with_id(self._next_id))
        self._next_id += 1

    def complete_task(self, person_name: str) -> None:
        """Complete the person's top task; unknown names are ignored."""
        person = self._persons.get(person_name)
        if person is not None:
            person.complete_task()

    def bump_priority_by_type(self, task_type: TaskType, amount: int) -> None:
        """Raise the priority of every task of ``task_type`` by ``amount``.

        Negative amounts are ignored.
        """
        if amount < 0:
            return
        for person in self._persons.values():
            person.tasks = person.tasks.apply(
                lambda task: task.with_priority(task.priority + amount)
                if task.task_type == task_type
                else task
            )

    def all_tasks(self) -> SortedList[Task]:
        """Return every assigned task in one sorted list."""
        return SortedList(
            task for person in self._persons.values() for task in person.tasks
        )

    def tasks_by_type(self, task_type: TaskType) -> SortedList[Task]:
        """Return every assigned task of ``task_type`` in one sorted list."""
        return self.all_tasks().filter(lambda task: task.task_type == task_type)

    def print_all_employees(self, file: TextIO | None = None) -> None:
        """Print each person and their tasks."""
        out = file if file is not None else sys.stdout
        for person in self._persons.values():
            print(person, file=out)

    def print_tasks_by_type(
        self, task_type: TaskType, file: TextIO | None = None
    ) -> None:
        """Print every task of ``task_type``, highest priority first."""
        out = file if file is not None else sys.stdout
        for task in self.tasks_by_type(task_type):
            print(task, file=out)

    def print_all_tasks(self, file: TextIO | None = None) -> None:
        """Print every task, highest priority first."""
        out = file if file is not None else sys.stdout
        for task in self.all_tasks():
            print(task, file=out)