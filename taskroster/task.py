"""Tasks and their types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

MIN_PRIORITY = 0
MAX_PRIORITY = 100


class TaskType(Enum):
    """The kinds of task, valued by their display names."""

    MEETING = "Meeting"
    PRESENTATION = "Presentation"
    DOCUMENTATION = "Documentation"
    DEVELOPMENT = "Development"
    TESTING = "Testing"
    RESEARCH = "Research"
    TRAINING = "Training"
    MAINTENANCE = "Maintenance"
    CUSTOMER_SUPPORT = "Customer Support"
    GENERAL = "General"

    def __str__(self) -> str:
        return self.value


def task_type_to_string(task_type: object) -> str:
    """Return the display name of ``task_type``, or "Unknown Task"."""
    if isinstance(task_type, TaskType):
        return task_type.value
    return "Unknown Task"


@dataclass(frozen=True)
class Task:
    """A prioritised piece of work; priority is clamped to 0..100."""

    priority: int
    task_type: TaskType = TaskType.GENERAL
    description: str = ""
    task_id: int = 0

    def __post_init__(self) -> None:
        clamped = min(max(self.priority, MIN_PRIORITY), MAX_PRIORITY)
        object.__setattr__(self, "priority", clamped)

    def with_priority(self, priority: int) -> Task:
        """Return a copy with a new (clamped) priority."""
        return replace(self, priority=priority)

    def with_id(self, task_id: int) -> Task:
        """Return a copy with a new id."""
        return replace(self, task_id=task_id)

    def __gt__(self, other: Task) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        if self.priority == other.priority:
            return self.task_id < other.task_id
        return self.priority > other.priority

    def __str__(self) -> str:
        return (
            f"Task ID: {self.task_id}, Priority: {self.priority}, "
            f"Type: {task_type_to_string(self.task_type)}, "
            f"Description: {self.description}"
        )