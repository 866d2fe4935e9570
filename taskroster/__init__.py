"""Prioritised tasks, people who hold them, and a manager that assigns them."""

__version__ = "0.1.0"
__all__ = ["sorted_list", "task", "person", "task_manager"]