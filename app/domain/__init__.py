"""Domain layer - Pure business entities and logic"""

from .models import Task, UserPreferences
from .task_list import (
    InvalidTaskListError,
    add_task,
    delete_task,
    dump_tasks,
    load_tasks,
    new_task_id,
    parse_task_records,
    toggle_task,
)

__all__ = [
    "Task",
    "UserPreferences",
    "InvalidTaskListError",
    "add_task",
    "delete_task",
    "dump_tasks",
    "load_tasks",
    "new_task_id",
    "parse_task_records",
    "toggle_task",
]
