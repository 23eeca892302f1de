"""
Task list operations.

Architecture Decision: Immutable updates
Every operation takes the current list and returns the next one without
touching its input. Whoever owns the list (see TodoService) replaces its
reference with the result, so the operations can be tested without a UI
or a database.
"""

import json
import logging
import uuid
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from app.domain.models import Task

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


class InvalidTaskListError(ValueError):
    """Raised when data does not describe a valid task list."""


def new_task_id() -> str:
    """Default id factory: a random UUID4 in hex form."""
    return uuid.uuid4().hex


def parse_task_records(data: Any, strict: bool = False) -> List[Task]:
    """
    Validate decoded JSON as a list of tasks.

    Args:
        data: Decoded JSON value
        strict: Raise on the first problem instead of skipping bad records,
            and require exact JSON types (string id and title, boolean completed)

    Returns:
        The valid tasks in their original order
    """
    if not isinstance(data, list):
        if strict:
            raise InvalidTaskListError(f"Expected a JSON array, got {type(data).__name__}")
        logger.warning("Stored todos are not a JSON array, ignoring them")
        return []

    tasks: List[Task] = []
    seen_ids = set()
    for index, record in enumerate(data):
        if strict and not (isinstance(record, dict) and isinstance(record.get("id"), str)):
            raise InvalidTaskListError(f"Invalid task record at index {index}")
        try:
            task = Task.model_validate(record, strict=strict)
        except ValidationError as e:
            if strict:
                raise InvalidTaskListError(f"Invalid task record at index {index}") from e
            logger.warning(f"Skipping invalid task record at index {index}: {e.error_count()} error(s)")
            continue

        if task.id in seen_ids:
            if strict:
                raise InvalidTaskListError(f"Duplicate task id {task.id!r} at index {index}")
            logger.warning(f"Skipping task record with duplicate id {task.id!r}")
            continue

        seen_ids.add(task.id)
        tasks.append(task)
    return tasks


def load_tasks(persisted_blob: Optional[str]) -> List[Task]:
    """
    Parse the persisted JSON text into a task list.

    Absent or unparsable text yields an empty list.
    """
    if not persisted_blob:
        return []
    try:
        data = json.loads(persisted_blob)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored todos are not valid JSON: {e}")
        return []
    return parse_task_records(data)


def dump_tasks(tasks: List[Task], indent: Optional[int] = None) -> str:
    """Serialize the task list to JSON text (an array of task records)."""
    return json.dumps([task.model_dump() for task in tasks], indent=indent, ensure_ascii=False)


def add_task(tasks: List[Task], title: str, id_factory: IdFactory = new_task_id) -> List[Task]:
    """
    Append a new open task.

    A blank title is silently rejected: the same list object comes back.
    """
    if not title or not title.strip():
        return tasks
    task = Task(id=id_factory(), title=title.strip(), completed=False)
    return [*tasks, task]


def toggle_task(tasks: List[Task], task_id: str) -> List[Task]:
    """Flip the completed flag of one task. Unknown ids are a no-op."""
    if not any(task.id == task_id for task in tasks):
        return tasks
    return [
        task.model_copy(update={"completed": not task.completed}) if task.id == task_id else task
        for task in tasks
    ]


def delete_task(tasks: List[Task], task_id: str) -> List[Task]:
    """Remove one task. Unknown ids are a no-op."""
    remaining = [task for task in tasks if task.id != task_id]
    if len(remaining) == len(tasks):
        return tasks
    return remaining
