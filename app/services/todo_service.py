"""
Todo Service - Owns the task list for the running session.

Architecture Decision: Observer Pattern (Qt Signals)
The service holds the current list, applies the pure task list operations and
persists the result. It emits a signal whenever the list is replaced, keeping
it decoupled from the UI.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from app.domain.models import Task
from app.domain.task_list import IdFactory, add_task, delete_task, new_task_id, toggle_task
from app.infra.repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService(QObject):
    """
    State holder for the task list. Knows nothing about the UI.
    """

    # Signals
    tasks_changed = Signal(object)  # the new task list

    def __init__(self, repo: Optional[TodoRepository] = None, id_factory: IdFactory = new_task_id):
        super().__init__()
        self.repo = repo or TodoRepository()
        self.id_factory = id_factory
        self._tasks: List[Task] = []

    @property
    def tasks(self) -> List[Task]:
        return self._tasks

    async def load(self) -> List[Task]:
        """Replace the in-memory list with the stored one."""
        self._set_tasks(await self.repo.load())
        logger.info(f"Loaded {len(self._tasks)} todos")
        return self._tasks

    async def add(self, title: str) -> List[Task]:
        return await self._apply(add_task(self._tasks, title, self.id_factory))

    async def toggle(self, task_id: str) -> List[Task]:
        return await self._apply(toggle_task(self._tasks, task_id))

    async def delete(self, task_id: str) -> List[Task]:
        return await self._apply(delete_task(self._tasks, task_id))

    async def _apply(self, new_tasks: List[Task]) -> List[Task]:
        # Operations hand back the same list object when nothing changed
        if new_tasks is self._tasks:
            return self._tasks
        self._set_tasks(new_tasks)
        if not await self.repo.save(new_tasks):
            logger.warning("Todo list changed but could not be saved")
        return self._tasks

    def _set_tasks(self, tasks: List[Task]):
        self._tasks = tasks
        self.tasks_changed.emit(tasks)
