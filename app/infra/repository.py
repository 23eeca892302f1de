"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Switch storage implementations
- Mock data for testing
- Keep the task list format in one place
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional
import json
import logging

from pydantic import ValidationError
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import Task, UserPreferences
from app.domain.task_list import dump_tasks, load_tasks
from app.infra.db import KeyValueModel, get_engine

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Handles User Preferences persistence (JSON file based).
    """

    def __init__(self, prefs_path: Optional[Path] = None):
        if prefs_path is None:
            from app.infra.config import get_settings
            prefs_path = get_settings().get_prefs_path()
        self.prefs_path = prefs_path

    async def get_preferences(self) -> UserPreferences:
        """Get current user preferences"""
        if not self.prefs_path.exists():
            return self._defaults()

        try:
            with open(self.prefs_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return UserPreferences(**data)
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Error loading prefs: {e}")
            return self._defaults()

    async def update_preferences(self, prefs: UserPreferences) -> None:
        """Update user preferences"""
        try:
            self.prefs_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.prefs_path, 'w', encoding='utf-8') as f:
                json.dump(prefs.model_dump(), f, indent=2)
        except OSError as e:
            logger.error(f"Error saving prefs: {e}")

    @staticmethod
    def _defaults() -> UserPreferences:
        from app.infra.config import get_settings
        return get_settings().preferences.model_copy()


class KeyValueRepository:
    """
    The local key-value store: one text value per key.
    """

    def __init__(self, session: Optional[AsyncSession] = None):
        self.session = session

    async def _get_session(self) -> AsyncSession:
        """Get session - either injected or create new one"""
        if self.session:
            return self.session
        engine = get_engine()
        return engine.get_session()

    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent"""
        session = await self._get_session()
        async with session:
            result = await session.execute(
                select(KeyValueModel.value).where(KeyValueModel.key == key)
            )
            return result.scalar_one_or_none()

    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""
        session = await self._get_session()
        async with session:
            await session.merge(KeyValueModel(key=key, value=value, updated_at=datetime.now()))
            await session.commit()

    async def delete(self, key: str) -> bool:
        """Remove key. Returns True if something was deleted."""
        session = await self._get_session()
        async with session:
            result = await session.execute(
                delete(KeyValueModel).where(KeyValueModel.key == key)
            )
            await session.commit()
            return result.rowcount > 0


class TodoRepository:
    """
    Persists the whole task list as one JSON blob under a fixed key.

    Every save rewrites the full list; there is no incremental update.
    """

    STORAGE_KEY = "todos"

    def __init__(self, store: Optional[KeyValueRepository] = None):
        self.store = store or KeyValueRepository()

    async def load(self) -> List[Task]:
        """Load the stored list. Missing or unreadable data gives an empty list."""
        try:
            blob = await self.store.get(self.STORAGE_KEY)
        except (SQLAlchemyError, OSError):
            logger.exception("Failed to load todos")
            return []
        return load_tasks(blob)

    async def save(self, tasks: List[Task]) -> bool:
        """Replace the stored list. Returns False if the write failed."""
        try:
            await self.store.set(self.STORAGE_KEY, dump_tasks(tasks))
        except (SQLAlchemyError, OSError):
            logger.exception("Failed to save todos")
            return False
        logger.debug(f"Saved {len(tasks)} todos")
        return True
