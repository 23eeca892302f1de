"""
Transfer Service - Exports and imports the task list as a JSON file.

Architecture Decision: Why a plain JSON array?
The export file has exactly the shape of the stored list, so a file written
by one installation can be imported by another and inspected by hand.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from app.domain.models import Task
from app.domain.task_list import InvalidTaskListError, dump_tasks, parse_task_records
from app.infra.repository import TodoRepository

logger = logging.getLogger(__name__)


class TransferError(Exception):
    """Export or import failed."""


class ImportFormatError(TransferError):
    """The imported file is readable JSON but not a valid task list."""


class TransferService:
    """
    Handles file export and import of the task list.
    """

    EXPORT_FILENAME = "todos.json"
    MIME_TYPE = "application/json"

    def __init__(self, repo: Optional[TodoRepository] = None, export_dir: Optional[Path] = None):
        self.repo = repo or TodoRepository()
        self.export_dir = export_dir

    def get_export_dir(self, custom_dir: Optional[Path] = None) -> Path:
        """Get the export directory, using custom or configured default"""
        if custom_dir is not None:
            export_dir = Path(custom_dir)
        elif self.export_dir is not None:
            export_dir = self.export_dir
        else:
            from app.infra.config import get_settings
            export_dir = get_settings().export_dir
        export_dir.mkdir(parents=True, exist_ok=True)
        return export_dir

    def export_tasks(self, tasks: List[Task], directory: Optional[Path] = None) -> Path:
        """
        Write the task list to todos.json.

        Args:
            tasks: The list to export
            directory: Optional target directory

        Returns:
            Path to the written file

        Raises:
            TransferError: If the file could not be written
        """
        try:
            export_file = self.get_export_dir(directory) / self.EXPORT_FILENAME
            export_file.write_text(dump_tasks(tasks, indent=2), encoding='utf-8')
        except OSError as e:
            logger.exception("Export failed")
            raise TransferError(f"Could not write export file: {e}") from e

        logger.info(f"Exported {len(tasks)} todos to {export_file}")
        return export_file

    async def import_tasks(self, import_file: Path) -> List[Task]:
        """
        Replace the stored task list with the contents of a file.

        The file must hold a JSON array of valid task records with unique ids.
        Nothing is stored unless the whole file is accepted.

        Raises:
            ImportFormatError: The file is JSON but not a task list
            TransferError: The file could not be read, parsed or stored
        """
        try:
            content = Path(import_file).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Could not read import file {import_file}")
            raise TransferError(f"Could not read {import_file}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Import file {import_file} is not valid JSON: {e}")
            raise TransferError(f"Not a JSON file: {e}") from e

        try:
            tasks = parse_task_records(data, strict=True)
        except InvalidTaskListError as e:
            logger.warning(f"Rejected import file {import_file}: {e}")
            raise ImportFormatError(str(e)) from e

        if not await self.repo.save(tasks):
            raise TransferError("Imported todos could not be stored")

        logger.info(f"Imported {len(tasks)} todos from {import_file}")
        return tasks
