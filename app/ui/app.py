"""
Todo Application - Main UI entry point.

Architecture Decision: Presentation Layer
This layer only handles UI logic. Business logic is delegated to Services.
"""

import sys
import asyncio
import logging
from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QIcon, QPixmap, QColor
from PySide6.QtCore import Qt

from app.services import TodoService, TransferService
from app.infra.config import get_settings
from app.infra.db import init_db, get_engine
from app.infra.repository import UserRepository
from app.i18n import set_language, tr
from .main_window import MainWindow

logger = logging.getLogger(__name__)

COLOR_SCHEMES = {
    "dark": Qt.ColorScheme.Dark,
    "light": Qt.ColorScheme.Light,
    "auto": Qt.ColorScheme.Unknown,
}


class TodoApp:
    """
    Main application class wiring services and windows together.

    Follows Clean Architecture: UI delegates to Services, Services use Repositories.
    """

    def __init__(self):
        self.app = QApplication(sys.argv)
        self.app.setWindowIcon(self._create_icon())

        # Settings
        self.settings = get_settings()

        # Event loop for async operations
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)

        # Load user preferences before any window is created
        self.user_repo = UserRepository()
        self.user_prefs = self.loop.run_until_complete(self.user_repo.get_preferences())
        set_language(self.user_prefs.language)
        self.app.setApplicationDisplayName(tr("app.name"))
        self.apply_theme(self.user_prefs.theme)

        # Storage and services
        self.loop.run_until_complete(init_db(self.settings.get_db_url()))
        self.todo_service = TodoService()
        self.transfer_service = TransferService(export_dir=self.settings.export_dir)

        self.main_window = MainWindow(self.todo_service, self.transfer_service, self.user_repo)
        self.main_window.theme_changed.connect(self.apply_theme)

        # Initial load; failures leave the list empty
        self.loop.run_until_complete(self.todo_service.load())

    def _create_icon(self):
        """Plain coloured square used as the window icon"""
        pixmap = QPixmap(16, 16)
        pixmap.fill(QColor("#1976d2"))
        return QIcon(pixmap)

    def apply_theme(self, theme: str):
        """Apply 'light', 'dark' or 'auto' (follows system)."""
        scheme = COLOR_SCHEMES.get(theme, Qt.ColorScheme.Unknown)
        self.app.styleHints().setColorScheme(scheme)

    def run(self) -> int:
        """Show the list window and run the Qt event loop"""
        self.main_window.show()
        try:
            return self.app.exec()
        finally:
            self.loop.run_until_complete(get_engine().dispose())
            self.loop.close()
            logger.info("Application closed")
