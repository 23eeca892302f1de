import asyncio
import logging
from pathlib import Path
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QTabWidget, QWidget, QFormLayout,
    QDialogButtonBox, QMessageBox, QLabel, QPushButton,
    QFileDialog, QComboBox
)
from PySide6.QtCore import Signal, QUrl
from PySide6.QtGui import QDesktopServices

from app.domain.models import UserPreferences
from app.infra.repository import UserRepository
from app.services import TodoService, TransferService, TransferError, ImportFormatError
from app.i18n import tr, set_language

logger = logging.getLogger(__name__)


class SettingsDialog(QDialog):
    """
    Application-wide settings: appearance and todo export/import.
    """

    # Emitted after a successful import, so the list can reload
    data_imported = Signal()
    # Emitted when theme changes, so the app can apply the new theme
    theme_changed = Signal(str)
    # Emitted when language changes
    language_changed = Signal(str)

    def __init__(self, todo_service: TodoService, transfer_service: TransferService,
                 user_repo: UserRepository, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("settings.title"))
        self.resize(450, 300)

        self.loop = asyncio.get_event_loop()
        self.todo_service = todo_service
        self.transfer_service = transfer_service
        self.repo = user_repo
        self.prefs = UserPreferences()  # Default

        self._setup_ui()
        self._load_data()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.tabs = QTabWidget()

        # Tab 1: General
        self.general_tab = QWidget()
        self._setup_general_tab()
        self.tabs.addTab(self.general_tab, tr("settings.general"))

        # Tab 2: Data
        self.data_tab = QWidget()
        self._setup_data_tab()
        self.tabs.addTab(self.data_tab, tr("settings.data"))

        layout.addWidget(self.tabs)

        self.btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        self.btns.button(QDialogButtonBox.Save).setText(tr("dialog.save"))
        self.btns.button(QDialogButtonBox.Cancel).setText(tr("dialog.cancel"))
        self.btns.accepted.connect(self._save)
        self.btns.rejected.connect(self.reject)
        layout.addWidget(self.btns)

    def _setup_general_tab(self):
        form = QFormLayout(self.general_tab)

        self.combo_theme = QComboBox()
        self.combo_theme.addItem(tr("settings.theme_auto"), "auto")
        self.combo_theme.addItem(tr("settings.theme_light"), "light")
        self.combo_theme.addItem(tr("settings.theme_dark"), "dark")
        form.addRow(tr("settings.theme"), self.combo_theme)

        self.combo_language = QComboBox()
        self.combo_language.addItem(tr("settings.language_auto"), "auto")
        self.combo_language.addItem(tr("settings.language_en"), "en")
        self.combo_language.addItem(tr("settings.language_de"), "de")
        form.addRow(tr("settings.language"), self.combo_language)

    def _setup_data_tab(self):
        layout = QVBoxLayout(self.data_tab)

        self.btn_export = QPushButton(f"📤 {tr('settings.export')}")
        self.btn_export.clicked.connect(self._export)
        layout.addWidget(self.btn_export)

        self.btn_import = QPushButton(f"📥 {tr('settings.import')}")
        self.btn_import.clicked.connect(self._import)
        layout.addWidget(self.btn_import)

        export_dir = self.transfer_service.get_export_dir()
        self.label_export_dir = QLabel(f"{tr('settings.export_location')} {export_dir}")
        self.label_export_dir.setStyleSheet("color: #666; font-style: italic;")
        self.label_export_dir.setWordWrap(True)
        layout.addWidget(self.label_export_dir)
        layout.addStretch()

    def _load_data(self):
        try:
            self.prefs = self.loop.run_until_complete(self.repo.get_preferences())

            theme_index = self.combo_theme.findData(self.prefs.theme)
            if theme_index >= 0:
                self.combo_theme.setCurrentIndex(theme_index)

            lang_index = self.combo_language.findData(self.prefs.language)
            if lang_index >= 0:
                self.combo_language.setCurrentIndex(lang_index)
        except Exception as e:
            QMessageBox.critical(self, tr("error"), tr("settings.load_error", error=e))

    def _export(self):
        try:
            export_file = self.transfer_service.export_tasks(self.todo_service.tasks)
        except TransferError:
            QMessageBox.warning(self, tr("error"), tr("transfer.export_error"))
            return

        # Hand the file to the platform by opening its folder
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(export_file.parent)))
        QMessageBox.information(self, tr("info"), tr("transfer.export_done", path=export_file))

    def _import(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, tr("settings.import"), "", tr("transfer.import_filter")
        )
        if not file_path:
            return

        try:
            self.loop.run_until_complete(self.transfer_service.import_tasks(Path(file_path)))
        except ImportFormatError:
            QMessageBox.warning(self, tr("error"), tr("transfer.import_invalid"))
            return
        except TransferError:
            QMessageBox.critical(self, tr("error"), tr("transfer.import_error"))
            return

        QMessageBox.information(self, tr("info"), tr("transfer.import_done"))
        self.data_imported.emit()
        # Back to the list
        self.reject()

    def _save(self):
        try:
            old_theme, old_language = self.prefs.theme, self.prefs.language
            self.prefs.theme = self.combo_theme.currentData()
            self.prefs.language = self.combo_language.currentData()

            self.loop.run_until_complete(self.repo.update_preferences(self.prefs))

            if self.prefs.theme != old_theme:
                self.theme_changed.emit(self.prefs.theme)
            if self.prefs.language != old_language:
                set_language(self.prefs.language)
                self.language_changed.emit(self.prefs.language)
            self.accept()
        except Exception as e:
            logger.exception("Failed to save settings")
            QMessageBox.critical(self, tr("error"), tr("settings.save_error", error=e))
