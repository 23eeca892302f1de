"""
Main Window - The task list.

Architecture Decision: Simplicity first
One list of checkable rows. Adding happens in a small dialog, export and
import live in the settings dialog.
"""

import asyncio
from typing import List
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QListWidget, QListWidgetItem, QPushButton, QMenu, QStackedWidget
)
from PySide6.QtCore import Qt, Signal, QDate, QLocale, QTimer
from PySide6.QtGui import QFont, QShortcut, QKeySequence, QAction

from app.domain.models import Task
from app.services import TodoService, TransferService
from app.infra.repository import UserRepository
from app.i18n import tr
from .task_dialogs import AddTodoDialog
from .settings_dialog import SettingsDialog

TASK_ID_ROLE = Qt.UserRole


class MainWindow(QMainWindow):
    """
    Shows the task list with a header, the add button and the settings button.

    Clicking a row's checkbox toggles it; Delete or the context menu removes it.
    """

    # Re-emitted from the settings dialog so the app can restyle
    theme_changed = Signal(str)

    def __init__(self, todo_service: TodoService, transfer_service: TransferService,
                 user_repo: UserRepository, parent=None):
        super().__init__(parent)
        self.todo_service = todo_service
        self.transfer_service = transfer_service
        self.user_repo = user_repo
        self.loop = asyncio.get_event_loop()

        self.setWindowTitle(tr("main.title"))
        self.resize(420, 600)

        self._setup_ui()
        self._setup_shortcuts()
        self.todo_service.tasks_changed.connect(self._refresh_list)
        self._refresh_list(self.todo_service.tasks)

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(20, 20, 20, 20)

        # Header row: title and settings button
        header_layout = QHBoxLayout()
        self.header_label = QLabel(tr("main.header"))
        header_font = QFont()
        header_font.setPointSize(18)
        header_font.setBold(True)
        self.header_label.setFont(header_font)
        header_layout.addWidget(self.header_label)
        header_layout.addStretch()

        self.settings_btn = QPushButton("⚙")
        self.settings_btn.setFixedSize(32, 32)
        self.settings_btn.setToolTip(tr("main.settings"))
        self.settings_btn.setCursor(Qt.PointingHandCursor)
        self.settings_btn.clicked.connect(self._open_settings)
        header_layout.addWidget(self.settings_btn)
        layout.addLayout(header_layout)

        self.date_label = QLabel(QLocale().toString(QDate.currentDate(), "d MMM"))
        self.date_label.setStyleSheet("color: gray;")
        layout.addWidget(self.date_label)

        # List or placeholder
        self.stack = QStackedWidget()

        self.list_widget = QListWidget()
        self.list_widget.itemChanged.connect(self._on_item_changed)
        self.list_widget.setContextMenuPolicy(Qt.CustomContextMenu)
        self.list_widget.customContextMenuRequested.connect(self._show_context_menu)
        self.stack.addWidget(self.list_widget)

        self.empty_label = QLabel(tr("main.empty"))
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: gray;")
        self.stack.addWidget(self.empty_label)

        layout.addWidget(self.stack, stretch=1)

        # Add button, bottom right
        add_layout = QHBoxLayout()
        add_layout.addStretch()
        self.add_btn = QPushButton("+")
        self.add_btn.setFixedSize(48, 48)
        self.add_btn.setToolTip(tr("main.add"))
        self.add_btn.setCursor(Qt.PointingHandCursor)
        self.add_btn.setStyleSheet("""
            QPushButton {
                background-color: #1976d2;
                color: white;
                border: none;
                border-radius: 24px;
                font-size: 24px;
                font-weight: bold;
            }
            QPushButton:hover {
                background-color: #1565c0;
            }
        """)
        self.add_btn.clicked.connect(self._add_task)
        add_layout.addWidget(self.add_btn)
        layout.addLayout(add_layout)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        delete_shortcut = QShortcut(QKeySequence(Qt.Key_Delete), self.list_widget)
        delete_shortcut.activated.connect(self._delete_selected)

        add_shortcut = QShortcut(QKeySequence.New, self)
        add_shortcut.activated.connect(self._add_task)

    def _refresh_list(self, tasks: List[Task]):
        """Rebuild the rows from the given list"""
        self.list_widget.blockSignals(True)
        self.list_widget.clear()
        for task in tasks:
            item = QListWidgetItem(task.title)
            item.setData(TASK_ID_ROLE, task.id)
            item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
            item.setCheckState(Qt.Checked if task.completed else Qt.Unchecked)
            font = item.font()
            font.setStrikeOut(task.completed)
            item.setFont(font)
            if task.completed:
                item.setForeground(Qt.gray)
            self.list_widget.addItem(item)
        self.list_widget.blockSignals(False)

        self.stack.setCurrentWidget(self.list_widget if tasks else self.empty_label)

    def _on_item_changed(self, item: QListWidgetItem):
        """Checkbox clicked"""
        task_id = item.data(TASK_ID_ROLE)
        # The list is rebuilt on change, so leave the item signal handler first
        QTimer.singleShot(0, lambda: self.loop.run_until_complete(self.todo_service.toggle(task_id)))

    def _add_task(self):
        dialog = AddTodoDialog(self)
        if dialog.exec():
            self.loop.run_until_complete(self.todo_service.add(dialog.title()))

    def _show_context_menu(self, pos):
        item = self.list_widget.itemAt(pos)
        if item is None:
            return

        menu = QMenu(self)
        delete_action = QAction(tr("main.delete"), self)
        delete_action.triggered.connect(lambda: self._delete_item(item))
        menu.addAction(delete_action)
        menu.exec(self.list_widget.mapToGlobal(pos))

    def _delete_selected(self):
        item = self.list_widget.currentItem()
        if item is not None:
            self._delete_item(item)

    def _delete_item(self, item: QListWidgetItem):
        task_id = item.data(TASK_ID_ROLE)
        self.loop.run_until_complete(self.todo_service.delete(task_id))

    def _open_settings(self):
        dialog = SettingsDialog(self.todo_service, self.transfer_service, self.user_repo, self)
        dialog.theme_changed.connect(self.theme_changed.emit)
        dialog.language_changed.connect(self.retranslate_ui)
        dialog.data_imported.connect(self._reload)
        dialog.exec()

    def _reload(self):
        """Re-read the stored list after an import"""
        self.loop.run_until_complete(self.todo_service.load())

    def retranslate_ui(self):
        """Update strings when language changes"""
        self.setWindowTitle(tr("main.title"))
        self.header_label.setText(tr("main.header"))
        self.date_label.setText(QLocale().toString(QDate.currentDate(), "d MMM"))
        self.empty_label.setText(tr("main.empty"))
        self.add_btn.setToolTip(tr("main.add"))
        self.settings_btn.setToolTip(tr("main.settings"))
