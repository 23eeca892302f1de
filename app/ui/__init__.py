"""UI layer - PySide6 GUI components"""

from .app import TodoApp
from .main_window import MainWindow
from .task_dialogs import AddTodoDialog
from .settings_dialog import SettingsDialog

__all__ = ["TodoApp", "MainWindow", "AddTodoDialog", "SettingsDialog"]
