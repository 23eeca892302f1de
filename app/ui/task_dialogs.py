from PySide6.QtWidgets import QDialog, QVBoxLayout, QLineEdit, QPushButton

from app.i18n import tr


class AddTodoDialog(QDialog):
    """
    Ask for the title of a new todo.

    The dialog only closes with a non-blank title; the caller adds the task.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(tr("add.title"))
        self.setMinimumWidth(360)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText(tr("add.placeholder"))
        self.title_input.returnPressed.connect(self._submit)
        self.title_input.textChanged.connect(self._update_button)
        layout.addWidget(self.title_input)

        self.add_btn = QPushButton(tr("add.button"))
        self.add_btn.setDefault(True)
        self.add_btn.clicked.connect(self._submit)
        layout.addWidget(self.add_btn)

        self._update_button(self.title_input.text())
        self.title_input.setFocus()

    def _update_button(self, text: str):
        self.add_btn.setEnabled(bool(text.strip()))

    def _submit(self):
        if self.title():
            self.accept()

    def title(self) -> str:
        return self.title_input.text().strip()
