# src/namever/gui/launcher.py
from __future__ import annotations

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QListWidget,
    QListWidgetItem,
)

from namever.config import manager as cfgman
from namever.core.processor import process_names
from namever.utils.naming import input_label, split_names


class LauncherWindow(QMainWindow):
    """
    Jedno okno:
      [ istniejące nazwy ]
      [ nowe nazwy       ]
      [ ROZWIĄŻ ]
      [ lista wyników    ]
    """
    def __init__(self, cfg: dict | None = None):
        super().__init__()
        self.setWindowTitle("File Name Versioning")
        self.resize(640, 480)
        self._separator = (cfg or cfgman.DEFAULTS).get("input", {}).get("separator", ",")

        central = QWidget(self)
        lay = QVBoxLayout(central)
        lay.setContentsMargins(24, 24, 24, 24)
        lay.setSpacing(12)

        lay.addWidget(QLabel(input_label("Existing file names", self._separator)))
        self.edit_existing = QLineEdit(central)
        lay.addWidget(self.edit_existing)

        lay.addWidget(QLabel(input_label("New file names", self._separator)))
        self.edit_new = QLineEdit(central)
        self.edit_new.returnPressed.connect(self._resolve)
        lay.addWidget(self.edit_new)

        self.btn_resolve = QPushButton("Resolve", central)
        self.btn_resolve.clicked.connect(self._resolve)
        lay.addWidget(self.btn_resolve)

        lay.addWidget(QLabel("Processed names:"))
        self.results = QListWidget(central)
        lay.addWidget(self.results, 1)

        self.setCentralWidget(central)

    # --- akcje ---

    def _resolve(self):
        existing = split_names(self.edit_existing.text(), self._separator)
        incoming = split_names(self.edit_new.text(), self._separator)
        self.results.clear()
        for r in process_names(existing, incoming):
            if r.ok:
                self.results.addItem(r.final_name)
            else:
                item = QListWidgetItem(f"{r.error}: {r.source}")
                item.setForeground(QColor("#b00020"))
                self.results.addItem(item)
