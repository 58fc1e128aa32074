from __future__ import annotations
from PyQt6.QtWidgets import QApplication
import sys

from namever.config import manager as cfgman

def run_gui(cfg: dict | None = None):
    from namever.gui.launcher import LauncherWindow
    app = QApplication.instance() or QApplication(sys.argv)
    win = LauncherWindow(cfg if cfg is not None else cfgman.load_config())
    win.show()
    app.exec()
