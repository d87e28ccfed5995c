from __future__ import annotations
import sys
from PyQt6.QtCore import QObject, pyqtSignal


class AppLogger(QObject):
    message_logged = pyqtSignal(str, str)  # category, message

    def log(self, category: str, message: str) -> None:
        # stderr, so a table written to stdout stays clean
        print(f"[{category}] {message}", file=sys.stderr, flush=True)
        self.message_logged.emit(category, message)

    def codec(self, message: str) -> None:
        self.log("CODEC", message)

    def table(self, message: str) -> None:
        self.log("TABLE", message)

    def general(self, message: str) -> None:
        self.log("GENERAL", message)
