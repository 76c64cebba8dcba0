"""
gui_workers.py - GUI Worker Threads

Provides background execution of scanning and renaming to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from fraps_linker.core import (
    ISSUE_MESSAGES, LinkOptions, RenamePlan, execute_rename, get_logger,
    plan_link_rename, scan_captures, validate_plan,
)


logger = get_logger(__name__)


class PlanWorker(QThread):
    """Scan and plan worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object)           # RenamePlan
    error = Signal(str)                 # Error message

    def __init__(
        self,
        directory: Path,
        options: Optional[LinkOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options or LinkOptions()

    def run(self):
        try:
            files = scan_captures(self.directory, progress_callback=self.progress.emit)
            self.progress.emit(f"Found {len(files)} files to rename.")
            plan = plan_link_rename(files, self.options)
            self.finished.emit(plan)
        except Exception as e:
            logger.exception("Planning failed in %s", self.directory)
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Validate and rename worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    aborted = Signal(str)               # Validation message, nothing renamed
    error = Signal(str)                 # Error message

    def __init__(self, plan: RenamePlan, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.plan = plan

    def run(self):
        try:
            issues = validate_plan(self.plan)
            if issues:
                self.aborted.emit(ISSUE_MESSAGES[issues[0]])
                return

            def progress_callback(current: int, total: int, msg: str):
                self.progress.emit(current, total, msg)

            result = execute_rename(self.plan, progress_callback=progress_callback)
            self.finished.emit(result)
        except Exception as e:
            logger.exception("Rename execution failed")
            self.error.emit(str(e))
