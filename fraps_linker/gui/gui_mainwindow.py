"""
gui_mainwindow.py - GUI Main Window

Single page: pick a capture directory, set the max gap, preview the linked
groups, then execute the rename.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QDoubleSpinBox, QTableWidget,
    QTableWidgetItem, QProgressBar, QFileDialog, QMessageBox, QHeaderView,
    QGroupBox,
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from fraps_linker.core import (
    DEFAULT_MAX_GAP_MINUTES, MIN_MAX_GAP_MINUTES, LinkOptions, RenamePlan,
    RenameResult,
)
from .gui_workers import PlanWorker, RenameWorker

APP_NAME = "FRAPS Segment Linker"


class LinkPanel(QWidget):
    """Scan, preview and rename panel"""

    def __init__(self, directory: Optional[Path] = None, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()
        if directory is not None:
            self.dir_edit.setText(str(directory))

    def _init_ui(self):
        layout = QVBoxLayout(self)

        settings_group = QGroupBox("Capture Settings")
        settings_layout = QGridLayout(settings_group)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select the folder holding raw FRAPS .avi files...")
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        # Max gap
        settings_layout.addWidget(QLabel("Max Gap (minutes):"), 1, 0)
        self.gap_spin = QDoubleSpinBox()
        self.gap_spin.setRange(MIN_MAX_GAP_MINUTES, 24 * 60)
        self.gap_spin.setSingleStep(0.5)
        self.gap_spin.setDecimals(1)
        self.gap_spin.setValue(DEFAULT_MAX_GAP_MINUTES)
        settings_layout.addWidget(self.gap_spin, 1, 1)

        self.preview_btn = QPushButton("Scan && Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 2, 0, 1, 3)

        layout.addWidget(settings_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Part", "Group"])
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(3, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_preview(self):
        """Scan the directory and generate the plan"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory)
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Scanning...")
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        options = LinkOptions.from_minutes(self.gap_spin.value())
        self.plan_worker = PlanWorker(path, options)
        self.plan_worker.progress.connect(self._on_plan_progress)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    def _reset_preview_button(self):
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Scan && Preview")
        self.progress_bar.setVisible(False)

    @Slot(str)
    def _on_plan_progress(self, msg: str):
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_plan_finished(self, plan: RenamePlan):
        """Plan generation complete"""
        self.plan = plan
        self._reset_preview_button()
        self._update_table_preview()

        if plan.ops:
            self.execute_btn.setEnabled(True)
            self.status_label.setText(
                f"Found {plan.total_count} files to rename in {plan.group_count} linked groups."
            )
        else:
            self.status_label.setText("Found 0 files to rename.")

    @Slot(str)
    def _on_plan_error(self, error: str):
        self._reset_preview_button()
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _update_table_preview(self):
        """Update table to display preview results"""
        self.table.setRowCount(0)
        if not self.plan:
            return

        self.table.setRowCount(self.plan.total_count)
        row = 0
        for group_number, ops in enumerate(self.plan.groups.values()):
            # Alternate row shading per group
            shade = QColor(235, 245, 255) if group_number % 2 else QColor(255, 255, 255)
            for op in ops:
                items = [
                    QTableWidgetItem(op.src.name),
                    QTableWidgetItem(op.dst.name),
                    QTableWidgetItem(f"{op.part_index:02d}"),
                    QTableWidgetItem(str(group_number + 1)),
                ]
                for column, item in enumerate(items):
                    item.setBackground(shade)
                    self.table.setItem(row, column, item)
                row += 1

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.ops:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to rename {self.plan.total_count} files?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.total_count)

        self.rename_worker = RenameWorker(self.plan)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.aborted.connect(self._on_rename_aborted)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    def _reset_after_rename(self):
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Scan && Preview")
        self.progress_bar.setVisible(False)

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self._reset_after_rename()
        self.execute_btn.setEnabled(False)

        if result.is_complete:
            QMessageBox.information(self, "Complete", result.summary())
        else:
            QMessageBox.warning(self, "Partially Complete", result.summary())

        self.plan = None
        self.table.setRowCount(0)
        self.status_label.setText(result.summary().splitlines()[0])

    @Slot(str)
    def _on_rename_aborted(self, message: str):
        """Validation failed, nothing was renamed"""
        self._reset_after_rename()
        self.execute_btn.setEnabled(False)
        QMessageBox.warning(self, "Aborted", message)
        self.status_label.setText(message.splitlines()[0])

    @Slot(str)
    def _on_rename_error(self, error: str):
        """Execution error"""
        self._reset_after_rename()
        self.execute_btn.setEnabled(True)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self, directory: Optional[Path] = None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(800, 600)

        self.link_panel = LinkPanel(directory)
        self.setCentralWidget(self.link_panel)

        self.statusBar().showMessage("Ready")
