"""
gui_entry.py - GUI Entry

Opens the linker window. An optional first argument names the capture
directory to prefill:

    fraps-linker-gui "D:/Fraps/Movies"
"""

import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from fraps_linker import __version__
from fraps_linker.core import configure_logging, get_logger
from .gui_mainwindow import APP_NAME, MainWindow

logger = get_logger(__name__)


def initial_directory(args: List[str]) -> Optional[Path]:
    """
    Directory to show when the window opens

    Args:
        args: Command line arguments without the program name

    Returns:
        The first argument if it names an existing directory, else None
    """
    if not args:
        return None
    candidate = Path(args[0]).expanduser()
    if not candidate.is_dir():
        logger.warning("Ignoring start directory, not a folder: %s", args[0])
        return None
    return candidate.resolve()


def create_application(argv: List[str]) -> QApplication:
    """Build the QApplication (one per process)"""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(__version__)
    app.setStyle("Fusion")
    return app


def main(argv: Optional[List[str]] = None) -> int:
    """GUI main entry"""
    configure_logging()
    if argv is None:
        argv = sys.argv

    app = create_application(argv)
    window = MainWindow(initial_directory(argv[1:]))
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
