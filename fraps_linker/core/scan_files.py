"""
scan_files.py - File Scanning Module

Discovers raw FRAPS captures in a single directory (non-recursive)
"""

from pathlib import Path
from typing import Callable, List, Optional

from .logger_helper import get_logger
from .models_fs import CaptureFile
from .sort_rules import sort_by_name
from .text_match import is_capture_name

logger = get_logger(__name__)


def list_capture_paths(directory: Path) -> List[Path]:
    """
    List regular files in the directory whose name matches the capture pattern

    Args:
        directory: Target directory

    Returns:
        Matching paths, in directory order
    """
    results: List[Path] = []
    for item in directory.iterdir():
        # Only process files, not directories
        if not item.is_file():
            continue

        if not is_capture_name(item.name):
            logger.debug("Skipping non-capture file: %s", item.name)
            continue

        results.append(item)

    return results


def scan_capture_paths(directory: Optional[Path] = None) -> List[Path]:
    """
    Find raw capture files without parsing their timestamps

    Args:
        directory: Target directory (current working directory if None)

    Returns:
        Matching paths in ordinal filename order

    Raises:
        ValueError: Directory does not exist
    """
    directory = Path(directory if directory is not None else Path.cwd()).resolve()
    if not directory.is_dir():
        raise ValueError(f"Directory does not exist: {directory}")

    paths = sort_by_name(list_capture_paths(directory))
    logger.debug("Found %d captures in %s", len(paths), directory)
    return paths


def parse_captures(
    paths: List[Path],
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[CaptureFile]:
    """
    Parse capture paths, keeping their order

    Raises:
        ValueError: A name carries an impossible date (e.g. month 13)
    """
    results: List[CaptureFile] = []
    for path in paths:
        if progress_callback:
            progress_callback(str(path))
        results.append(CaptureFile.from_path(path))
    return results


def scan_captures(
    directory: Optional[Path] = None,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[CaptureFile]:
    """
    Scan directory for raw captures and parse them, sorted by filename

    Args:
        directory: Target directory (current working directory if None)
        progress_callback: Progress callback function

    Returns:
        Parsed captures in ordinal filename order

    Raises:
        ValueError: Directory does not exist, or a matching name carries an
            impossible date
    """
    return parse_captures(scan_capture_paths(directory), progress_callback)
