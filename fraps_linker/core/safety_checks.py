"""
safety_checks.py - Safety Check Module

Checks run over the whole plan before the first rename is performed
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple

from .models_fs import RenameOp, RenamePlan


def check_target_free(dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that nothing (file, directory or dangling link) occupies the target

    Args:
        dst: Destination path

    Returns:
        (is_free, error_reason)
    """
    if os.path.lexists(dst):
        return False, f"Destination already exists: {dst}"
    return True, None


def check_source_present(src: Path) -> Tuple[bool, Optional[str]]:
    """
    Check that the source file is still there

    Args:
        src: Source path

    Returns:
        (is_present, error_reason)
    """
    if not src.is_file():
        return False, f"Source file does not exist: {src}"
    return True, None


def find_collisions(plan: RenamePlan) -> List[RenameOp]:
    """Operations whose destination is already taken on disk"""
    return [op for op in plan.ops if not check_target_free(op.dst)[0]]


def find_missing_sources(plan: RenamePlan) -> List[RenameOp]:
    """Operations whose source file no longer exists"""
    return [op for op in plan.ops if not check_source_present(op.src)[0]]


def find_duplicate_targets(plan: RenamePlan) -> List[RenameOp]:
    """Operations sharing a destination with an earlier operation"""
    seen = set()
    duplicates = []
    for op in plan.ops:
        if op.dst in seen:
            duplicates.append(op)
        seen.add(op.dst)
    return duplicates
