"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply a validated plan one rename at a time
- Collect per-file failures instead of stopping halfway
- Report partial completion explicitly

Renames already performed are not rolled back when a later one fails.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import os

from .logger_helper import get_logger
from .models_fs import RenameOp, RenamePlan

logger = get_logger(__name__)

MAX_FAILURE_DETAILS = 10


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total_count(self) -> int:
        return self.success_count + self.failed_count

    @property
    def is_complete(self) -> bool:
        """Every planned rename went through"""
        return not self.failed

    def summary(self) -> str:
        """Generate summary"""
        if self.is_complete:
            return f"{self.success_count} files renamed successfully."

        lines = [
            f"{self.success_count} of {self.total_count} files renamed; "
            f"{self.failed_count} renames failed:",
        ]
        for op, error in self.failed[:MAX_FAILURE_DETAILS]:
            lines.append(f"  - {op.src.name} -> {op.dst.name}: {error}")
        if len(self.failed) > MAX_FAILURE_DETAILS:
            lines.append(f"  ... and {len(self.failed) - MAX_FAILURE_DETAILS} more failures")
        return "\n".join(lines)


def execute_rename(
    plan: RenamePlan,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> RenameResult:
    """
    Execute rename plan

    The plan is expected to have passed validate_plan().

    Args:
        plan: Rename plan
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    result = RenameResult()
    total = len(plan.ops)

    for i, op in enumerate(plan.ops):
        if progress_callback:
            progress_callback(i + 1, total, f"{op.src.name} -> {op.dst.name}")

        try:
            os.rename(op.src, op.dst)
        except OSError as e:
            logger.error("Rename failed: %s -> %s: %s", op.src.name, op.dst.name, e)
            result.failed.append((op, str(e)))
            continue

        logger.info("Renamed %s -> %s", op.src.name, op.dst.name)
        result.success.append(op)

    return result
