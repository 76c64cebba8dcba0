"""
models_fs.py - Core Data Structure Definitions

Contains:
- CaptureFile: One discovered FRAPS capture segment
- RenameOp: Single rename operation
- RenamePlan: Batch rename plan
- LinkOptions: Linking options configuration
- GroupState: Running state of the grouping pass
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from .text_match import parse_capture_name


DEFAULT_MAX_GAP_MINUTES = 5
MIN_MAX_GAP_MINUTES = 1.0
CAPTURE_EXTENSION = ".avi"
HELP_TOKENS = frozenset({"h", "-h", "help", "-help"})


class PlanIssue(Enum):
    """Reasons a rename plan must not be applied"""
    COLLISION = "collision"              # A target name is already taken on disk
    MISSING_SOURCE = "missing_source"    # A source file disappeared after scanning


MSG_COLLISION = (
    "One of the renames cannot be performed because there is already a file of the same name.\n"
    "Aborting."
)
MSG_MISSING_SOURCE = (
    "One of the renames cannot be performed because the file to be renamed is missing.\n"
    "Aborting."
)

# Text shown by every front end when validate_plan() refuses a plan
ISSUE_MESSAGES = {
    PlanIssue.COLLISION: MSG_COLLISION,
    PlanIssue.MISSING_SOURCE: MSG_MISSING_SOURCE,
}


@dataclass(frozen=True)
class CaptureFile:
    """Capture segment data class"""
    path: Path                      # Full path
    name: str                       # Raw filename
    source_id: str                  # Game / capture source identifier
    timestamp: datetime             # Capture start, second precision
    hundredths: int = 0             # Parsed, not used for grouping

    @classmethod
    def from_path(cls, p: Path) -> "CaptureFile":
        """Create CaptureFile from a path whose name matches the capture pattern"""
        source_id, fields = parse_capture_name(p.name)
        year, month, day, hour, minute, second, hundredths = fields
        return cls(
            path=p,
            name=p.name,
            source_id=source_id,
            timestamp=datetime(year, month, day, hour, minute, second),
            hundredths=hundredths,
        )


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    part_index: int = 0             # Position inside the linked group

    @property
    def group_name(self) -> str:
        """Base name shared by every op in the same group"""
        return self.dst.name.rsplit(".", 2)[0]


@dataclass
class LinkOptions:
    """Linking options configuration"""
    # Maximum distance between two segments that are still considered continuous
    max_gap: timedelta = field(default_factory=lambda: timedelta(minutes=DEFAULT_MAX_GAP_MINUTES))

    @classmethod
    def from_minutes(cls, minutes: float) -> "LinkOptions":
        if minutes < MIN_MAX_GAP_MINUTES:
            raise ValueError(f"Max gap must be at least {MIN_MAX_GAP_MINUTES} minutes: {minutes}")
        return cls(max_gap=timedelta(minutes=minutes))


@dataclass
class RenamePlan:
    """Batch rename plan"""
    ops: List[RenameOp] = field(default_factory=list)
    options: LinkOptions = field(default_factory=LinkOptions)

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.ops)

    @property
    def groups(self) -> Dict[str, List[RenameOp]]:
        """Operations bucketed by linked group, in plan order"""
        result: Dict[str, List[RenameOp]] = {}
        for op in self.ops:
            result.setdefault(op.group_name, []).append(op)
        return result

    @property
    def group_count(self) -> int:
        return len(self.groups)

    def add_op(self, src: Path, dst: Path, part_index: int = 0) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, dst=dst, part_index=part_index))

    def as_mapping(self) -> Dict[str, str]:
        """Original filename -> target filename"""
        return {op.src.name: op.dst.name for op in self.ops}


@dataclass(frozen=True)
class GroupState:
    """Running state of the grouping pass"""
    source_id: Optional[str] = None
    last_timestamp: Optional[datetime] = None
    base_name: str = ""
    part_index: int = 0

    @property
    def is_initial(self) -> bool:
        """No file has been folded in yet"""
        return self.source_id is None
