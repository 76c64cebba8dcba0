"""
core - FRAPS Segment Linker Core Module

Provides capture scanning, linked-group planning, validation and execution.
"""

from .models_fs import (
    CaptureFile,
    RenameOp,
    RenamePlan,
    LinkOptions,
    GroupState,
    PlanIssue,
    DEFAULT_MAX_GAP_MINUTES,
    MIN_MAX_GAP_MINUTES,
    CAPTURE_EXTENSION,
    HELP_TOKENS,
    ISSUE_MESSAGES,
    MSG_COLLISION,
    MSG_MISSING_SOURCE,
)

from .scan_files import (
    scan_captures,
    scan_capture_paths,
    parse_captures,
    list_capture_paths,
)

from .text_match import (
    is_capture_name,
    parse_capture_name,
    format_base_name,
    format_part_name,
)

from .sort_rules import (
    sort_by_name,
)

from .plan_rename import (
    plan_link_rename,
    advance_group,
    starts_new_group,
    assign_targets,
    validate_plan,
)

from .exec_rename import (
    execute_rename,
    RenameResult,
)

from .safety_checks import (
    find_collisions,
    find_missing_sources,
)

from .logger_helper import (
    get_logger,
    configure_logging,
)

__all__ = [
    # Data models
    "CaptureFile",
    "RenameOp",
    "RenamePlan",
    "LinkOptions",
    "GroupState",
    "PlanIssue",
    "RenameResult",

    # Configuration
    "DEFAULT_MAX_GAP_MINUTES",
    "MIN_MAX_GAP_MINUTES",
    "CAPTURE_EXTENSION",
    "HELP_TOKENS",
    "ISSUE_MESSAGES",
    "MSG_COLLISION",
    "MSG_MISSING_SOURCE",

    # Scanning
    "scan_captures",
    "scan_capture_paths",
    "parse_captures",
    "list_capture_paths",

    # Filename handling
    "is_capture_name",
    "parse_capture_name",
    "format_base_name",
    "format_part_name",

    # Sorting
    "sort_by_name",

    # Planning
    "plan_link_rename",
    "advance_group",
    "starts_new_group",
    "assign_targets",
    "validate_plan",

    # Execution
    "execute_rename",

    # Safety checks
    "find_collisions",
    "find_missing_sources",

    # Logging
    "get_logger",
    "configure_logging",
]
