"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Group sorted captures into linked runs (same source, gaps below max_gap)
- Assign every capture its VirtualDub segment name
- Validate the plan against the filesystem
"""

from datetime import timedelta
from functools import reduce
from typing import List, Optional, Tuple

from .logger_helper import get_logger
from .models_fs import (
    CaptureFile, GroupState, LinkOptions, PlanIssue, RenamePlan,
    CAPTURE_EXTENSION,
)
from .safety_checks import find_collisions, find_duplicate_targets, find_missing_sources
from .sort_rules import sort_by_name
from .text_match import format_base_name, format_part_name

logger = get_logger(__name__)


def starts_new_group(state: GroupState, capture: CaptureFile, max_gap: timedelta) -> bool:
    """
    Decide whether a capture opens a new linked group

    A gap exactly equal to max_gap is not linked.
    """
    if state.is_initial or capture.source_id != state.source_id:
        return True
    return capture.timestamp - state.last_timestamp >= max_gap


def advance_group(
    state: GroupState,
    capture: CaptureFile,
    max_gap: timedelta
) -> Tuple[GroupState, str]:
    """
    Fold one capture into the running group state

    Args:
        state: State after the previous capture (GroupState() for the first)
        capture: Next capture in filename order
        max_gap: Largest gap that still breaks the link

    Returns:
        (state after this capture, target filename for this capture)
    """
    if starts_new_group(state, capture, max_gap):
        base_name = format_base_name(capture.source_id, capture.timestamp)
        part_index = 0
        logger.debug("New group %r starting at %s", base_name, capture.name)
    else:
        base_name = state.base_name
        part_index = state.part_index

    target = format_part_name(base_name, part_index, CAPTURE_EXTENSION)
    new_state = GroupState(
        source_id=capture.source_id,
        last_timestamp=capture.timestamp,
        base_name=base_name,
        part_index=part_index + 1,
    )
    return new_state, target


def assign_targets(files: List[CaptureFile], max_gap: timedelta) -> List[Tuple[CaptureFile, str, int]]:
    """Pair each capture (already sorted) with its target filename and part index"""
    def step(acc, capture):
        state, pairs = acc
        state, target = advance_group(state, capture, max_gap)
        pairs.append((capture, target, state.part_index - 1))
        return state, pairs

    _, pairs = reduce(step, files, (GroupState(), []))
    return pairs


def plan_link_rename(
    files: List[CaptureFile],
    options: Optional[LinkOptions] = None
) -> RenamePlan:
    """
    Generate the linking rename plan

    Args:
        files: Captures from one directory
        options: Linking options

    Returns:
        Rename plan with one operation per capture
    """
    if options is None:
        options = LinkOptions()

    plan = RenamePlan(options=options)

    for capture, target, part_index in assign_targets(sort_by_name(files), options.max_gap):
        plan.add_op(capture.path, capture.path.with_name(target), part_index=part_index)

    logger.debug("Planned %d renames in %d groups", plan.total_count, plan.group_count)
    return plan


def validate_plan(plan: RenamePlan) -> List[PlanIssue]:
    """
    Validate rename plan

    Collisions are checked before missing sources.

    Args:
        plan: Rename plan

    Returns:
        Issues found, in check order (empty when the plan can be applied)
    """
    issues = []

    collisions = find_collisions(plan) + find_duplicate_targets(plan)
    if collisions:
        for op in collisions:
            logger.warning("Rename target already taken: %s", op.dst.name)
        issues.append(PlanIssue.COLLISION)

    missing = find_missing_sources(plan)
    if missing:
        for op in missing:
            logger.warning("Rename source missing: %s", op.src.name)
        issues.append(PlanIssue.MISSING_SOURCE)

    return issues
