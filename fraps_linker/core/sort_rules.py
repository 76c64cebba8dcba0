"""
sort_rules.py - Sorting Rules Module

Capture names use fixed-width, zero-padded fields, so ordinal string order of
the raw names is chronological order within one source identifier. Any change
to the timestamp format must keep that property.
"""

from typing import Callable, List, TypeVar

T = TypeVar("T")


def get_sort_key() -> Callable[[T], str]:
    """Sort key function (raw name, code point order, case-sensitive)"""
    return lambda f: f.name


def sort_by_name(files: List[T]) -> List[T]:
    """
    Sort captures by raw filename

    Args:
        files: Captures or paths (anything with a .name)

    Returns:
        Sorted file list (new list)
    """
    return sorted(files, key=get_sort_key())
