"""
text_match.py - Capture Filename Matching Tools

Provides matching, parsing and formatting of FRAPS capture filenames.

Raw FRAPS output is named
    <GameName> <year>-<month>-<day> <hour>-<minute>-<second>-<hundredths>.avi
e.g. ``abCD123 2013-04-05 21-07-33-45.avi``. VirtualDub appends segments
automatically when they share a name ending in ``.<number>.avi``
(``xxx.00.avi``, ``xxx.01.avi``, ...).
"""

from datetime import datetime
from typing import Tuple
import re


CAPTURE_NAME_RE = re.compile(
    r"[A-Za-z0-9]+ [0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}-[0-9]{2}-[0-9]{2}-[0-9]{2}\.avi"
)
SOURCE_ID_RE = re.compile(r"^([A-Za-z0-9]+) ")
TIME_FIELDS_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2})-([0-9]{2})-([0-9]{2})-([0-9]{2})")


def is_capture_name(name: str) -> bool:
    """
    Check if filename is a raw FRAPS capture

    Args:
        name: Filename (without directory)

    Returns:
        Whether the whole name matches the capture pattern
    """
    return CAPTURE_NAME_RE.fullmatch(name) is not None


def parse_source_id(name: str) -> str:
    """Alphanumeric run before the first space"""
    match = SOURCE_ID_RE.match(name)
    if match is None:
        raise ValueError(f"No source identifier in filename: {name}")
    return match.group(1)


def parse_time_fields(name: str) -> Tuple[int, int, int, int, int, int, int]:
    """
    Extract the seven numeric timestamp fields

    Args:
        name: Filename

    Returns:
        (year, month, day, hour, minute, second, hundredths)
    """
    match = TIME_FIELDS_RE.search(name)
    if match is None:
        raise ValueError(f"No timestamp in filename: {name}")
    return tuple(int(value) for value in match.groups())


def parse_capture_name(name: str) -> Tuple[str, Tuple[int, int, int, int, int, int, int]]:
    """Split a capture filename into source identifier and timestamp fields"""
    return parse_source_id(name), parse_time_fields(name)


def format_base_name(source_id: str, timestamp: datetime) -> str:
    """
    Build the shared name of a linked group

    Every date/time component is written unpadded, e.g.
    ``GameA 2020-1-1 10-0-0``.
    """
    return (
        f"{source_id} {timestamp.year}-{timestamp.month}-{timestamp.day} "
        f"{timestamp.hour}-{timestamp.minute}-{timestamp.second}"
    )


def format_part_name(base_name: str, part_index: int, extension: str = ".avi") -> str:
    """Target filename of one segment, part index zero-padded to two digits"""
    return f"{base_name}.{part_index:02d}{extension}"
