"""
cli_entry.py - CLI Entry Point

Usage:
    fraps-linker            # link segments less than 5 minutes apart
    fraps-linker 10.5       # link segments less than 10.5 minutes apart
    fraps-linker -h         # help

Works on the current working directory. Only the first argument is read.
Argument problems are reported on stdout and exit with status 0; an aborted
or partially failed rename exits with status 1.
"""

import math
import sys
from pathlib import Path
from typing import List, Optional

from fraps_linker.core import (
    LinkOptions, DEFAULT_MAX_GAP_MINUTES, HELP_TOKENS, ISSUE_MESSAGES, MIN_MAX_GAP_MINUTES,
    configure_logging, execute_rename, get_logger, parse_captures, plan_link_rename,
    scan_capture_paths, validate_plan,
)

logger = get_logger(__name__)

EXAMPLE_GAP_MINUTES = 10.5

MSG_FOUND = "Found {0} files to rename."
MSG_GAP_OVERRIDDEN = "Max gap overridden to {0} minutes."
MSG_INVALID_GAP = "Invalid max time gap between videos specified."
MSG_INVALID_ARGUMENT = "Invalid argument specified."


def format_minutes(value: float) -> str:
    """Write a minute count the way a person would: 10.5, 2 (not 2.0)"""
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def help_text() -> str:
    """Full usage text"""
    return "\n".join([
        "This utility renames raw FRAPS footage so that VirtualDub will consider "
        "the segments linked and automatically append them.",
        "It looks for all the .avi files in its current working directory.",
        "",
        "Usage:",
        f"[programname.exe]\tuses default time gap between videos "
        f"({DEFAULT_MAX_GAP_MINUTES} minutes)",
        f"[programname.exe] {format_minutes(EXAMPLE_GAP_MINUTES)}\toverrides time gap "
        f"between videos to be {format_minutes(EXAMPLE_GAP_MINUTES)} minutes",
        "[programname.exe] -h\tdisplays this help message.",
    ])


def print_help():
    print(help_text())


def is_help(arg: str) -> bool:
    """Help token check (case-insensitive)"""
    return arg.lower() in HELP_TOKENS


def parse_minutes(arg: str) -> Optional[float]:
    """Parse a minute count, None if the argument is not a number"""
    try:
        return float(arg.strip())
    except ValueError:
        return None


def resolve_max_gap(args: List[str]) -> LinkOptions:
    """
    Turn the command-line arguments into linking options

    Only args[0] is consulted. Help and every invalid argument print their
    message and exit the process with status 0.

    Args:
        args: Command-line arguments without the program name

    Returns:
        Resolved options
    """
    if not args:
        return LinkOptions()

    arg = args[0]
    if is_help(arg):
        print_help()
        sys.exit(0)

    minutes = parse_minutes(arg)
    if minutes is None:
        print(MSG_INVALID_ARGUMENT)
        print_help()
        sys.exit(0)

    if not math.isfinite(minutes) or minutes < MIN_MAX_GAP_MINUTES:
        print(MSG_INVALID_GAP)
        sys.exit(0)

    try:
        options = LinkOptions.from_minutes(minutes)
    except OverflowError:
        print(MSG_INVALID_GAP)
        sys.exit(0)

    print(MSG_GAP_OVERRIDDEN.format(format_minutes(minutes)))
    return options


def run(directory: Optional[Path] = None, options: Optional[LinkOptions] = None) -> int:
    """
    Scan, plan, validate and apply in one directory

    Args:
        directory: Target directory (current working directory if None)
        options: Linking options

    Returns:
        Exit code
    """
    paths = scan_capture_paths(directory)
    print(MSG_FOUND.format(len(paths)))

    # Dates are parsed after the count is shown; a bad one ends the run here
    files = parse_captures(paths)

    plan = plan_link_rename(files, options)

    issues = validate_plan(plan)
    if issues:
        # Only the first failing check is reported, collisions first
        print(ISSUE_MESSAGES[issues[0]])
        return 1

    result = execute_rename(plan)
    print(result.summary())

    return 0 if result.is_complete else 1


def main(argv: Optional[List[str]] = None, directory: Optional[Path] = None) -> int:
    """Main entry point"""
    args = sys.argv[1:] if argv is None else argv
    options = resolve_max_gap(args)
    logger.debug("Max gap: %s", options.max_gap)

    return run(directory, options)


def main_entry():
    """Console script entry point"""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
