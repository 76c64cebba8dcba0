"""
cli - Command Line Interface for the FRAPS Segment Linker
"""

from .cli_entry import main, main_entry, resolve_max_gap, run

__all__ = ["main", "main_entry", "resolve_max_gap", "run"]
