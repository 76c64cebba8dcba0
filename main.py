#!/usr/bin/env python3
"""
FRAPS Segment Linker - Main Entry

Renames raw FRAPS captures in the current working directory so that
VirtualDub considers consecutive segments linked.

Usage:
    python main.py          # default time gap between videos (5 minutes)
    python main.py 10.5     # override time gap to 10.5 minutes
    python main.py -h       # help

The desktop window is started with ``fraps-linker-gui`` or
``python -m fraps_linker.gui``.
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))

from fraps_linker.cli import main_entry


if __name__ == "__main__":
    main_entry()
