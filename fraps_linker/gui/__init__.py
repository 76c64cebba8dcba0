"""
gui - PySide6 front end for the FRAPS Segment Linker
"""

from .gui_entry import main

__all__ = ["main"]
