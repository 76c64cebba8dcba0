"""
fraps_linker - Renames raw FRAPS captures so VirtualDub appends linked segments
"""

__version__ = "1.0.0"
