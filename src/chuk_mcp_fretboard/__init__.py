"""
CHUK Fretboard - where notes live on fretted instruments, and which keys hold them.
"""

__version__ = "0.1.0"
