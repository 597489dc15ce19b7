"""
Slime: a small terminal text editor built around a grapheme-aware line buffer.
"""

from .config import VERSION

__version__ = VERSION
