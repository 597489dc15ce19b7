"""
Utility package for editor support functions.
"""

from .search import SearchEngine
from .logging import setup_logging

__all__ = [
    'SearchEngine',
    'setup_logging'
]
