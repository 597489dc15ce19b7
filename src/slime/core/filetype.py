"""
File type detection for the status bar using Pygments.
"""

from typing import Final, Optional

from pygments.lexers import get_lexer_for_filename, guess_lexer
from pygments.util import ClassNotFound

DEFAULT_FILE_TYPE: Final[str] = "Text"

# Name Pygments gives its plain text lexer.
_PLAIN_TEXT: Final[str] = 'Text only'


def detect_file_type(filename: Optional[str], first_line: str = '') -> str:
    """
    Name the type of a file from its name, or from a shebang line.

    Args:
        filename: Path or name of the file, if it has one.
        first_line: First line of the file, consulted when the name alone
            does not identify the type.

    Returns:
        str: A human readable type such as "Python", or "Text".
    """

    if filename:
        try:
            name = get_lexer_for_filename(filename).name
        except ClassNotFound:
            name = _PLAIN_TEXT

        if name != _PLAIN_TEXT:
            return name

    if first_line.startswith('#!'):
        try:
            lexer = guess_lexer(first_line)
        except ClassNotFound:
            return DEFAULT_FILE_TYPE

        if lexer.name != _PLAIN_TEXT:
            return lexer.name

    return DEFAULT_FILE_TYPE
