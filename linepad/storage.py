"""Line-oriented loading and saving of documents."""

import logging
import os
import tempfile
from typing import Iterable

from .constants import EditorConstants
from .errors import FileOpenError

logger = logging.getLogger(__name__)


def load_lines(path: str) -> list[str]:
    """Read a text file into a list of lines without terminators.

    Any of \n, \r\n or a bare \r ends a line. An empty file yields a
    single empty line so the document is never empty.

    Raises:
        FileOpenError: if the file cannot be opened or decoded.
    """
    try:
        with open(path, 'r', encoding=EditorConstants.FILE_ENCODING) as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not load {path}: {e}")
        raise FileOpenError(path, getattr(e, 'strerror', None) or str(e)) from e
    # Universal newlines mode has already turned \r\n and \r into \n
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    logger.info(f"Loaded {len(lines)} lines from {path}")
    return lines or [""]


def save_lines(path: str, lines: Iterable[str]) -> None:
    """Write lines to path, each followed by a newline.

    The text goes to a temporary file in the same directory which then
    replaces the target, so a failed save leaves the old file intact.

    Raises:
        FileOpenError: if the file cannot be written.
    """
    content = ''.join(line + EditorConstants.LINE_TERMINATOR for line in lines)
    dir_name = os.path.dirname(path) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                         dir=dir_name, suffix='.tmp', prefix='.',
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_filename, path)
    except OSError as e:
        logger.error(f"Could not save {path}: {e}")
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning(f"Could not remove temporary file {temp_filename}")
        raise FileOpenError(path, e.strerror or str(e)) from e
    logger.info(f"Saved to {path}")
