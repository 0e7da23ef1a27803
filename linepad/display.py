"""Incremental repaint of the line buffer onto a display driver."""

import logging
from typing import Optional, Protocol

from .errors import DisplayError
from .model import CursorPosition, LineBuffer

logger = logging.getLogger(__name__)


class DisplayDriver(Protocol):
    """Screen primitives the painter needs (see TerminalInterface)."""

    width: int

    def clear_row(self, row: int, width: int) -> None: ...

    def write_at(self, row: int, col: int, text: str) -> None: ...

    def place_cursor(self, row: int, col: int) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...


class ScreenPainter:
    """Keeps the screen in step with a LineBuffer.

    Only rows handed to repaint() are touched. Each row is blanked
    before its text is written, and the cursor stays hidden until the
    last row is done.
    """

    def __init__(self, driver: DisplayDriver, strict: bool = False):
        self.driver = driver
        # When False a failed repaint is logged and the session goes on
        self.strict = strict

    def repaint(self, buffer: LineBuffer, dirty_rows: range,
                cursor: CursorPosition, strict: Optional[bool] = None) -> bool:
        """Redraw dirty_rows, then place the cursor.

        Args:
            strict: Overrides the painter's own setting for this call.

        Returns:
            True if every call succeeded.

        Raises:
            DisplayError: on a failed call when strict.
        """
        strict = self.strict if strict is None else strict
        try:
            self._paint(buffer, dirty_rows, cursor)
        except DisplayError as e:
            if strict:
                raise
            logger.warning(f"Repaint of rows {dirty_rows.start}-{dirty_rows.stop - 1} failed: {e}")
            return False
        return True

    def repaint_all(self, buffer: LineBuffer, strict: Optional[bool] = None) -> bool:
        """Redraw every line of the buffer."""
        return self.repaint(buffer, range(buffer.line_count), buffer.cursor, strict=strict)

    def _paint(self, buffer: LineBuffer, dirty_rows: range, cursor: CursorPosition):
        width = self.driver.width
        self.driver.set_cursor_visible(False)
        try:
            for row in dirty_rows:
                self.driver.clear_row(row, width)
                if row < buffer.line_count:
                    self.driver.write_at(row, 0, buffer.line_at(row))
            self.driver.place_cursor(cursor.row, cursor.column)
        finally:
            self.driver.set_cursor_visible(True)
