"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from .errors import DisplayError


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Screen output goes through four primitives (clear_row, write_at,
    place_cursor, set_cursor_visible). Rows outside the screen are
    skipped and text is cut at the right edge.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False

    def setup(self):
        """Enter fullscreen mode and prepare terminal.

        Raises:
            DisplayError: if the terminal cannot be prepared.
        """
        self._emit(self.term.enter_fullscreen + self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                # Enter raw mode immediately so reads work
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except (ImportError, OSError, ValueError) as e:
                self._curtsies_input = None
                self._curtsies_active = False
                self.cleanup()
                raise DisplayError(f"Cannot read keys from this terminal: {e}") from e

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    # Exit raw mode context
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def _emit(self, text: str):
        try:
            print(text, end='', flush=True)
        except OSError as e:
            raise DisplayError(f"Terminal write failed: {e}") from e

    def clear_screen(self):
        """Clear the entire screen."""
        self._emit(self.term.home + self.term.clear)

    def clear_row(self, row: int, width: Optional[int] = None):
        """Overwrite a screen row with blanks."""
        if not 0 <= row < self.height:
            return
        width = self.width if width is None else min(width, self.width)
        self._emit(self.term.move(row, 0) + ' ' * width)

    def write_at(self, row: int, col: int, text: str):
        """Write literal text starting at (row, col)."""
        if not 0 <= row < self.height or col >= self.width:
            return
        self._emit(self.term.move(row, col) + text[:self.width - col])

    def place_cursor(self, row: int, col: int):
        """Move the hardware cursor without drawing anything."""
        row = min(row, self.height - 1)
        col = min(col, self.width - 1)
        self._emit(self.term.move(row, col))

    def set_cursor_visible(self, visible: bool):
        self._emit(self.term.normal_cursor if visible else self.term.hide_cursor)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies token as a string, or None on timeout.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
