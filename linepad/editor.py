"""Main editor controller: the key-driven edit loop."""

import logging
import os
import select
import signal
import sys
import termios
from typing import Callable, Optional

from .commands import ActionKind, KeyMap
from .constants import EditorConstants
from .display import ScreenPainter
from .keyboard import KeyboardHandler, KeyEvent
from .model import EditResult, LineBuffer
from .prompts import ask_filename, ask_yes_no
from .settings import EditorSettings
from .storage import load_lines, save_lines
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Editor:
    """Line editor application controller.

    Collaborators are passed in; any that are omitted are built from
    the defaults.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 keyboard: Optional[KeyboardHandler] = None,
                 settings: Optional[EditorSettings] = None,
                 keymap: Optional[KeyMap] = None):
        """Initialize the editor components."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = keyboard or KeyboardHandler(self.terminal)
        self.keymap = keymap or KeyMap()
        self.painter = ScreenPainter(self.terminal, strict=self.settings.strict_redraw)
        self.buffer = LineBuffer(tab_width=self.settings.tab_width)
        self.running = False
        # File handling
        self.filename: Optional[str] = None
        self.modified = False
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        # Write to pipe to wake up select()
        if self._resize_pipe_w is not None:
            os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until the quit key.

        Raises:
            DisplayError: if the terminal cannot be set up or the first
                paint fails.
        """
        self.terminal.setup()
        self.running = True
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                old_settings = self._disable_flow_control()
                try:
                    self.terminal.clear_screen()
                    self.painter.repaint_all(self.buffer, strict=True)

                    while self.running:
                        # Wait for input on stdin or resize pipe
                        ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                        if self._resize_pipe_r in ready:
                            os.read(self._resize_pipe_r, 1024)
                            logger.debug("Terminal resized, repainting everything")
                            self.terminal.clear_screen()
                            self.painter.repaint_all(self.buffer)
                        elif 0 in ready:
                            key_event = self.keyboard.get_key_event(timeout=0)
                            if key_event:
                                self._handle_key_event(key_event)
                finally:
                    # Restore terminal settings before exiting cbreak
                    if old_settings:
                        try:
                            termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                        except (termios.error, OSError):
                            logger.warning("Could not restore terminal flow control settings")
        except KeyboardInterrupt:
            # Ctrl-C ends the session like the quit key
            logger.info("Interrupted, leaving edit loop")
            self.running = False
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def _disable_flow_control(self):
        """Let Ctrl-Q and Ctrl-S through to the editor.

        cbreak mode leaves IXON on, so the tty driver would swallow
        Ctrl-Q as XON. Returns the previous settings, or None when stdin
        is not a terminal.
        """
        try:
            old_settings = termios.tcgetattr(sys.stdin)
            new_settings = list(old_settings)
            # Input flags are at index 0
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            # Local flags: keep Ctrl-V from being taken as VLNEXT
            try:
                new_settings[3] &= ~termios.IEXTEN
            except AttributeError:
                pass
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, AttributeError, OSError) as e:
            logger.debug(f"Could not change terminal flow control: {e}")
            return None
        return old_settings

    def _handle_key_event(self, key_event: KeyEvent) -> Optional[EditResult]:
        """Apply one key event and repaint what it changed.

        Returns:
            The buffer's result, or None if the key was ignored.
        """
        action = self.keymap.classify(key_event)
        if action.kind == ActionKind.IGNORE:
            logger.debug(f"Ignoring key {key_event.raw!r}")
            return None

        result = self.buffer.apply(action)
        if result.quit:
            self.running = False
            return result
        if result.modified:
            self.modified = True
            if logger.isEnabledFor(logging.DEBUG):
                self._log_buffer()
        self.painter.repaint(self.buffer, result.dirty_rows, result.cursor)
        return result

    def _log_buffer(self):
        cursor = self.buffer.cursor
        logger.debug(
            f"Buffer after edit (cursor {cursor.row},{cursor.column}):\n"
            + '\n'.join(self.buffer.lines)
        )

    def load_file(self, filename: str):
        """Load a file into the editor.

        Raises:
            FileOpenError: if the file cannot be read. The current
                buffer is left as it was.
        """
        lines = load_lines(filename)
        self.buffer = LineBuffer(lines, tab_width=self.settings.tab_width)
        self.filename = filename
        self.modified = False

    def save_file(self, filename: str):
        """Save the buffer to filename.

        Raises:
            FileOpenError: if the file cannot be written. The buffer is
                not touched.
        """
        save_lines(filename, self.buffer.lines)
        self.filename = filename
        self.modified = False

    def offer_save(self, input_func: Callable[[str], str] = input,
                   print_func: Callable[[str], None] = print) -> bool:
        """After quitting, ask whether to keep a modified buffer.

        Returns:
            True if the buffer was written.

        Raises:
            FileOpenError: if the chosen file cannot be written.
        """
        if not self.modified:
            return False
        if not ask_yes_no(EditorConstants.SAVE_PROMPT, input_func, print_func):
            return False
        filename = self.filename or ask_filename(input_func)
        if not filename:
            print_func("No filename given, buffer discarded.")
            return False
        self.save_file(filename)
        print_func(f"Saved to {filename}")
        return True
