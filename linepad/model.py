"""Line buffer: the document, its cursor and the edit operations on them."""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .commands import PRINTABLE_CHARACTERS, Action, ActionKind
from .constants import EditorConstants
from .errors import BufferClosedError

NO_ROWS = range(0)


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class EditResult:
    """Outcome of one buffer operation.

    dirty_rows is the contiguous range of screen rows that must be
    repainted. Rows at or past the current line count are to be blanked.
    """
    cursor: CursorPosition
    dirty_rows: range = NO_ROWS
    modified: bool = False
    quit: bool = False


class LineBuffer:
    """An ordered, never-empty list of lines with a single cursor.

    All operations keep 0 <= row < line_count and
    0 <= column <= len(line_at(row)). Lines are always addressed by
    index, so a structural edit never leaves a stale reference behind.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None,
                 tab_width: int = EditorConstants.DEFAULT_TAB_WIDTH):
        lines = list(lines) if lines is not None else []
        for i, line in enumerate(lines):
            if '\n' in line or '\r' in line:
                raise ValueError(f"line {i} contains a line terminator")
        if tab_width < 1:
            raise ValueError(f"tab width must be positive, got {tab_width}")
        self._lines: list[str] = lines or [""]
        self._cursor = CursorPosition()
        self._desired_column: Optional[int] = None
        self._closed = False
        self.tab_width = tab_width

    # --- Read access ---

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, row: int) -> str:
        return self._lines[row]

    @property
    def cursor(self) -> CursorPosition:
        return replace(self._cursor)

    @property
    def closed(self) -> bool:
        return self._closed

    def text(self) -> str:
        return '\n'.join(self._lines)

    def _result(self, dirty_rows: range = NO_ROWS, modified: bool = False,
                quit: bool = False) -> EditResult:
        return EditResult(cursor=self.cursor, dirty_rows=dirty_rows,
                          modified=modified, quit=quit)

    def _check_open(self):
        if self._closed:
            raise BufferClosedError("buffer no longer accepts operations")

    # --- Cursor movement ---

    def move_up(self) -> EditResult:
        self._check_open()
        if self._cursor.row > 0:
            self._move_vertically(self._cursor.row - 1)
        return self._result()

    def move_down(self) -> EditResult:
        self._check_open()
        if self._cursor.row < len(self._lines) - 1:
            self._move_vertically(self._cursor.row + 1)
        return self._result()

    def _move_vertically(self, target_row: int):
        # Remember the column a run of vertical moves started from
        if self._desired_column is None:
            self._desired_column = self._cursor.column
        self._cursor.row = target_row
        self._cursor.column = min(self._desired_column, len(self._lines[target_row]))

    def move_left(self) -> EditResult:
        self._check_open()
        self._desired_column = None
        if self._cursor.column > 0:
            self._cursor.column -= 1
        return self._result()

    def move_right(self) -> EditResult:
        self._check_open()
        self._desired_column = None
        if self._cursor.column < len(self._lines[self._cursor.row]):
            self._cursor.column += 1
        return self._result()

    # --- Editing ---

    def insert_char(self, char: str) -> EditResult:
        self._check_open()
        if len(char) != 1 or char not in PRINTABLE_CHARACTERS:
            raise ValueError(f"not a printable character: {char!r}")
        return self._insert_at_cursor(char)

    def insert_tab(self) -> EditResult:
        self._check_open()
        return self._insert_at_cursor(' ' * self.tab_width)

    def _insert_at_cursor(self, text: str) -> EditResult:
        row = self._cursor.row
        col = self._cursor.column
        line = self._lines[row]
        self._lines[row] = line[:col] + text + line[col:]
        self._cursor.column = col + len(text)
        self._desired_column = None
        return self._result(range(row, row + 1), modified=True)

    def split_line(self) -> EditResult:
        """Break the current line at the cursor (Enter).

        Every row from the split point down shifts by one, so all of
        them are reported dirty.
        """
        self._check_open()
        row = self._cursor.row
        col = self._cursor.column
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self._cursor.row = row + 1
        self._cursor.column = 0
        self._desired_column = None
        return self._result(range(row, len(self._lines)), modified=True)

    def delete_backward(self) -> EditResult:
        """Delete the character before the cursor (Backspace).

        At column 0 the current line is joined onto the previous one.
        The reported range then runs through the old last row, which
        no longer holds a line and has to be blanked on screen.
        """
        self._check_open()
        row = self._cursor.row
        col = self._cursor.column
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[:col - 1] + line[col:]
            self._cursor.column = col - 1
            self._desired_column = None
            return self._result(range(row, row + 1), modified=True)
        if row == 0:
            return self._result()

        old_line_count = len(self._lines)
        previous_length = len(self._lines[row - 1])
        self._lines[row - 1] = self._lines[row - 1] + self._lines[row]
        del self._lines[row]
        self._cursor.row = row - 1
        self._cursor.column = previous_length
        self._desired_column = None
        return self._result(range(row - 1, old_line_count), modified=True)

    def quit(self) -> EditResult:
        self._check_open()
        self._closed = True
        return self._result(quit=True)

    # --- Dispatch ---

    def apply(self, action: Action) -> EditResult:
        """Run the operation a classified key action stands for."""
        kind = action.kind
        if kind == ActionKind.INSERT:
            return self.insert_char(action.char)
        if kind == ActionKind.IGNORE:
            self._check_open()
            return self._result()
        operation = getattr(self, _OPERATIONS[kind])
        return operation()


_OPERATIONS = {
    ActionKind.MOVE_UP: 'move_up',
    ActionKind.MOVE_DOWN: 'move_down',
    ActionKind.MOVE_LEFT: 'move_left',
    ActionKind.MOVE_RIGHT: 'move_right',
    ActionKind.SPLIT: 'split_line',
    ActionKind.DELETE_BACKWARD: 'delete_backward',
    ActionKind.TAB: 'insert_tab',
    ActionKind.QUIT: 'quit',
}
