"""Test keyboard input handling."""

import pytest
from linepad.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


def test_get_key_event_empty_queue():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    assert handler.get_key_event(timeout=0) is None


def test_get_key_event_reads_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('<UP>')
    event = handler.get_key_event()
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'up'


@pytest.mark.parametrize("token,value", [
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<BACKSPACE>', 'backspace'),
    ('<Ctrl-j>', 'enter'),
    ('<Ctrl-m>', 'enter'),
    ('<PAGEUP>', 'page_up'),
    ('<F1>', 'f1'),
])
def test_named_specials(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value
    assert event.raw == token


def test_escape_token(handler):
    for token in ('<ESC>', '\x1b'):
        event = handler.parse_key(token)
        assert event.key_type == KeyType.SPECIAL
        assert event.value == 'escape'


def test_tab_and_space_tokens(handler):
    assert handler.parse_key('<TAB>').value == '\t'
    assert handler.parse_key('<TAB>').key_type == KeyType.REGULAR
    assert handler.parse_key('\t').value == '\t'
    space = handler.parse_key('<SPACE>')
    assert space.key_type == KeyType.REGULAR
    assert space.value == ' '


def test_raw_backspace_bytes(handler):
    for raw in ('\x7f', '\x08'):
        event = handler.parse_key(raw)
        assert event.key_type == KeyType.SPECIAL
        assert event.value == 'backspace'


def test_control_characters(handler):
    event = handler.parse_key('\x11')  # Ctrl-Q
    assert event.key_type == KeyType.CTRL
    assert event.value == 'q'
    assert event.code == 17
    assert handler.parse_key('\r').value == 'enter'
    assert handler.parse_key('\n').value == 'enter'


def test_ctrl_token(handler):
    event = handler.parse_key('<Ctrl-q>')
    assert event.key_type == KeyType.CTRL
    assert event.value == 'q'


def test_alt_tokens(handler):
    for token in ('<Esc+b>', '<Meta-b>', '<Alt-b>'):
        event = handler.parse_key(token)
        assert event.key_type == KeyType.ALT
        assert event.value == 'b'


def test_shift_arrow(handler):
    event = handler.parse_key('<Shift-LEFT>')
    assert event.key_type == KeyType.SHIFT_SPECIAL
    assert event.value == 'left'


def test_regular_characters(handler):
    for ch in ('a', 'Z', '7', '<', '>', '~'):
        event = handler.parse_key(ch)
        assert event.key_type == KeyType.REGULAR
        assert event.value == ch
        assert event.code == ord(ch)
