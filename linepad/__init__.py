"""Linepad - a minimal terminal line editor."""

from .model import LineBuffer, CursorPosition, EditResult
from .commands import Action, ActionKind, KeyMap
from .display import ScreenPainter
from .errors import LinepadError, FileOpenError, DisplayError, UsageError, BufferClosedError

__all__ = [
    'LineBuffer',
    'CursorPosition',
    'EditResult',
    'Action',
    'ActionKind',
    'KeyMap',
    'ScreenPainter',
    'LinepadError',
    'FileOpenError',
    'DisplayError',
    'UsageError',
    'BufferClosedError',
]
