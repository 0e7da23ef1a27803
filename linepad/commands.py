"""Mapping of key events to the closed set of editor actions."""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType

if TYPE_CHECKING:
    from .keyboard import KeyEvent


# Single-byte characters that insert themselves
PRINTABLE_CHARACTERS = frozenset(
    string.ascii_letters + string.digits + string.punctuation + ' '
)


class ActionKind(Enum):
    """Everything a key press can mean to the editor."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SPLIT = "split"
    DELETE_BACKWARD = "delete_backward"
    TAB = "tab"
    INSERT = "insert"
    QUIT = "quit"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    char: Optional[str] = None  # Only set for INSERT

    def __post_init__(self):
        if (self.kind == ActionKind.INSERT) != (self.char is not None):
            raise ValueError(f"{self.kind.name} action with char={self.char!r}")

    @classmethod
    def insert(cls, char: str) -> 'Action':
        return cls(ActionKind.INSERT, char)


IGNORE = Action(ActionKind.IGNORE)


class KeyMap:
    """Registry mapping (key type, key name) pairs to actions.

    Lookup order: quit keys, arrows, Enter, Backspace, Tab, then any
    printable character. Everything else is ignored.
    """

    def __init__(self):
        self._quit: Dict[Tuple[KeyType, str], Action] = {}
        self._actions: Dict[Tuple[KeyType, str], Action] = {}
        self._setup_default_keys()

    def _setup_default_keys(self):
        """Set up the default key bindings."""
        for name in EditorConstants.QUIT_KEYS:
            self.register_quit((KeyType.SPECIAL, name))
        for letter in EditorConstants.QUIT_CTRL_KEYS:
            self.register_quit((KeyType.CTRL, letter))

        # Arrow keys
        self.register((KeyType.SPECIAL, 'up'), Action(ActionKind.MOVE_UP))
        self.register((KeyType.SPECIAL, 'down'), Action(ActionKind.MOVE_DOWN))
        self.register((KeyType.SPECIAL, 'left'), Action(ActionKind.MOVE_LEFT))
        self.register((KeyType.SPECIAL, 'right'), Action(ActionKind.MOVE_RIGHT))

        # Editing keys
        self.register((KeyType.SPECIAL, 'enter'), Action(ActionKind.SPLIT))
        self.register((KeyType.SPECIAL, 'backspace'), Action(ActionKind.DELETE_BACKWARD))
        self.register((KeyType.CTRL, 'h'), Action(ActionKind.DELETE_BACKWARD))
        self.register((KeyType.REGULAR, '\t'), Action(ActionKind.TAB))
        self.register((KeyType.SPECIAL, 'tab'), Action(ActionKind.TAB))

    def register_quit(self, key: Tuple[KeyType, str]):
        self._quit[key] = Action(ActionKind.QUIT)

    def register(self, key: Tuple[KeyType, str], action: Action):
        """Register an action for a key combination."""
        self._actions[key] = action

    def classify(self, key_event: 'KeyEvent') -> Action:
        """Return the action a key event stands for."""
        key = (key_event.key_type, key_event.value)
        if key in self._quit:
            return self._quit[key]
        if key in self._actions:
            return self._actions[key]
        if key_event.key_type == KeyType.REGULAR and key_event.value in PRINTABLE_CHARACTERS:
            return Action.insert(key_event.value)
        return IGNORE

