"""Linepad CLI entry point.

Allows running via `python -m linepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants
from .errors import LinepadError, UsageError
from .version import get_version_string

logger = logging.getLogger("linepad")


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(level: str, log_dir: Optional[Path] = None) -> Path:
    """Send log records to a file, since the screen belongs to the editor."""
    log_dir = log_dir or Path(platformdirs.user_log_dir(EditorConstants.APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / EditorConstants.LOG_FILENAME
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return log_file


def parse_args(args: list[str]) -> tuple[Optional[str], bool]:
    """Split arguments into (filename, debug).

    Raises:
        UsageError: on unknown options or more than one filename.
    """
    debug = False
    files = []
    for arg in args:
        if arg == '--debug':
            debug = True
        elif arg.startswith('-') and arg != '-':
            raise UsageError(f"Unknown option {arg}")
        else:
            files.append(arg)
    if len(files) > 1:
        raise UsageError("At most one file may be given")
    return (files[0] if files else None), debug


def run_keyboard_test() -> None:
    """Print parsed key events and the action each maps to. Quit with ESC."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler
    from .commands import ActionKind, KeyMap

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    keymap = KeyMap()

    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if not ev:
                continue
            action = keymap.classify(ev)
            parts = [
                f"type={ev.key_type.value}",
                f"value={_escape_bytes(ev.value)}",
                f"raw='{_escape_bytes(ev.raw)}'",
                f"action={action.kind.value}",
            ]
            if ev.code is not None:
                parts.append(f"code={ev.code}")
            print(' '.join(parts), end='\r\n', flush=True)
            if action.kind == ActionKind.QUIT:
                break
    finally:
        term.cleanup()


def main(argv: Optional[list[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return

    try:
        filename, debug = parse_args(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        print(EditorConstants.USAGE_MESSAGE, file=sys.stderr)
        sys.exit(e.exit_code)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .settings import SettingsStore

    settings = SettingsStore().load()
    try:
        configure_logging("DEBUG" if debug else settings.log_level)
    except OSError as e:
        print(f"Logging disabled: {e}", file=sys.stderr)

    try:
        editor = Editor(settings=settings)
        if filename:
            editor.load_file(filename)
        editor.run()
        editor.offer_save()
    except LinepadError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
