#!/usr/bin/env python3
"""Linepad - a minimal line editor.

Usage:
    python main.py [--debug] [filename]

Controls:
    Arrow keys: Move the cursor (up/down keep the column where possible)
    Enter: Split the line at the cursor
    Backspace: Delete character, or join with the line above
    Tab: Insert spaces
    Esc or Ctrl-Q: Quit (asks to save if modified)
    Type to insert text
"""

from linepad.__main__ import main


if __name__ == "__main__":
    main()
