"""Line-mode prompts used after the editor has left fullscreen."""

from typing import Callable

from .constants import EditorConstants


def ask_yes_no(message: str, input_func: Callable[[str], str] = input,
               print_func: Callable[[str], None] = print) -> bool:
    """Ask until the answer starts with y or n (any case)."""
    while True:
        answer = input_func(f"{message} (y/n): ").strip()
        if answer:
            response = answer[0].lower()
            if response == 'y':
                return True
            if response == 'n':
                return False
        print_func(EditorConstants.INVALID_ANSWER_MESSAGE)


def ask_filename(input_func: Callable[[str], str] = input) -> str:
    """Ask for the name of the file to write; may return ''."""
    return input_func(EditorConstants.FILENAME_PROMPT).strip()
