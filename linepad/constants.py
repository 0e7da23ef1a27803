"""Constants and configuration for the linepad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Editing
    DEFAULT_TAB_WIDTH = 4  # Spaces inserted by the Tab key
    MIN_TAB_WIDTH = 1
    MAX_TAB_WIDTH = 16

    # Keys that end the editing session (curtsies-style base names)
    QUIT_KEYS = ('escape',)
    QUIT_CTRL_KEYS = ('q',)

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # File operations
    LINE_TERMINATOR = "\n"
    FILE_ENCODING = "utf-8"

    # Settings
    APP_NAME = "linepad"
    SETTINGS_FILENAME = "settings.json"
    LOG_FILENAME = "linepad.log"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
    DEFAULT_LOG_LEVEL = "WARNING"

    # Prompts
    SAVE_PROMPT = "Save modified buffer?"
    FILENAME_PROMPT = "Filename to write: "
    INVALID_ANSWER_MESSAGE = "Invalid input. Please enter 'y' for yes or 'n' for no."
    USAGE_MESSAGE = "Usage: linepad [--debug] [file]"
