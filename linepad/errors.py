"""Exceptions raised at the editor's boundaries."""


class LinepadError(Exception):
    """Base class for linepad errors.

    Each subclass carries the process exit code used when the error
    aborts the program.
    """

    exit_code = 1


class UsageError(LinepadError):
    """Command line arguments could not be understood."""

    exit_code = 1


class FileOpenError(LinepadError):
    """A document could not be opened for reading or writing."""

    exit_code = 2

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Cannot open {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DisplayError(LinepadError):
    """The terminal rejected a display operation."""

    exit_code = 3


class BufferClosedError(LinepadError):
    """An edit was attempted after the buffer received quit."""

    exit_code = 4
