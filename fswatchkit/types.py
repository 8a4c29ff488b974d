"""Core types shared by the file watcher: actions, error codes and listeners."""

from __future__ import annotations

import abc
import enum


class Action(enum.IntEnum):
    """Kind of change reported for a file or directory.

    A rename is reported as a deletion of the old name followed by an
    addition of the new one, unless the backend can report it as a move.
    """

    ADD = 1
    DELETE = 2
    MODIFIED = 3
    MOVED = 4


class ErrorCode(enum.IntEnum):
    """Error values a watch request can produce in place of a watch id."""

    FILE_NOT_FOUND = -1
    FILE_REPEATED = -2
    FILE_OUT_OF_SCOPE = -3
    FILE_NOT_READABLE = -4
    # The directory lives on a remote file system; a generic (polling)
    # watcher is needed for it.
    FILE_REMOTE = -5
    UNSPECIFIED = -6


class WatchError(Exception):
    """Raised when a directory cannot be watched."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message
        super().__init__(f"{self.code.name}: {message}" if message else self.code.name)


class FileWatchListener(abc.ABC):
    """Receives notifications about changes inside watched directories."""

    @abc.abstractmethod
    def handle_file_action(
        self,
        watch_id: int,
        directory: str,
        filename: str,
        action: Action,
        old_filename: str = "",
    ) -> None:
        """Handle one change.

        ``filename`` is the bare name, not the full path; ``old_filename``
        is set only for moves.
        """


_ACTION_NAMES = {
    Action.ADD: "Add",
    Action.MODIFIED: "Modified",
    Action.DELETE: "Delete",
    Action.MOVED: "Moved",
}


def action_name(action: int) -> str:
    """Return a human readable name for ``action``, or ``"Bad Action"``."""
    try:
        return _ACTION_NAMES[Action(action)]
    except ValueError:
        return "Bad Action"


_ERROR_VALUES = frozenset(code.value for code in ErrorCode)


def is_error_id(watch_id: int) -> bool:
    """Tell whether ``watch_id`` is one of the error codes rather than a real id."""
    return watch_id in _ERROR_VALUES