"""Process-level helpers: sleeping, locating the executable and file descriptor limits."""

from __future__ import annotations

import os
import sys
import time

if sys.platform != "win32":
    import resource

# Number of directory reads handled per thread on Windows.
_WINDOWS_MAX_FD = 60
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

_fd_limit_raised = False
_cached_max_fd = 0


def sleep(ms: int) -> None:
    """Block the calling thread for ``ms`` milliseconds.

    Raises ValueError for a negative duration.
    """
    if ms < 0:
        raise ValueError(f"sleep duration must not be negative, got {ms}")
    time.sleep(ms / 1000)


def process_path() -> str:
    """Return the directory of the running executable, with a trailing separator.

    Falls back to ``"./"`` when it cannot be determined.
    """
    if sys.platform == "win32":
        if sys.executable:
            return os.path.dirname(sys.executable) + "\\"
        return "./"
    if sys.platform.startswith("linux"):
        try:
            executable = os.readlink("/proc/self/exe")
        except OSError:
            return "./"
        return os.path.dirname(executable) + "/"
    if sys.executable:
        return os.path.dirname(os.path.realpath(sys.executable)) + "/"
    return "./"


def _soft_fd_limit() -> int:
    soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    return soft & _UINT64_MASK


def raise_fd_limit() -> int:
    """Raise the open file limit to its hard maximum, once per process.

    Returns the resulting soft limit.
    """
    global _fd_limit_raised
    if sys.platform == "win32":
        return _WINDOWS_MAX_FD
    if not _fd_limit_raised:
        _soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
        try:
            resource.setrlimit(resource.RLIMIT_NOFILE, (hard, hard))
        except (ValueError, OSError):
            pass
        _fd_limit_raised = True
    return _soft_fd_limit()


def max_fd() -> int:
    """Return the open file limit, read once and then cached."""
    global _cached_max_fd
    if sys.platform == "win32":
        return _WINDOWS_MAX_FD
    if _cached_max_fd == 0:
        _cached_max_fd = _soft_fd_limit()
    return _cached_max_fd