"""File system queries: directories, working directory, mount points and remote file systems."""

from __future__ import annotations

import os
import re
import sys

_MOUNTS_FILE = "/proc/mounts"

# File system magic numbers, as reported in statfs' f_type.
_MAGIC_FUSEBLK = 0x65735546

_REMOTE_MAGICS = frozenset(
    {
        0x5346414F,  # afs
        0x61756673,  # aufs
        0x00C36400,  # ceph
        0xFF534D42,  # cifs
        0x73757245,  # coda
        0x19830326,  # fhgfs
        0x65735543,  # fusectl
        0x01161970,  # gfs
        0x47504653,  # gpfs
        0x6B414653,  # kafs
        0x0BD00BD0,  # lustre
        0x564C,  # ncp
        0x6969,  # nfs
        0x6E667364,  # nfsd
        0x7461636F,  # ocfs2
        0xAAD7AAEA,  # panfs
        0x50495045,  # pipefs
        0x517B,  # smb
        0xBEEFDEAD,  # snfs
        0xBACBACBC,  # vmhgfs
        0xA501FCF5,  # vxfs
    }
)

# Mount table type names mapped to the magic numbers above.
_FS_TYPE_MAGICS = {
    "afs": 0x5346414F,
    "aufs": 0x61756673,
    "ceph": 0x00C36400,
    "cifs": 0xFF534D42,
    "smb3": 0xFF534D42,
    "coda": 0x73757245,
    "fhgfs": 0x19830326,
    "beegfs": 0x19830326,
    "fuse": _MAGIC_FUSEBLK,
    "fuseblk": _MAGIC_FUSEBLK,
    "fusectl": 0x65735543,
    "gfs": 0x01161970,
    "gfs2": 0x01161970,
    "gpfs": 0x47504653,
    "kafs": 0x6B414653,
    "lustre": 0x0BD00BD0,
    "ncp": 0x564C,
    "ncpfs": 0x564C,
    "nfs": 0x6969,
    "nfs4": 0x6969,
    "nfsd": 0x6E667364,
    "ocfs2": 0x7461636F,
    "panfs": 0xAAD7AAEA,
    "pipefs": 0x50495045,
    "smbfs": 0x517B,
    "snfs": 0xBEEFDEAD,
    "vmhgfs": 0xBACBACBC,
    "vxfs": 0xA501FCF5,
}

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def os_slash() -> str:
    """Return the path separator of the running platform."""
    return "\\" if sys.platform == "win32" else "/"


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` exists and is a directory."""
    return os.path.isdir(path)


def change_working_directory(path: str | os.PathLike[str]) -> bool:
    """Change the working directory; return False if that fails."""
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def current_working_directory() -> str:
    """Return the working directory, or an empty string if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return ""


def find_mount_point(path: str | os.PathLike[str]) -> str:
    """Return the mount point of the file system holding ``path``.

    Returns an empty string when ``path`` (or its directory) cannot be read.
    """
    path = os.fspath(path)
    start = path if os.path.isdir(path) else (os.path.dirname(path) or ".")
    if not os.path.isdir(start):
        return ""
    current = os.path.realpath(start)
    try:
        current_stat = os.stat(current)
        while True:
            parent = os.path.dirname(current)
            parent_stat = os.stat(parent)
            if (
                parent_stat.st_dev != current_stat.st_dev
                or parent_stat.st_ino == current_stat.st_ino
            ):
                break
            current, current_stat = parent, parent_stat
    except OSError:
        return ""
    return current


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda match: chr(int(match.group(1), 8)), field)


def _mount_entries(mounts_file: str) -> list[tuple[str, str, str]]:
    try:
        with open(mounts_file, encoding="utf-8", errors="surrogateescape") as handle:
            lines = handle.readlines()
    except OSError:
        return []
    entries = []
    for line in lines:
        fields = line.split()
        if len(fields) < 3 or fields[0].startswith("#"):
            continue
        entries.append((_unescape(fields[0]), _unescape(fields[1]), fields[2]))
    return entries


def find_device_path(directory: str, mounts_file: str = _MOUNTS_FILE) -> str:
    """Return the device mounted on ``directory`` according to ``mounts_file``.

    Returns an empty string when no entry matches or the table cannot be read.
    """
    for fs_name, mount_dir, _fs_type in _mount_entries(mounts_file):
        if mount_dir == directory:
            return fs_name
    return ""


def _strip_trailing_slash(directory: str) -> str:
    if len(directory) > 1 and directory[-1] in "/\\":
        return directory[:-1]
    return directory


def is_local_fuse_directory(directory: str) -> bool:
    """Tell whether a FUSE directory is backed by a device listed in the mount table."""
    mount_point = find_mount_point(_strip_trailing_slash(os.fspath(directory)))
    if not mount_point:
        return False
    return bool(find_device_path(mount_point))


def is_remote_magic(magic: int, directory: str) -> bool:
    """Tell whether a file system magic number denotes a remote file system.

    FUSE file systems count as remote on Linux unless ``directory`` is
    backed by a device in the mount table.
    """
    magic &= 0xFFFFFFFF
    if magic == _MAGIC_FUSEBLK:
        if sys.platform.startswith("linux"):
            return not is_local_fuse_directory(directory)
        return True
    return magic in _REMOTE_MAGICS


def _fs_magic(directory: str) -> int | None:
    mount_point = find_mount_point(directory)
    if not mount_point:
        return None
    fs_type = None
    for _fs_name, mount_dir, entry_type in _mount_entries(_MOUNTS_FILE):
        if mount_dir == mount_point:
            fs_type = entry_type
    if fs_type is None:
        return None
    if fs_type.startswith("fuse."):
        return _MAGIC_FUSEBLK
    return _FS_TYPE_MAGICS.get(fs_type)


def is_remote_fs(directory: str) -> bool:
    """Tell whether ``directory`` lives on a remote (network) file system."""
    directory = os.fspath(directory)
    if sys.platform == "win32":
        return len(directory) >= 2 and directory[0] in "\\/" and directory[1] in "\\/"
    if not sys.platform.startswith("linux"):
        return False
    magic = _fs_magic(directory)
    if magic is None:
        return False
    return is_remote_magic(magic, directory)