# fswatchkit

Building blocks for file system watchers, written in plain Python with no
third-party dependencies.

## What is inside

- `fswatchkit.types` defines:
  - the `Action` enum: `ADD`, `DELETE`, `MODIFIED` and `MOVED`;
  - the `ErrorCode` enum of negative watch-id error values: `FILE_NOT_FOUND`,
    `FILE_REPEATED`, `FILE_OUT_OF_SCOPE`, `FILE_NOT_READABLE`, `FILE_REMOTE`
    and `UNSPECIFIED`;
  - the `WatchError` exception, which carries a `code` and a `message`;
  - the abstract `FileWatchListener` class, whose
    `handle_file_action(watch_id, directory, filename, action, old_filename="")`
    method you implement;
  - `action_name(action)`, which returns `"Add"`, `"Delete"`, `"Modified"`,
    `"Moved"`, or `"Bad Action"` for any other value;
  - `is_error_id(watch_id)`, which tells whether a value is one of the error
    codes.
- `fswatchkit.sync` has two classes. `Atomic` holds a value that threads can
  read and replace safely through `load()` and `store(value)`. `Mutex` is a
  recursive lock with `lock()` and `unlock()`, and it also works as a context
  manager.
- `fswatchkit.utf8`, `fswatchkit.utf16` and `fswatchkit.utf32` decode, encode,
  count and convert at the code-point level between UTF-8, UTF-16 code units,
  UTF-32 code points, Latin-1 and "wide" characters (2 or 4 bytes wide). These
  functions never raise on malformed input. A cut-off or broken sequence
  decodes to a replacement code point that you choose. A code point that cannot
  be encoded becomes a single replacement value, or is dropped when the
  replacement is 0.
- `fswatchkit.filesystem` provides:
  - `os_slash()`, `is_directory(path)`, `change_working_directory(path)` and
    `current_working_directory()`;
  - `find_mount_point(path)`, and `find_device_path(directory, mounts_file)`,
    which reads a mount table, `/proc/mounts` by default;
  - `is_local_fuse_directory(directory)`, `is_remote_magic(magic, directory)`
    and `is_remote_fs(directory)`.
- `fswatchkit.system` provides `sleep(ms)`, `process_path()` (the directory of
  the running executable), `raise_fd_limit()` and `max_fd()`. On Windows, both
  `raise_fd_limit()` and `max_fd()` return 60.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Example

```python
from fswatchkit.types import Action, FileWatchListener, action_name
from fswatchkit.utf8 import encode_utf8, count_utf8
from fswatchkit.filesystem import is_directory


class Printer(FileWatchListener):
    def handle_file_action(self, watch_id, directory, filename, action, old_filename=""):
        print(watch_id, directory, filename, action_name(action))


Printer().handle_file_action(1, "/tmp/", "notes.txt", Action.ADD, "")
print(encode_utf8(0x20AC))           # b'\xe2\x82\xac'
print(count_utf8("héllo".encode()))  # 5
print(is_directory("/tmp"))
```

## What it does not do

The package supplies the parts a watcher is built from. It does not watch
anything itself:

- It has no watcher class.
- It starts no background thread.
- It never calls `FileWatchListener.handle_file_action`. You call it from your
  own code.
- It has no command-line program.

Remote file system detection has limits:

- On Linux, `is_remote_fs` looks up the mount point's type in `/proc/mounts`.
- On Windows, only UNC paths (those starting with two slashes or backslashes)
  count as remote.
- On other platforms it always returns `False`.

## Running the tests

```
pytest
```