import pytest

from fswatchkit.types import (
    Action,
    ErrorCode,
    FileWatchListener,
    WatchError,
    action_name,
    is_error_id,
)


class RecordingListener(FileWatchListener):
    def __init__(self):
        self.events = []

    def handle_file_action(self, watch_id, directory, filename, action, old_filename=""):
        self.events.append((watch_id, directory, filename, action_name(action), old_filename))


def test_action_values():
    assert [a.value for a in Action] == [1, 2, 3, 4]
    assert Action(4) is Action.MOVED


@pytest.mark.parametrize(
    "value, code",
    [
        (-1, ErrorCode.FILE_NOT_FOUND),
        (-2, ErrorCode.FILE_REPEATED),
        (-3, ErrorCode.FILE_OUT_OF_SCOPE),
        (-4, ErrorCode.FILE_NOT_READABLE),
        (-5, ErrorCode.FILE_REMOTE),
        (-6, ErrorCode.UNSPECIFIED),
    ],
)
def test_error_code_values(value, code):
    assert ErrorCode(value) is code
    assert int(code) == value


@pytest.mark.parametrize(
    "action, name",
    [
        (Action.ADD, "Add"),
        (Action.MODIFIED, "Modified"),
        (Action.DELETE, "Delete"),
        (Action.MOVED, "Moved"),
    ],
)
def test_action_name(action, name):
    assert action_name(action) == name


@pytest.mark.parametrize("value", [0, 5, -1, 99])
def test_action_name_bad(value):
    assert action_name(value) == "Bad Action"


def test_action_name_accepts_plain_int():
    assert action_name(3) == "Modified"


@pytest.mark.parametrize("code", list(ErrorCode))
def test_error_ids_are_detected(code):
    assert is_error_id(int(code)) is True


@pytest.mark.parametrize("watch_id", [1, 2, 42, 1000])
def test_real_ids_are_not_errors(watch_id):
    assert is_error_id(watch_id) is False


def test_watch_error_carries_code_and_message():
    err = WatchError(ErrorCode.FILE_NOT_FOUND, "/missing/dir")
    assert err.code is ErrorCode.FILE_NOT_FOUND
    assert err.message == "/missing/dir"
    assert "/missing/dir" in str(err)
    assert "FILE_NOT_FOUND" in str(err)


def test_watch_error_from_int_code():
    err = WatchError(-2)
    assert err.code is ErrorCode.FILE_REPEATED
    assert str(err) == "FILE_REPEATED"


def test_watch_error_is_raisable():
    error = WatchError(-5, "nfs")
    with pytest.raises(WatchError) as info:
        raise error
    assert info.value is error
    assert error.code is ErrorCode.FILE_REMOTE
    assert error.message == "nfs"


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        FileWatchListener()


def test_listener_subclass_receives_events():
    listener = RecordingListener()
    listener.handle_file_action(1, "/tmp/test/", "a.txt", Action.ADD)
    listener.handle_file_action(1, "/tmp/test/", "b.txt", Action(4), "a.txt")
    assert listener.events == [
        (1, "/tmp/test/", "a.txt", "Add", ""),
        (1, "/tmp/test/", "b.txt", "Moved", "a.txt"),
    ]