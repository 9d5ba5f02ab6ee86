from pathlib import Path

from zeptex.command import Append, Command, Delete, Insert, Invalid, Quit, Save
from zeptex.dispatcher import dispatch
from zeptex.files import save_lines
from zeptex.session import EditorSession

from .utils import (
    DirFactory,
    FakeFiles,
    FakeTerminal,
    make_session,
    numbered,
    read_spec,
)


def type_and_dispatch(session: EditorSession, text: str) -> Command:
    for char in text:
        session.parser.feed(ord(char))
    return dispatch(session, session.parser.pending)


def test_insert_into_empty_buffer() -> None:
    session = make_session()
    assert type_and_dispatch(session, "i 1 hello") == Insert(1, "hello")
    assert session.buffer.lines == ("hello",)
    assert session.parser.pending == ""
    assert session.status is None


def test_insert_in_middle() -> None:
    session = make_session(["a", "c"])
    dispatch(session, "i 2 b")
    assert session.buffer.lines == ("a", "b", "c")


def test_insert_past_end_is_ignored() -> None:
    session = make_session(["a"])
    assert dispatch(session, "i 5 x") == Insert(5, "x")
    assert session.buffer.lines == ("a",)
    assert session.status is None


def test_insert_line_zero_is_invalid() -> None:
    session = make_session(["a"])
    command = type_and_dispatch(session, "i 0 x")
    assert isinstance(command, Invalid)
    assert session.buffer.lines == ("a",)
    assert session.status == command.reason
    # the rejected command stays at the prompt to be fixed
    assert session.parser.pending == "i 0 x"
    assert session.running


def test_insert_without_space_is_invalid() -> None:
    session = make_session(["a"])
    command = dispatch(session, "iXtext")
    assert isinstance(command, Invalid)
    assert session.buffer.lines == ("a",)
    assert session.status is not None


def test_insert_scrolls_down_to_line() -> None:
    # 10 rows leave 5 rows for lines
    session = make_session(numbered(20), FakeTerminal(height=10))
    dispatch(session, "i 15 x")
    assert session.viewport.scroll_offset == 10
    assert 14 in session.viewport.visible_range(21, 5)


def test_insert_scrolls_up_to_line() -> None:
    session = make_session(numbered(20), FakeTerminal(height=10))
    session.viewport.scroll_offset = 10
    dispatch(session, "i 3 x")
    assert session.viewport.scroll_offset == 2


def test_append() -> None:
    session = make_session(["a"])
    assert dispatch(session, "a more text") == Append("more text")
    assert session.buffer.lines == ("a", "more text")


def test_append_scrolls_to_end() -> None:
    session = make_session(numbered(20), FakeTerminal(height=10))
    dispatch(session, "a z")
    assert session.viewport.scroll_offset == 16


def test_append_at_capacity() -> None:
    session = make_session(numbered(1000))
    dispatch(session, "a more text")
    assert len(session.buffer) == 1000
    assert session.buffer.get(1000) == "line 1000"
    assert session.status is None


def test_append_without_text_is_invalid() -> None:
    session = make_session()
    command = dispatch(session, "a ")
    assert isinstance(command, Invalid)
    assert len(session.buffer) == 0


def test_delete() -> None:
    session = make_session(["a", "b", "c"])
    assert type_and_dispatch(session, "d 2") == Delete(2)
    assert session.buffer.lines == ("a", "c")
    assert session.parser.pending == ""


def test_delete_out_of_range() -> None:
    session = make_session(["a", "b", "c"])
    dispatch(session, "d 4")
    dispatch(session, "d 0")
    dispatch(session, "d -1")
    assert session.buffer.lines == ("a", "b", "c")


def test_delete_without_number_is_silent() -> None:
    session = make_session(["a", "b", "c"])
    assert type_and_dispatch(session, "d x") == Invalid(None)
    assert session.buffer.lines == ("a", "b", "c")
    assert session.status is None
    assert session.parser.pending == ""


def test_delete_pulls_viewport_back() -> None:
    session = make_session(numbered(20), FakeTerminal(height=10))
    session.viewport.scroll_offset = 15
    dispatch(session, "d 20")
    assert session.viewport.scroll_offset == 14


def test_delete_last_line() -> None:
    session = make_session(["a"])
    dispatch(session, "d 1")
    assert len(session.buffer) == 0
    assert session.viewport.scroll_offset == 0


def test_save_to_argument() -> None:
    files = FakeFiles()
    session = make_session(["a", "b"], files=files)
    assert dispatch(session, "w out.txt") == Save("out.txt")
    assert files.saved == {Path("out.txt"): ["a", "b"]}
    assert session.status == "written 2 lines to out.txt"


def test_save_to_opened_file() -> None:
    files = FakeFiles()
    session = make_session(["a"], path=Path("notes.txt"), files=files)
    dispatch(session, "w")
    assert files.saved == {Path("notes.txt"): ["a"]}


def test_save_argument_wins_over_opened_file() -> None:
    files = FakeFiles()
    session = make_session(["a"], path=Path("notes.txt"), files=files)
    dispatch(session, "w other.txt")
    assert files.saved == {Path("other.txt"): ["a"]}
    assert session.path == Path("notes.txt")


def test_save_without_path() -> None:
    files = FakeFiles()
    session = make_session(["a"], files=files)
    dispatch(session, "w")
    assert files.saved == {}
    assert session.status is None


def test_save_failure() -> None:
    files = FakeFiles(fail=True)
    session = make_session(["a"], files=files)
    dispatch(session, "w out.txt")
    assert session.buffer.lines == ("a",)
    assert session.status == "could not write out.txt"
    assert session.running


def test_save_to_disk(temp_dir_factory: DirFactory) -> None:
    root = temp_dir_factory({})
    session = make_session(["foo", "bar"])
    session.save = save_lines
    dispatch(session, f"w {root / 'foo.txt'}")
    assert read_spec(root) == {"foo.txt": "foo\nbar\n"}


def test_quit() -> None:
    session = make_session(["a"])
    assert type_and_dispatch(session, "q") == Quit()
    assert not session.running
    assert session.parser.pending == ""
    assert session.buffer.lines == ("a",)


def test_unknown_command() -> None:
    session = make_session()
    assert dispatch(session, "x") == Invalid("unknown command")
    assert session.status == "unknown command"
    assert session.running


def test_status_is_cleared_by_next_command() -> None:
    session = make_session()
    dispatch(session, "x")
    dispatch(session, "a text")
    assert session.status is None
