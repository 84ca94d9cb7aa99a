import pytest

from tinyvi.state import MAX_COLS, MAX_LINES, EditorMode, EditorState


def test_from_file_none_gives_empty_buffer():
    state = EditorState.from_file(None)
    assert state.buffer == [""]
    assert state.total_lines == 1
    assert state.mode is EditorMode.NORMAL
    assert (state.row, state.col) == (0, 0)


def test_from_file_missing_file_keeps_filename(tmp_path):
    path = tmp_path / "missing.txt"
    state = EditorState.from_file(str(path))
    assert state.buffer == [""]
    assert state.filename == str(path)


def test_from_file_reads_lines(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("abc\ndef")
    state = EditorState.from_file(str(path))
    assert state.buffer == ["abc", "def"]
    assert state.total_lines == 2


def test_from_file_trailing_newline_adds_empty_line(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("abc\ndef\n")
    state = EditorState.from_file(str(path))
    assert state.buffer == ["abc", "def", ""]


def test_from_file_truncates_long_lines(tmp_path):
    path = tmp_path / "wide.txt"
    path.write_text("x" * (MAX_COLS + 5))
    state = EditorState.from_file(str(path))
    assert len(state.buffer[0]) == MAX_COLS - 1


def test_from_file_caps_line_count(tmp_path):
    path = tmp_path / "tall.txt"
    path.write_text("\n" * (MAX_LINES + 3))
    state = EditorState.from_file(str(path))
    assert state.total_lines == MAX_LINES


def test_save_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    state = EditorState(buffer=["one", "two"], filename=str(path))
    assert state.save() is True
    assert path.read_text() == "one\ntwo\n"
    assert state.status_msg == "File saved"
    reloaded = EditorState.from_file(str(path))
    assert reloaded.buffer[:2] == state.buffer


def test_save_without_filename_does_nothing():
    state = EditorState(buffer=["text"])
    assert state.save() is False
    assert state.status_msg is None


def test_save_to_unwritable_path(tmp_path):
    state = EditorState(buffer=["text"], filename=str(tmp_path / "no" / "such" / "dir.txt"))
    assert state.save() is False
    assert state.status_msg is None


def test_insert_char_appends_and_moves_cursor():
    state = EditorState()
    state.insert_char("a")
    state.insert_char("b")
    assert state.buffer == ["ab"]
    assert state.col == len("ab")


def test_insert_char_in_middle():
    state = EditorState(buffer=["ac"], col=1)
    state.insert_char("b")
    assert state.buffer == ["abc"]
    assert state.col == 2


def test_insert_char_pads_with_spaces():
    state = EditorState(col=3)
    state.insert_char("x")
    assert state.buffer == ["   x"]
    assert state.col == 4


def test_insert_char_refused_at_column_limit():
    state = EditorState(buffer=["abc"], col=MAX_COLS - 1)
    state.insert_char("x")
    assert state.buffer == ["abc"]
    assert state.col == MAX_COLS - 1


def test_delete_char_removes_previous():
    state = EditorState(buffer=["abc"], col=2)
    state.delete_char()
    assert state.buffer == ["ac"]
    assert state.col == 1


def test_delete_char_at_start_does_nothing():
    state = EditorState(buffer=["abc"], col=0)
    state.delete_char()
    assert state.buffer == ["abc"]
    assert state.col == 0


def test_insert_then_delete_restores():
    state = EditorState(buffer=["hello"], col=2)
    state.insert_char("z")
    state.delete_char()
    assert state.buffer == ["hello"]
    assert state.col == 2


@pytest.mark.parametrize("col", [0, 2, 5])
def test_split_then_merge_restores(col):
    state = EditorState(buffer=["first", "hello", "last"], row=1, col=col)
    state.split_line()
    assert state.buffer[1] + state.buffer[2] == "hello"
    assert state.total_lines == 4
    assert (state.row, state.col) == (2, 0)
    state.merge_line()
    assert state.buffer == ["first", "hello", "last"]
    assert (state.row, state.col) == (1, col)


def test_split_refused_at_line_limit():
    state = EditorState(buffer=[""] * MAX_LINES)
    state.split_line()
    assert state.total_lines == MAX_LINES
    assert state.row == 0


def test_merge_on_first_line_does_nothing():
    state = EditorState(buffer=["ab", "cd"], col=1)
    state.merge_line()
    assert state.buffer == ["ab", "cd"]
    assert (state.row, state.col) == (0, 1)


def test_status_line_format():
    state = EditorState()
    assert state.status_line() == "NORMAL 1:1 \t "
    state.mode = EditorMode.INSERT
    state.status_msg = "File saved"
    assert state.status_line().startswith("INSERT")
    assert state.status_line().endswith("File saved")