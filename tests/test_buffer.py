from __future__ import annotations

import pytest

from slime.core.buffer import Buffer, split_lines
from slime.core.position import Position, SearchDirection


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_open_reads_lines_and_is_clean(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    path.write_bytes("first\nse\u0301cond\n".encode("utf-8"))

    buf = Buffer.open(str(path))

    assert buf.lines() == ["first", "se\u0301cond"]
    assert buf.path == str(path)
    assert not buf.is_dirty()
    assert len(buf.line(1)) == 6


def test_open_missing_file_raises_io_error(tmp_path) -> None:
    with pytest.raises(IOError):
        Buffer.open(str(tmp_path / "missing.txt"))


def test_open_rejects_invalid_utf8(tmp_path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(IOError):
        Buffer.open(str(path))


def test_line_lookup(hello_world: Buffer) -> None:
    assert hello_world.line_count() == 2
    assert hello_world.line(0).text == "hello"
    assert hello_world.line(2) is None
    assert hello_world.line(-1) is None
    assert not hello_world.is_empty()
    assert Buffer().is_empty()


def test_insert_newline_splits_line(hello_world: Buffer) -> None:
    hello_world.insert(Position(2, 0), "\n")

    assert hello_world.lines() == ["he", "llo", "world"]
    assert hello_world.is_dirty()


def test_insert_character_into_line(hello_world: Buffer) -> None:
    hello_world.insert(Position(5, 1), "!")

    assert hello_world.lines() == ["hello", "world!"]
    assert hello_world.is_dirty()


def test_insert_one_past_last_line_appends_line(hello_world: Buffer) -> None:
    hello_world.insert(Position(0, 2), "x")

    assert hello_world.lines() == ["hello", "world", "x"]


def test_insert_into_empty_buffer_creates_first_line() -> None:
    buf = Buffer()
    buf.insert(Position(0, 0), "a")

    assert buf.lines() == ["a"]
    assert buf.is_dirty()


def test_insert_beyond_buffer_is_ignored(hello_world: Buffer) -> None:
    hello_world.insert(Position(0, 3), "x")

    assert hello_world.lines() == ["hello", "world"]
    assert not hello_world.is_dirty()


def test_edits_on_negative_rows_are_ignored(hello_world: Buffer) -> None:
    hello_world.insert(Position(0, -1), "x")
    hello_world.insert(Position(0, -1), "\n")
    hello_world.insert_text(Position(0, -1), "xy")
    hello_world.split_line(Position(2, -1))
    hello_world.delete(Position(0, -1))

    assert hello_world.lines() == ["hello", "world"]
    assert not hello_world.is_dirty()


def test_insert_text_runs(hello_world: Buffer) -> None:
    hello_world.insert_text(Position(0, 1), "big ")
    hello_world.insert_text(Position(0, 2), "tail")

    assert hello_world.lines() == ["hello", "big world", "tail"]
    assert hello_world.is_dirty()


def test_insert_text_rejects_newlines(hello_world: Buffer) -> None:
    with pytest.raises(ValueError):
        hello_world.insert_text(Position(0, 0), "a\nb")


def test_split_line_at_end_adds_empty_line(hello_world: Buffer) -> None:
    hello_world.split_line(Position(5, 0))

    assert hello_world.lines() == ["hello", "", "world"]


def test_split_line_beyond_buffer_is_ignored(hello_world: Buffer) -> None:
    hello_world.split_line(Position(0, 2))

    assert hello_world.lines() == ["hello", "world"]
    assert not hello_world.is_dirty()


@pytest.mark.parametrize("k", range(0, 6))
def test_split_then_merge_restores_line(k: int) -> None:
    buf = Buffer.from_text("ca\u0301fe\u0301s\n")
    original = buf.lines()

    buf.split_line(Position(k, 0))
    assert buf.line_count() == 2

    buf.delete(Position(len(buf.line(0)), 0))

    assert buf.lines() == original


def test_delete_at_end_of_line_merges_next_line() -> None:
    buf = Buffer.from_text("a\nb\n")

    buf.delete(Position(1, 0))

    assert buf.lines() == ["ab"]
    assert buf.line_count() == 1
    assert buf.is_dirty()


def test_delete_merge_reduces_line_count_by_one() -> None:
    buf = Buffer.from_text("one\ntwo\nthree\n")

    buf.delete(Position(3, 0))

    assert buf.lines() == ["onetwo", "three"]


def test_delete_single_cluster(hello_world: Buffer) -> None:
    hello_world.delete(Position(0, 1))

    assert hello_world.lines() == ["hello", "orld"]


def test_delete_at_end_of_last_line_is_ignored(hello_world: Buffer) -> None:
    hello_world.delete(Position(5, 1))
    hello_world.delete(Position(0, 5))

    assert hello_world.lines() == ["hello", "world"]
    assert not hello_world.is_dirty()


def test_find_forward_and_backward(hello_world: Buffer) -> None:
    found = hello_world.find("lo", Position(0, 0), SearchDirection.FORWARD)
    assert found == Position(3, 0)

    found = hello_world.find("he", Position(3, 0), SearchDirection.BACKWARD)
    assert found == Position(0, 0)


def test_find_forward_continues_on_following_lines(hello_world: Buffer) -> None:
    assert hello_world.find("wor", Position(3, 0)) == Position(0, 1)


def test_find_backward_continues_on_previous_lines(hello_world: Buffer) -> None:
    found = hello_world.find("ll", Position(2, 1), SearchDirection.BACKWARD)

    assert found == Position(2, 0)


def test_find_never_wraps(hello_world: Buffer) -> None:
    assert hello_world.find("he", Position(1, 0)) is None
    assert hello_world.find("wo", Position(0, 1), SearchDirection.BACKWARD) is None


def test_find_declines_empty_query_and_empty_buffer(hello_world: Buffer) -> None:
    assert hello_world.find("", Position(0, 0)) is None
    assert Buffer().find("a", Position(0, 0)) is None


def test_find_backward_from_past_the_end(hello_world: Buffer) -> None:
    found = hello_world.find("d", Position(0, 9), SearchDirection.BACKWARD)

    assert found == Position(4, 1)


def test_save_writes_every_line_with_newline(tmp_path) -> None:
    path = tmp_path / "out.txt"
    buf = Buffer.from_text("alpha\nbe\u0301ta", str(path))
    buf.insert(Position(5, 0), "!")

    buf.save_to_disk()

    assert path.read_bytes() == "alpha!\nbe\u0301ta\n".encode("utf-8")
    assert not buf.is_dirty()


def test_save_to_new_path_adopts_it(tmp_path) -> None:
    path = tmp_path / "new.txt"
    buf = Buffer()
    buf.insert(Position(0, 0), "x")

    buf.save_to_disk(str(path))

    assert buf.path == str(path)
    assert path.read_text(encoding="utf-8") == "x\n"


def test_save_without_path_raises_and_stays_dirty() -> None:
    buf = Buffer()
    buf.insert(Position(0, 0), "x")

    with pytest.raises(IOError):
        buf.save_to_disk()

    assert buf.is_dirty()


def test_failed_save_leaves_buffer_untouched(tmp_path) -> None:
    buf = Buffer.from_text("keep\n", str(tmp_path))
    buf.insert(Position(4, 0), "!")

    with pytest.raises(IOError):
        buf.save_to_disk()

    assert buf.lines() == ["keep!"]
    assert buf.is_dirty()
    assert buf.path == str(tmp_path)


def test_open_then_save_round_trip(tmp_path) -> None:
    path = tmp_path / "round.txt"
    content = "line one\n\tindented\nna\u0308ive\n"
    path.write_text(content, encoding="utf-8")

    buf = Buffer.open(str(path))
    buf.save_to_disk()

    assert path.read_text(encoding="utf-8") == content
