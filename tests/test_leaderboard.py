import pytest

from mathquiz.leaderboard import (
    MAX_ENTRIES,
    NAME_LEN,
    Entry,
    Leaderboard,
    LeaderboardFullError,
)


def test_add_keeps_descending_order():
    board = Leaderboard()
    board.add("a", 3)
    board.add("b", 9)
    board.add("c", 5)
    assert [e.score for e in board] == [9, 5, 3]
    assert board.entries()[0] == Entry("b", 9)
    assert len(board) == 3


def test_add_clips_long_names():
    board = Leaderboard()
    board.add("x" * 200, 1)
    assert len(board.entries()[0].name) == NAME_LEN - 1


def test_add_when_full_raises():
    board = Leaderboard()
    for i in range(MAX_ENTRIES):
        board.add(f"p{i}", i)
    with pytest.raises(LeaderboardFullError):
        board.add("late", 1)
    assert len(board) == MAX_ENTRIES


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "lb.txt"
    board = Leaderboard()
    board.add("alice", 4)
    board.add("bob", 7)
    board.save(path)
    assert path.read_text(encoding="utf-8") == "bob,7\nalice,4\n"

    other = Leaderboard()
    other.load(path)
    assert other.entries() == board.entries()


def test_load_missing_file_raises(tmp_path):
    board = Leaderboard()
    with pytest.raises(OSError):
        board.load(tmp_path / "missing.txt")


def test_load_parses_like_atoi_and_skips_lines_without_comma(tmp_path):
    path = tmp_path / "lb.txt"
    path.write_text("no comma here\nbob, 12abc\nx,abc\ncarol,-3\n", encoding="utf-8")
    board = Leaderboard()
    board.load(path)
    assert board.entries() == (Entry("bob", 12), Entry("x", 0), Entry("carol", -3))


def test_load_replaces_existing_entries(tmp_path):
    path = tmp_path / "lb.txt"
    path.write_text("z,1\n", encoding="utf-8")
    board = Leaderboard()
    board.add("old", 50)
    board.load(path)
    assert board.entries() == (Entry("z", 1),)


def test_load_stops_at_capacity(tmp_path):
    path = tmp_path / "lb.txt"
    path.write_text("".join(f"n{i},{i}\n" for i in range(MAX_ENTRIES + 20)), encoding="utf-8")
    board = Leaderboard()
    board.load(path)
    assert len(board) == MAX_ENTRIES
    assert board.entries()[0] == Entry(f"n{MAX_ENTRIES - 1}", MAX_ENTRIES - 1)


def test_reset_clears_entries_and_file(tmp_path):
    path = tmp_path / "lb.txt"
    board = Leaderboard()
    board.add("a", 1)
    board.save(path)
    board.reset(path)
    assert len(board) == 0
    assert path.read_text(encoding="utf-8") == ""


def test_reset_into_missing_directory_raises(tmp_path):
    board = Leaderboard()
    board.add("a", 1)
    with pytest.raises(OSError):
        board.reset(tmp_path / "nope" / "lb.txt")
    assert len(board) == 0