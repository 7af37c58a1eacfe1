import pytest

from kconfkit.dialog_text import MAX_LEN, LineEditor, TextPager

TEXT = "l0\nl1\nl2\nl3"


def test_next_line_walks_lines():
    pager = TextPager(TEXT)
    assert [pager.next_line() for _ in range(4)] == ["l0", "l1", "l2", "l3"]
    assert pager.end_reached


def test_vscroll_does_not_move_position():
    pager = TextPager(TEXT)
    pager.page_lines(2, 10)
    pager.vscroll()
    assert pager.next_line() == "l2"


def test_back_lines_to_start():
    pager = TextPager(TEXT)
    pager.page_lines(2, 10)
    pager.back_lines(2)
    assert pager.begin_reached
    assert pager.next_line() == "l0"


def test_initial_vscroll_skips_lines():
    pager = TextPager(TEXT, vscroll=2)
    assert not pager.begin_reached
    assert pager.next_line() == "l2"


def test_hscroll_and_width():
    assert TextPager("abcdef", hscroll=2).page_lines(1, 10) == [" cdef"]
    assert TextPager("abcdef").page_lines(1, 4) == [" ab"]


def test_page_length_stops_at_end():
    pager = TextPager(TEXT)
    lines = pager.page_lines(5, 10)
    assert len(lines) == 5
    assert pager.page_length == 4


def test_percent_bounds():
    pager = TextPager(TEXT)
    assert pager.percent() == 0
    pager.page_lines(4, 10)
    assert pager.percent() == 100


def test_long_line_truncated():
    pager = TextPager("x" * (MAX_LEN + 10))
    assert len(pager.next_line()) == MAX_LEN


def test_editor_typing_scrolls():
    editor = LineEditor("", 5)
    for ch in "abcdefg":
        assert editor.insert(ch)
        assert editor.pos == editor.show_x + editor.input_x
    assert editor.text == "abcdefg"
    assert editor.visible().endswith("g")
    assert len(editor.visible()) <= 5


def test_editor_initial_long_text():
    editor = LineEditor("abcdefgh", 5)
    assert editor.visible() == "efgh"
    assert editor.pos == 8


def test_editor_insert_in_middle():
    editor = LineEditor("ac", 10)
    assert editor.left()
    editor.insert("b")
    assert editor.text == "abc"
    assert editor.pos == 2


def test_editor_backspace_and_bounds():
    editor = LineEditor("ab", 10)
    assert editor.backspace()
    assert editor.text == "a"
    assert editor.right() is False
    assert editor.backspace()
    assert editor.backspace() is False
    assert editor.left() is False


def test_editor_round_trip_cursor():
    editor = LineEditor("abcdefghij", 4)
    for _ in range(10):
        editor.left()
    assert editor.pos == 0
    assert editor.visible() == "abcd"
    for _ in range(10):
        editor.right()
    assert editor.pos == 10
    assert editor.pos == editor.show_x + editor.input_x


def test_editor_rejects_unprintable():
    with pytest.raises(ValueError):
        LineEditor("", 5).insert("\n")


def test_editor_full_line():
    editor = LineEditor("x" * MAX_LEN, 10)
    assert editor.insert("y") is False
    assert len(editor.text) == MAX_LEN