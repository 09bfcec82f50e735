from __future__ import annotations

from geiger.serial.framer import LineFramer

RECORD = "105 4.9V 12V +23°C 1013.2hPa ABC123 920 nSv/h"


def _feed_all(chunks) -> list:
    framer = LineFramer()
    lines = []
    for chunk in chunks:
        lines.extend(framer.feed(chunk))
    return lines


def test_feed_returns_complete_lines_and_keeps_fragment() -> None:
    framer = LineFramer()
    assert framer.feed("first\nsecond\nthi") == ["first", "second"]
    assert framer.pending == "thi"
    assert framer.feed("rd\n") == ["third"]
    assert framer.pending == ""


def test_terminator_runs_collapse() -> None:
    framer = LineFramer()
    assert framer.feed("a\r\n\r\nb") == ["a"]
    assert framer.pending == "b"
    assert framer.feed("\r") == ["b"]


def test_empty_and_unterminated_input_yield_nothing() -> None:
    framer = LineFramer()
    assert framer.feed("") == []
    assert framer.feed("no terminator yet") == []
    assert framer.pending == "no terminator yet"


def test_leading_terminator_does_not_produce_empty_line() -> None:
    framer = LineFramer()
    assert framer.feed("\r\nabc\n") == ["abc"]


def test_line_split_at_every_offset_is_reassembled() -> None:
    data = RECORD + "\r\n"
    for offset in range(len(data) + 1):
        assert _feed_all([data[:offset], data[offset:]]) == [RECORD], offset


def test_character_by_character_feed_preserves_order() -> None:
    data = "one\rtwo\n\nthree\r\nfour"
    assert _feed_all(list(data)) == ["one", "two", "three"]


def test_reset_discards_pending_fragment() -> None:
    framer = LineFramer()
    framer.feed("partial")
    framer.reset()
    assert framer.pending == ""
    assert framer.feed("line\n") == ["line"]


def test_instances_do_not_share_state() -> None:
    a = LineFramer()
    b = LineFramer()
    a.feed("from a")
    assert b.feed("from b\n") == ["from b"]
    assert a.pending == "from a"
