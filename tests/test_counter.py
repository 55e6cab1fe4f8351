import pytest

from numlex.counter import (
    LiteralCounts,
    WordTooLongError,
    classify,
    count_literals,
    main,
    split_words,
)
from numlex.states import State


def test_classify_prefers_integer():
    assert classify("42u") == State.STATE_DECIMAL_U


def test_classify_falls_back_to_float():
    assert classify("1.5f") == State.F_STATE_ALLPOINT_DIGIT_F


def test_classify_keeps_unfinished_integer_state():
    assert classify("0x") == State.STATE_HEX_PREFIX


def test_add_hex_counts_hex_and_unsigned():
    counts = LiteralCounts()
    counts.add(State.STATE_HEX)
    assert counts == LiteralCounts(decimal=1, whole=1, unsigned=1, hexadecimal=1)


def test_add_ignores_non_accepting_states():
    counts = LiteralCounts()
    for state in (State.STATE_ERROR, State.F_STATE_POINT_F, State.STATE_SIGN_P):
        counts.add(state)
    assert counts == LiteralCounts()


def test_split_words_on_whitespace_and_commas():
    assert list(split_words("1, 2\t3\n,,  ")) == ["1", "2", "3"]


def test_split_words_allows_longest_word():
    word = "1" * 29
    assert list(split_words(word)) == [word]


def test_split_words_rejects_long_word():
    with pytest.raises(WordTooLongError):
        list(split_words("1" * 30))


def test_count_literals_long_word_keeps_earlier_counts():
    with pytest.raises(WordTooLongError) as info:
        count_literals("12 " + "9" * 40)
    assert info.value.counts == count_literals("12")


def test_count_literals_separator_invariance():
    assert count_literals("10 0x1F 017 1.5f 3u") == count_literals("10,0x1F\n017\t1.5f,3u")


def test_count_literals_is_additive():
    left = count_literals("017 0xAl")
    right = count_literals("1e5 -3ll")
    both = count_literals("017 0xAl 1e5 -3ll")
    assert both.decimal == left.decimal + right.decimal
    assert both.floating_point == left.floating_point + right.floating_point
    assert both.whole == both.decimal + both.floating_point


def test_count_literals_ignores_non_numbers():
    assert count_literals("abc + 0x .f") == LiteralCounts()


def test_octal_is_also_unsigned_and_decimal():
    counts = count_literals("017")
    assert counts.octal == counts.unsigned == counts.decimal == counts.whole


def test_report_lists_counters():
    report = LiteralCounts().report()
    assert report.startswith("\nCounters:\n")
    assert "Decimal constants: 0\n" in report
    assert report.endswith("Float numbers: 0\n")


def test_main_prints_report(tmp_path, capsys):
    text = "10, 0x1F 2.5f -7"
    path = tmp_path / "input.txt"
    path.write_text(text)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == count_literals(text).report()


def test_main_reports_long_word(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("5 " + "x" * 35)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Word exceeds maximum length! \n")
    assert out.endswith(count_literals("5").report())


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err