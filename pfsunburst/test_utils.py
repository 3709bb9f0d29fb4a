import pytest

from pfsunburst.utils import lorem_rows, normalize_color, wrap_label


def test_wrap_label_short_label_unchanged():
    assert wrap_label("Fiscal sustainability", 25) == "Fiscal sustainability"


def test_wrap_label_exact_length_unchanged():
    label = "a" * 12 + " " + "b" * 12
    assert len(label) == 25
    assert wrap_label(label, 25) == label


def test_wrap_label_one_over_wraps():
    label = "a" * 12 + " " + "b" * 13
    assert wrap_label(label, 25) == "a" * 12 + "<br>" + "b" * 13


def test_wrap_label_greedy_packing():
    assert (
        wrap_label("Commitment to Feasible Policy", 25)
        == "Commitment to Feasible<br>Policy"
    )


def test_wrap_label_lines_within_limit():
    label = (
        "Inadequate commitment of political and technical leadership to policy "
        "action and associated resource mobilization"
    )
    for line in wrap_label(label, 25).split("<br>"):
        assert len(line) <= 25


def test_wrap_label_long_word_not_split():
    word = "x" * 30
    assert wrap_label(word, 25) == word
    assert wrap_label("short " + word, 25) == "short<br>" + word


def test_wrap_label_custom_line_break():
    assert wrap_label("one two three", 7, "\n") == "one two\nthree"


@pytest.mark.parametrize(
    "raw, expected",
    [("#f84b64", "#F84B64"), ("FF848B", "#FF848B"), ("black", "BLACK")],
)
def test_normalize_color(raw, expected):
    assert normalize_color(raw) == expected


def test_lorem_rows():
    rows = lorem_rows("abc ", 3, 10)
    assert rows == ["abc abc ab"] * 3


def test_wrap_label_keeps_hyphenated_words_whole():
    label = "Non-financial information for decision making"
    assert wrap_label(label, 25) == "Non-financial information<br>for decision making"
    assert wrap_label("pre post-fiscal-sustainability", 12) == "pre<br>post-fiscal-sustainability"
