from babble.words import count_words, iter_words, slice_words


def test_skip_then_take():
    assert slice_words("a b c d e", skip=2, count=2) == "c d"


def test_short_result_is_not_padded():
    assert slice_words("a b", skip=0, count=3) == "a b"


def test_runs_of_spaces_are_dropped():
    assert slice_words("a  b   c", skip=1, count=5) == "b c"
    assert slice_words("  lead and trail  ", skip=0, count=2) == "lead and"


def test_zero_count_and_exhausted_skip():
    assert slice_words("x y z", skip=0, count=0) == ""
    assert slice_words("x y z", skip=3, count=2) == ""


def test_start_offset_reads_a_view():
    text = "zz a b c"
    assert slice_words(text, skip=0, count=2, start=3) == "a b"
    assert [w for _, w in iter_words(text, 3)] == ["a", "b", "c"]


def test_iter_words_offsets():
    assert list(iter_words("ab  cd")) == [(0, "ab"), (4, "cd")]


def test_count_words():
    assert count_words("the cat") == 2
    assert count_words("") == 0
    assert count_words(" a  b ") == 2
