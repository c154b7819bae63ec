import pytest

from search_server.tokenizer import split_into_words, split_into_words_no_stop


@pytest.mark.parametrize(
    "text, expected",
    [
        ("white cat and fancy collar", ["white", "cat", "and", "fancy", "collar"]),
        ("  leading and   repeated spaces  ", ["leading", "and", "repeated", "spaces"]),
        ("", []),
        ("     ", []),
        ("Case, punctuation-kept!", ["Case,", "punctuation-kept!"]),
        ("-minus words stay intact", ["-minus", "words", "stay", "intact"]),
    ],
)
def test_split_into_words(text, expected):
    assert split_into_words(text) == expected


def test_split_only_on_spaces():
    """Tabs are not separators, only ASCII spaces are."""
    assert split_into_words("cat\tdog bird") == ["cat\tdog", "bird"]


def test_split_into_words_no_stop():
    stop_words = {"in", "the"}
    assert split_into_words_no_stop("cat in the city", stop_words) == ["cat", "city"]


def test_split_into_words_no_stop_preserves_duplicates_and_order():
    assert split_into_words_no_stop("b a b the a", frozenset({"the"})) == ["b", "a", "b", "a"]


def test_stop_words_are_case_sensitive():
    assert split_into_words_no_stop("The the", {"the"}) == ["The"]


def test_only_stop_words():
    assert split_into_words_no_stop("in the in", {"in", "the"}) == []
