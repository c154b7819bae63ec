import numpy as np
import pytest

from search_server import Document, paginate


@pytest.mark.parametrize(
    "items, page_size, expected",
    [
        (list(range(5)), 2, [[0, 1], [2, 3], [4]]),
        (list(range(4)), 2, [[0, 1], [2, 3]]),
        (list(range(3)), 5, [[0, 1, 2]]),
        (list(range(3)), 1, [[0], [1], [2]]),
        ([], 3, []),
    ],
)
def test_paginate(items, page_size, expected):
    pages = paginate(items, page_size)
    assert [list(page) for page in pages] == expected
    assert [len(page) for page in pages] == [len(page) for page in expected]
    assert len(pages) == len(expected)


def test_paginator_is_restartable():
    pages = paginate("abcdefg", 3)
    first = [list(page) for page in pages]
    second = [list(page) for page in pages]
    assert first == second == [["a", "b", "c"], ["d", "e", "f"], ["g"]]


def test_pages_are_reiterable():
    page = next(iter(paginate([1, 2, 3], 2)))
    assert list(page) == list(page) == [1, 2]


@pytest.mark.parametrize("page_size", [0, -2, True, 1.5])
def test_invalid_page_size(page_size):
    with pytest.raises(ValueError):
        paginate([1, 2, 3], page_size)


def test_page_str():
    documents = [Document(1, 0.5, 3), Document(2, 0.25, -1)]
    page = next(iter(paginate(documents, 2)))
    assert str(page) == (
        "{ { document_id = 1, relevance = 0.5, rating = 3 } }"
        "{ { document_id = 2, relevance = 0.25, rating = -1 } }"
    )


def test_numpy_integer_page_size():
    pages = paginate(list(range(5)), np.int64(2))
    assert [list(page) for page in pages] == [[0, 1], [2, 3], [4]]
    assert pages.page_size == 2
