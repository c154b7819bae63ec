import numpy as np

from search_server import DocumentStatus, SearchServer


def _demo_server() -> SearchServer:
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return server


def test_demo_ranking_regression() -> None:
    """
    Regression check on the demonstration corpus:
    - Repeated query words outrank single matches.
    - Documents with equal relevance are ordered by rating.
    """
    found = _demo_server().find_top_documents("пушистый ухоженный кот")

    assert [document.id for document in found] == [1, 0, 2]
    assert [document.rating for document in found] == [5, 2, -1]
    assert np.allclose(
        [document.relevance for document in found],
        [0.5 * np.log(4) + 0.25 * np.log(2), 0.25 * np.log(2), 0.25 * np.log(2)],
    )


def test_demo_banned_regression() -> None:
    found = _demo_server().find_top_documents("пушистый ухоженный кот", DocumentStatus.BANNED)

    assert [document.id for document in found] == [3]
    assert found[0].rating == 9
    assert np.isclose(found[0].relevance, np.log(2) / 3)


def test_demo_even_ids_regression() -> None:
    found = _demo_server().find_top_documents(
        "пушистый ухоженный кот", lambda document_id, status, rating: document_id % 2 == 0
    )

    assert [document.id for document in found] == [0, 2]
    assert str(found[0]) == "{ document_id = 0, relevance = 0.173287, rating = 2 }"
