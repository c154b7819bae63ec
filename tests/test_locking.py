import threading
from concurrent.futures import ThreadPoolExecutor

from search_server import DocumentStatus, ReadWriteLock, SearchServer, SynchronizedSearchServer


def test_concurrent_writers_and_readers():
    server = SynchronizedSearchServer(SearchServer("and"))

    def add(document_id: int) -> None:
        server.add_document(document_id, f"cat and dog{document_id % 3}", DocumentStatus.ACTUAL, [document_id])

    def search(_: int) -> int:
        return len(server.find_top_documents("cat"))

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(add, range(50)))
        counts = list(executor.map(search, range(50)))

    assert server.get_document_count() == 50
    assert all(count == 5 for count in counts)
    assert server.match_document("cat dog1", 1) == (["cat", "dog1"], DocumentStatus.ACTUAL)
    assert set(server.get_word_frequencies(4)) == {"cat", "dog1"}


def test_stop_words_through_wrapper():
    server = SynchronizedSearchServer()
    server.set_stop_words("in")
    server.add_document(1, "cat in city", DocumentStatus.ACTUAL, [])
    assert server.find_top_documents("in") == []


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    written = threading.Event()

    def writer() -> None:
        with lock.write_locked():
            written.set()

    with lock.read_locked():
        thread = threading.Thread(target=writer)
        thread.start()
        assert not written.wait(0.1)
    thread.join(timeout=5)
    assert written.is_set()


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inner = threading.Event()

    def reader() -> None:
        with lock.read_locked():
            inner.set()

    with lock.read_locked():
        thread = threading.Thread(target=reader)
        thread.start()
        assert inner.wait(5)
    thread.join(timeout=5)
