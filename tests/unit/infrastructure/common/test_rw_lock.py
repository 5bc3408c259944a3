import threading
import time

from htmx_todo.infrastructure.common.rw_lock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=2)

    def reader():
        with lock.read():
            # All three readers must be inside at once for the barrier to release
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert not inside.broken


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_inside = threading.Event()

    def writer():
        with lock.write():
            writer_inside.set()
            time.sleep(0.05)
            events.append("writer-done")

    def reader():
        writer_inside.wait(timeout=2)
        with lock.read():
            events.append("reader")

    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert events == ["writer-done", "reader"]


def test_writers_are_mutually_exclusive():
    lock = ReadWriteLock()
    counter = {"value": 0, "max_inside": 0, "inside": 0}

    def writer():
        for _ in range(100):
            with lock.write():
                counter["inside"] += 1
                counter["max_inside"] = max(counter["max_inside"], counter["inside"])
                counter["value"] += 1
                counter["inside"] -= 1

    threads = [threading.Thread(target=writer) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert counter["value"] == 800
    assert counter["max_inside"] == 1


def test_lock_is_released_when_body_raises():
    lock = ReadWriteLock()

    try:
        with lock.write():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    acquired = threading.Event()

    def reader():
        with lock.read():
            acquired.set()

    thread = threading.Thread(target=reader)
    thread.start()
    thread.join(timeout=2)
    assert acquired.is_set()
