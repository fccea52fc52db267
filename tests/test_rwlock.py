from __future__ import annotations

import threading

from core.points.rwlock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)
    errors = []

    def reader():
        try:
            with lock.read():
                # both readers must be inside at once to pass
                barrier.wait()
        except threading.BrokenBarrierError as e:
            errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert errors == []


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read():
            entered.set()

    with lock.write():
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(timeout=0.1)

    assert entered.wait(timeout=2)
    t.join(timeout=2)


def test_writer_waits_for_readers_to_leave():
    lock = ReadWriteLock()
    wrote = threading.Event()

    def writer():
        with lock.write():
            wrote.set()

    with lock.read():
        t = threading.Thread(target=writer)
        t.start()
        assert not wrote.wait(timeout=0.1)

    assert wrote.wait(timeout=2)
    t.join(timeout=2)


def test_writers_exclude_each_other():
    lock = ReadWriteLock()
    inside = 0
    peak = 0
    guard = threading.Lock()

    def writer():
        nonlocal inside, peak
        for _ in range(200):
            with lock.write():
                with guard:
                    inside += 1
                    peak = max(peak, inside)
                with guard:
                    inside -= 1

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert peak == 1
