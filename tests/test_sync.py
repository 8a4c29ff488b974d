import threading
import time

import pytest

from fswatchkit.sync import Atomic, Mutex


def test_atomic_defaults_to_false():
    assert Atomic().load() is False


def test_atomic_store_then_load():
    cell = Atomic(False)
    cell.store(True)
    assert cell.load() is True


def test_atomic_holds_other_types():
    cell = Atomic("start")
    cell.store("stop")
    assert cell.load() == "stop"


def test_atomic_concurrent_stores_leave_a_stored_value():
    cell = Atomic(0)
    values = list(range(1, 21))

    def writer(v):
        for _ in range(200):
            cell.store(v)

    threads = [threading.Thread(target=writer, args=(v,)) for v in values]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert cell.load() in values


def test_atomic_visible_across_threads():
    cell = Atomic(False)
    t = threading.Thread(target=cell.store, args=(True,))
    t.start()
    t.join()
    assert cell.load() is True


def test_mutex_is_recursive():
    mutex = Mutex()
    mutex.lock()
    mutex.lock()
    mutex.unlock()
    mutex.unlock()
    with pytest.raises(RuntimeError):
        mutex.unlock()


def test_unlock_without_lock_raises():
    with pytest.raises(RuntimeError):
        Mutex().unlock()


def test_mutex_excludes_other_threads():
    mutex = Mutex()
    acquired = Atomic(False)

    def contender():
        mutex.lock()
        acquired.store(True)
        mutex.unlock()

    mutex.lock()
    t = threading.Thread(target=contender)
    t.start()
    time.sleep(0.1)
    assert acquired.load() is False
    mutex.unlock()
    t.join(2.0)
    assert acquired.load() is True


def test_context_manager_returns_mutex_and_releases():
    mutex = Mutex()
    with mutex as held:
        assert held is mutex
    with pytest.raises(RuntimeError):
        mutex.unlock()


def test_context_manager_releases_on_exception():
    mutex = Mutex()
    with pytest.raises(ValueError):
        with mutex:
            raise ValueError("boom")
    with pytest.raises(RuntimeError):
        mutex.unlock()


def test_mutex_protects_shared_counter():
    mutex = Mutex()
    counter = Atomic(0)

    def work():
        for _ in range(1000):
            with mutex:
                counter.store(counter.load() + 1)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter.load() == 8 * 1000