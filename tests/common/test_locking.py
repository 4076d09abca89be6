import threading

import pytest

from sheets_attendance.common.locking import KeyedLock
from sheets_attendance.container import build_container


def test_same_key_is_serialized():
    locks = KeyedLock()
    entered = threading.Event()

    def worker():
        with locks.hold(("2026-02-02", "Alice")):
            entered.set()

    with locks.hold(("2026-02-02", "Alice")):
        t = threading.Thread(target=worker)
        t.start()
        assert not entered.wait(0.2)

    t.join(timeout=2)
    assert entered.is_set()


def test_different_keys_do_not_block():
    locks = KeyedLock()
    entered = threading.Event()

    def worker():
        with locks.hold(("2026-02-02", "Bob")):
            entered.set()

    with locks.hold(("2026-02-02", "Alice")):
        t = threading.Thread(target=worker)
        t.start()
        assert entered.wait(2)
    t.join(timeout=2)


def test_released_keys_are_dropped():
    locks = KeyedLock()

    for day in range(1, 29):
        with locks.hold((f"2026-02-{day:02d}", "Alice")):
            assert len(locks) == 1

    assert len(locks) == 0


def test_key_kept_while_another_thread_waits():
    locks = KeyedLock()
    entered = threading.Event()

    def worker():
        with locks.hold(("2026-02-02", "Alice")):
            entered.set()

    with locks.hold(("2026-02-02", "Alice")):
        t = threading.Thread(target=worker)
        t.start()
        assert not entered.wait(0.2)
        assert len(locks) == 1

    t.join(timeout=2)
    assert entered.is_set()
    assert len(locks) == 0


def test_lock_released_when_body_raises():
    locks = KeyedLock()

    with pytest.raises(RuntimeError):
        with locks.hold("k"):
            raise RuntimeError("boom")

    assert len(locks) == 0
    with locks.hold("k"):
        pass


def test_services_share_one_lock_map(store):
    container = build_container(store=store)

    assert container.attendance_service._locks is container.leave_service._locks
