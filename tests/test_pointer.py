from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QObject, QPointF, Qt
from PySide6.QtGui import QMouseEvent, QWindow

from portfolio3d.controller.pointer import PointerTracker
from portfolio3d.controller.store import PointerStore
from portfolio3d.model.motion import PointerPosition


def move(target: QObject, x: float, y: float) -> None:
    event = QMouseEvent(
        QEvent.Type.MouseMove, QPointF(x, y), QPointF(x, y),
        Qt.MouseButton.NoButton, Qt.MouseButton.NoButton, Qt.KeyboardModifier.NoModifier,
    )
    QCoreApplication.sendEvent(target, event)


@pytest.fixture
def window(qapp) -> QWindow:
    win = QWindow()
    yield win
    win.destroy()


def test_store_defaults_to_origin(qapp) -> None:
    assert PointerStore().position() == PointerPosition(0.0, 0.0)


def test_store_keeps_only_the_latest_write(qapp) -> None:
    store = PointerStore()
    received = []
    store.pointer_changed.connect(received.append)

    for x, y in [(1, 2), (3, 4), (5, 6)]:
        store.set_pointer(x, y)

    assert store.position() == PointerPosition(5.0, 6.0)
    assert len(received) == 3


@pytest.mark.parametrize("x, y", [(float("nan"), 1.0), (1.0, float("inf")), (float("-inf"), float("nan"))])
def test_store_ignores_non_finite_coordinates(qapp, x: float, y: float) -> None:
    store = PointerStore()
    store.set_pointer(10, 20)
    received = []
    store.pointer_changed.connect(received.append)

    assert store.set_pointer(x, y) is False
    assert store.position() == PointerPosition(10.0, 20.0)
    assert received == []


def test_tracker_emits_one_update_per_move(qapp, window: QWindow) -> None:
    store = PointerStore()
    received = []
    store.pointer_changed.connect(received.append)

    with PointerTracker(store):
        move(window, 12, 34)

    assert received == [PointerPosition(12.0, 34.0)]


def test_only_the_last_move_is_reflected(qapp, window: QWindow) -> None:
    store = PointerStore()
    with PointerTracker(store):
        for i in range(1, 11):
            move(window, i * 10, i * 5)
    assert store.position() == PointerPosition(100.0, 50.0)


def test_detached_tracker_ignores_moves(qapp, window: QWindow) -> None:
    store = PointerStore()
    tracker = PointerTracker(store)
    tracker.attach()
    move(window, 5, 5)
    tracker.detach()

    received = []
    store.pointer_changed.connect(received.append)
    move(window, 99, 99)

    assert received == []
    assert store.position() == PointerPosition(5.0, 5.0)


def test_attach_and_detach_are_idempotent(qapp, window: QWindow) -> None:
    store = PointerStore()
    received = []
    store.pointer_changed.connect(received.append)

    tracker = PointerTracker(store)
    tracker.attach()
    tracker.attach()
    move(window, 1, 1)
    assert len(received) == 1

    tracker.detach()
    tracker.detach()
    assert not tracker.is_attached


def test_context_exit_detaches_on_error(qapp, window: QWindow) -> None:
    store = PointerStore()
    tracker = PointerTracker(store)
    with pytest.raises(RuntimeError):
        with tracker:
            raise RuntimeError("boom")
    assert not tracker.is_attached

    move(window, 7, 7)
    assert store.position() == PointerPosition(0.0, 0.0)


def test_moves_to_non_window_objects_are_ignored(qapp) -> None:
    store = PointerStore()
    with PointerTracker(store):
        move(QObject(), 40, 40)
    assert store.position() == PointerPosition(0.0, 0.0)
