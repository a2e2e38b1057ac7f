from __future__ import annotations

import pytest
from PySide6.QtCore import QAbstractAnimation, QEasingCurve

from portfolio3d.config import BACKGROUND_TWEEN_MS
from portfolio3d.controller.background import BackgroundAnimator
from portfolio3d.controller.store import PointerStore
from portfolio3d.model.motion import BackgroundStyle, PointerPosition, radial_gradient


def finish(animator: BackgroundAnimator) -> None:
    animator.animation.setCurrentTime(animator.animation.duration())


def test_animation_parameters(qapp) -> None:
    animator = BackgroundAnimator(PointerStore())
    assert animator.animation.duration() == BACKGROUND_TWEEN_MS == 200
    assert animator.animation.easingCurve().type() == QEasingCurve.Type.Linear


def test_pointer_update_sets_target_and_starts_tween(qapp) -> None:
    store = PointerStore()
    animator = BackgroundAnimator(store)

    store.set_pointer(120, 45)

    assert animator.target == BackgroundStyle(center=PointerPosition(120.0, 45.0))
    assert animator.descriptor() == radial_gradient(PointerPosition(120.0, 45.0))
    assert animator.animation.state() == QAbstractAnimation.State.Running
    animator.stop()


def test_tween_is_linear(qapp) -> None:
    store = PointerStore()
    animator = BackgroundAnimator(store)

    store.set_pointer(200, 100)
    animator.animation.setCurrentTime(BACKGROUND_TWEEN_MS // 2)

    assert animator.current.center.x == pytest.approx(100.0)
    assert animator.current.center.y == pytest.approx(50.0)
    animator.stop()


def test_new_update_supersedes_running_tween(qapp) -> None:
    store = PointerStore()
    animator = BackgroundAnimator(store)
    styles = []
    animator.style_changed.connect(styles.append)

    store.set_pointer(200, 100)
    animator.animation.setCurrentTime(BACKGROUND_TWEEN_MS // 2)
    store.set_pointer(400, 300)

    # The new tween starts where the old one was interrupted
    animator.animation.setCurrentTime(BACKGROUND_TWEEN_MS // 2)
    assert animator.current.center.x == pytest.approx(250.0)
    assert animator.current.center.y == pytest.approx(175.0)

    finish(animator)
    assert animator.current.center == PointerPosition(400.0, 300.0)
    assert animator.target.center == PointerPosition(400.0, 300.0)
    assert styles[-1] == animator.current
    assert animator.animation.state() == QAbstractAnimation.State.Stopped
