"""
Background Animator
Tweens the radial-gradient background towards the latest pointer position.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEasingCurve, QObject, QPointF, QVariantAnimation, Signal

from portfolio3d.config import BACKGROUND_TWEEN_MS
from portfolio3d.controller.store import PointerStore
from portfolio3d.model.motion import BackgroundStyle, PointerPosition

logger = logging.getLogger(__name__)


class BackgroundAnimator(QObject):
    # Emitted on every interpolated step with the style to paint
    style_changed = Signal(object)

    def __init__(
        self,
        store: PointerStore,
        duration_ms: int = BACKGROUND_TWEEN_MS,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.store = store

        initial = BackgroundStyle(center=store.position())
        self._target: BackgroundStyle = initial
        self._current: BackgroundStyle = initial

        self.animation = QVariantAnimation(self)
        self.animation.setDuration(duration_ms)
        self.animation.setEasingCurve(QEasingCurve.Type.Linear)
        self.animation.valueChanged.connect(self._on_value_changed)

        self.store.pointer_changed.connect(self.animate_to)

    @property
    def target(self) -> BackgroundStyle:
        return self._target

    @property
    def current(self) -> BackgroundStyle:
        return self._current

    def descriptor(self) -> str:
        """Descriptor of the style the background is heading to."""
        return self._target.descriptor()

    def animate_to(self, position: PointerPosition) -> None:
        """Start a new tween from the displayed centre; any running one is dropped."""
        self._target = BackgroundStyle(center=position)

        self.animation.stop()
        self.animation.setStartValue(QPointF(self._current.center.x, self._current.center.y))
        self.animation.setEndValue(QPointF(position.x, position.y))
        self.animation.start()

    def stop(self) -> None:
        self.animation.stop()

    def _on_value_changed(self, value: QPointF) -> None:
        self._current = BackgroundStyle(center=PointerPosition(value.x(), value.y()))
        self.style_changed.emit(self._current)
