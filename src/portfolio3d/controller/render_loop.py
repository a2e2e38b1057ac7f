"""
3D Render Loop
==============
Per-frame clock for the decorative cube.

Why is this file needed?
------------------------
1. Timing: It ticks once per display refresh and measures the time elapsed
   since the scene was mounted.
2. Decoupling: It only knows a `FrameTarget`; the PyVista scene implements it
   but tests can plug in any object.
3. Lifetime: Frames never reach a target that is missing or not ready yet,
   and `stop()` guarantees no further callbacks.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QElapsedTimer, QObject, Qt, QTimer, Signal
from PySide6.QtGui import QGuiApplication

from portfolio3d.config import FALLBACK_REFRESH_RATE_HZ
from portfolio3d.model.motion import MeshTransform, mesh_transform

logger = logging.getLogger(__name__)


class FrameTarget(Protocol):
    def apply_transform(self, transform: MeshTransform) -> bool:
        """Apply the transform; return False if the mesh does not exist yet."""
        ...


def frame_interval_ms() -> int:
    """Timer interval matching the primary screen refresh rate."""
    rate = FALLBACK_REFRESH_RATE_HZ
    screen = QGuiApplication.primaryScreen()
    if screen is not None and screen.refreshRate() > 0:
        rate = screen.refreshRate()
    return max(1, round(1000.0 / rate))


class RenderLoop(QObject):
    frame_rendered = Signal(object)

    def __init__(
        self,
        target: Optional[FrameTarget] = None,
        clock: Optional[Callable[[], float]] = None,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.target = target
        self._clock = clock
        self._elapsed = QElapsedTimer()

        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self.tick)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def set_target(self, target: Optional[FrameTarget]) -> None:
        self.target = target

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._elapsed.start()
        self._timer.setInterval(frame_interval_ms())
        self._timer.start()
        logger.debug(f"Render loop started ({self._timer.interval()} ms per frame).")

    def stop(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        logger.debug("Render loop stopped.")

    def elapsed_seconds(self) -> float:
        if self._clock is not None:
            return self._clock()
        if not self._elapsed.isValid():
            return 0.0
        return self._elapsed.nsecsElapsed() / 1e9

    def tick(self) -> Optional[MeshTransform]:
        """Compute and apply one frame. Returns None when the frame was skipped."""
        target = self.target
        if target is None:
            return None

        transform = mesh_transform(self.elapsed_seconds())
        if not target.apply_transform(transform):
            return None

        self.frame_rendered.emit(transform)
        return transform
