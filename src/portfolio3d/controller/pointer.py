"""
Pointer Tracker
===============
Feeds every pointer move over the application's windows into a PointerStore.

Why is this file needed?
------------------------
Qt delivers mouse moves to whichever widget sits under the cursor and then
propagates them up the parent chain. Listening on individual widgets would
either miss moves (over the 3D canvas, over labels) or see the same move
several times. An application-level event filter sees each platform event
exactly once, when it is handed to its top-level `QWindow`.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QCoreApplication, QEvent, QObject, QPointF
from PySide6.QtGui import QMouseEvent, QWindow
from PySide6.QtWidgets import QWidget

from portfolio3d.controller.store import PointerStore

logger = logging.getLogger(__name__)


class PointerTracker(QObject):
    """
    Usage:
        tracker = PointerTracker(store, viewport=window)
        with tracker:
            app.exec()

    `attach()`/`detach()` can also be called directly; both are idempotent.
    """

    def __init__(
        self,
        store: PointerStore,
        viewport: Optional[QWidget] = None,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.store = store
        self.viewport = viewport
        self._app: Optional[QCoreApplication] = None

    @property
    def is_attached(self) -> bool:
        return self._app is not None

    def attach(self) -> None:
        if self._app is not None:
            return
        app = QCoreApplication.instance()
        if app is None:
            raise RuntimeError("PointerTracker.attach() requires a running QApplication.")
        app.installEventFilter(self)
        self._app = app
        logger.debug("Pointer tracker attached.")

    def detach(self) -> None:
        if self._app is None:
            return
        self._app.removeEventFilter(self)
        self._app = None
        logger.debug("Pointer tracker detached.")

    def __enter__(self) -> PointerTracker:
        self.attach()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.detach()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.MouseMove and isinstance(watched, QWindow):
            pos = self._to_viewport(event)
            self.store.set_pointer(pos.x(), pos.y())
        # Never consume the event
        return False

    def _to_viewport(self, event: QMouseEvent) -> QPointF:
        """Window-local position, or position relative to `viewport` when set."""
        if self.viewport is None:
            return event.position()
        return self.viewport.mapFromGlobal(event.globalPosition())
