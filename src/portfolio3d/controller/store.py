"""
Pointer Store
The observable cell holding the most recent pointer position.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from portfolio3d.model.motion import PointerPosition

logger = logging.getLogger(__name__)


class PointerStore(QObject):
    """Single-slot cell holding the latest pointer position (last write wins)."""
    pointer_changed = Signal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._position = PointerPosition()

    def position(self) -> PointerPosition:
        return self._position

    def set_pointer(self, x: float, y: float) -> bool:
        """
        Replace the stored position and notify subscribers.

        Non-finite coordinates are dropped and the previous value is kept.
        Returns True when the write was accepted.
        """
        position = PointerPosition(float(x), float(y))
        if not position.is_finite():
            logger.warning(f"Ignoring non-finite pointer position ({x}, {y}).")
            return False
        self._position = position
        self.pointer_changed.emit(self._position)
        return True

    def reset(self) -> None:
        self._position = PointerPosition()
        self.pointer_changed.emit(self._position)
