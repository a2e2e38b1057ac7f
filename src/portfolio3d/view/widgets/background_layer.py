"""
Background Layer
Paints the page colour plus the pointer-following radial gradient.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF
from PySide6.QtGui import QBrush, QColor, QPainter, QPaintEvent, QRadialGradient
from PySide6.QtWidgets import QWidget

from portfolio3d.config import PAGE_COLOR
from portfolio3d.model.motion import BackgroundStyle


class BackgroundLayer(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._style = BackgroundStyle()
        self._page_color = QColor(PAGE_COLOR)

    def background_style(self) -> BackgroundStyle:
        return self._style

    def set_background_style(self, style: BackgroundStyle) -> None:
        """Slot for BackgroundAnimator.style_changed."""
        self._style = style
        self.update()

    def build_gradient(self) -> QRadialGradient:
        style = self._style
        # Pointer coordinates are relative to the top-level window
        center = self.mapFrom(self.window(), QPointF(style.center.x, style.center.y))

        r, g, b, a = style.color
        gradient = QRadialGradient(center, float(style.radius))
        gradient.setColorAt(0.0, QColor(r, g, b, round(a * 255)))
        gradient.setColorAt(style.fade_stop, QColor(r, g, b, 0))
        gradient.setColorAt(1.0, QColor(r, g, b, 0))
        return gradient

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._page_color)
        painter.fillRect(self.rect(), QBrush(self.build_gradient()))
        painter.end()
