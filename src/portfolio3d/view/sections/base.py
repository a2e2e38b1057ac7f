"""
Section Container
A titled block that fades in the first time it is shown.
"""
from __future__ import annotations

import html
from typing import Optional

from PySide6.QtCore import QPropertyAnimation, Qt
from PySide6.QtGui import QShowEvent
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel, QVBoxLayout, QWidget

from portfolio3d.config import ACCENT_TEXT_COLOR, SECTION_FADE_MS, TEXT_COLOR


def link_label(text: str, url: str, parent: Optional[QWidget] = None) -> QLabel:
    """
    Label holding a single external hyperlink. Activation opens the system
    browser, outside of the application.
    """
    label = QLabel(parent)
    label.setTextFormat(Qt.TextFormat.RichText)
    label.setText(
        f'<a href="{html.escape(url, quote=True)}" '
        f'style="color: {ACCENT_TEXT_COLOR}; text-decoration: none;">{html.escape(text)}</a>'
    )
    label.setTextInteractionFlags(Qt.TextInteractionFlag.TextBrowserInteraction)
    label.setOpenExternalLinks(True)
    label.setToolTip(url)
    label.setProperty("url", url)
    label.setProperty("link_text", text)
    return label


class Section(QWidget):
    def __init__(self, title: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.title = title

        self.layout_box = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 32)
        self.layout_box.setSpacing(16)

        self.lbl_title = QLabel(title)
        self.lbl_title.setStyleSheet(f"color: {TEXT_COLOR}; font-size: 24px; font-weight: 600;")
        self.layout_box.addWidget(self.lbl_title)

        # Entrance animation
        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self._fade = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade.setDuration(SECTION_FADE_MS)
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)
        self._revealed = False

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self._revealed:
            self._revealed = True
            self._fade.start()
            self.on_first_show()

    def on_first_show(self) -> None:
        """Hook for sections with their own entrance animation."""
