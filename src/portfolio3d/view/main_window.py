"""
Main Application Window
=======================
The single page of the portfolio: background layer, 3D header and the
content sections.

Why is this file needed?
------------------------
1. Layout: It composes the sections from the ContentModel, top to bottom.
2. Ownership: It owns the pointer store, the background animator and the
   render loop, and ties their lifetime to the window (mount on first show,
   unmount on close).
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import (
    QFrame, QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget
)

from portfolio3d.config import (
    CONTENT_MAX_WIDTH, MUTED_TEXT_COLOR, SCENE_HEIGHT_PX, VISIBLE_APP_NAME, WINDOW_SIZE
)
from portfolio3d.controller.background import BackgroundAnimator
from portfolio3d.controller.pointer import PointerTracker
from portfolio3d.controller.render_loop import RenderLoop
from portfolio3d.controller.store import PointerStore
from portfolio3d.model.content import ContentModel
from portfolio3d.view.sections import (
    AboutSection, ContactSection, ProjectsSection, SkillsSection
)
from portfolio3d.view.widgets.background_layer import BackgroundLayer

logger = logging.getLogger(__name__)

NAME_STYLE = (
    "font-size: 48px; font-weight: 700;"
    "color: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 #60a5fa, stop:1 #9333ea);"
)


class MainWindow(QMainWindow):
    def __init__(self, content: ContentModel, enable_3d: bool = True) -> None:
        super().__init__()
        self.content: ContentModel = content
        self._mounted: bool = False

        self.setWindowTitle(f"{content.profile.name} - {VISIBLE_APP_NAME}")
        self.resize(*WINDOW_SIZE)

        # --- STATE & CONTROLLERS ---
        self.pointer_store = PointerStore(self)
        self.background_animator = BackgroundAnimator(self.pointer_store, parent=self)
        self.pointer_tracker = PointerTracker(self.pointer_store, viewport=self, parent=self)
        self.render_loop = RenderLoop(parent=self)

        # --- BACKGROUND (central widget) ---
        self.background = BackgroundLayer()
        self.setCentralWidget(self.background)
        self.background_animator.style_changed.connect(self.background.set_background_style)

        root_layout = QVBoxLayout(self.background)
        root_layout.setContentsMargins(0, 0, 0, 0)

        # --- SCROLLABLE PAGE ---
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll.setStyleSheet("QScrollArea, QScrollArea > QWidget > QWidget { background: transparent; }")
        root_layout.addWidget(self.scroll)

        page = QWidget()
        page.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        page_layout = QVBoxLayout(page)
        page_layout.setContentsMargins(16, 64, 16, 64)
        page_layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        column = QWidget()
        column.setMaximumWidth(CONTENT_MAX_WIDTH)
        self.column_layout = QVBoxLayout(column)
        self.column_layout.setContentsMargins(0, 0, 0, 0)
        self.column_layout.setSpacing(32)
        page_layout.addWidget(column)
        self.scroll.setWidget(page)

        # --- 1. HEADER ---
        self.scene_widget = self._create_scene(enable_3d)
        self.scene_widget.setFixedHeight(SCENE_HEIGHT_PX)
        self.column_layout.addWidget(self.scene_widget)

        self.lbl_name = QLabel(content.profile.name)
        self.lbl_name.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_name.setStyleSheet(NAME_STYLE)
        self.column_layout.addWidget(self.lbl_name)

        self.lbl_title = QLabel(content.profile.title)
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_title.setStyleSheet(f"font-size: 20px; color: {MUTED_TEXT_COLOR};")
        self.column_layout.addWidget(self.lbl_title)

        # --- 2. SECTIONS (order = page order) ---
        self.about_section = AboutSection(content.profile)
        self.skills_section = SkillsSection(content.skills)
        self.projects_section = ProjectsSection(content.projects)
        self.contact_section = ContactSection(content.profile.links)

        for section in (self.about_section, self.skills_section,
                        self.projects_section, self.contact_section):
            self.column_layout.addWidget(section)
        self.column_layout.addStretch()

    def _create_scene(self, enable_3d: bool) -> QWidget:
        if not enable_3d:
            logger.info("3D scene disabled, using placeholder.")
            return QWidget()
        # VTK is only loaded when the 3D scene is enabled
        from portfolio3d.view.widgets.scene_3d import CubeSceneWidget
        return CubeSceneWidget(self.render_loop)

    # --- LIFECYCLE ---
    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        """Attach the pointer listener and start the frame clock. Idempotent."""
        if self._mounted:
            return
        self.pointer_tracker.attach()
        # No scene registered (3D disabled): nothing to animate
        if self.render_loop.target is not None:
            self.render_loop.start()
        self._mounted = True
        logger.info("Portfolio view mounted.")

    def unmount(self) -> None:
        """Detach the pointer listener and stop all animation. Idempotent."""
        was_mounted = self._mounted
        self._mounted = False
        self.pointer_tracker.detach()
        self.render_loop.stop()
        self.background_animator.stop()
        if was_mounted:
            logger.info("Portfolio view unmounted.")

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self.mount()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.unmount()
        shutdown = getattr(self.scene_widget, "shutdown", None)
        if shutdown is not None:
            shutdown()
        event.accept()
