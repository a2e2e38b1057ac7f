"""
Projects Section
A two-column grid of project cards. A card lights up while hovered.
"""
from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QEvent
from PySide6.QtGui import QEnterEvent
from PySide6.QtWidgets import QFrame, QGridLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from portfolio3d.config import MUTED_TEXT_COLOR, TEXT_COLOR
from portfolio3d.model.content import Project
from portfolio3d.view.sections.base import Section, link_label

CARD_STYLE = """
    QFrame#projectCard {
        background-color: #111827;
        border: 1px solid #1f2937;
        border-radius: 8px;
    }
    QFrame#projectCard[hovered="true"] {
        background-color: #1f2937;
        border: 1px solid #3b82f6;
    }
"""
CHIP_STYLE = (
    "color: #93c5fd; background-color: rgba(30, 58, 138, 128);"
    "border-radius: 10px; padding: 2px 8px; font-size: 12px;"
)


class ProjectCard(QFrame):
    def __init__(self, project: Project, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.project = project
        self.setObjectName("projectCard")
        self.setProperty("hovered", False)
        self.setStyleSheet(CARD_STYLE)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        self.lbl_title = QLabel(project.title)
        self.lbl_title.setStyleSheet(f"color: {TEXT_COLOR}; font-size: 19px; font-weight: 600;")
        layout.addWidget(self.lbl_title)

        self.lbl_description = QLabel(project.description)
        self.lbl_description.setWordWrap(True)
        self.lbl_description.setStyleSheet(f"color: {MUTED_TEXT_COLOR};")
        layout.addWidget(self.lbl_description)

        # --- Tags ---
        tags_row = QHBoxLayout()
        tags_row.setSpacing(6)
        self.tag_labels: list[QLabel] = []
        for tag in project.tags:
            chip = QLabel(tag)
            chip.setStyleSheet(CHIP_STYLE)
            tags_row.addWidget(chip)
            self.tag_labels.append(chip)
        tags_row.addStretch()
        layout.addLayout(tags_row)

        # --- Actions (only for links that exist) ---
        self.action_links: list[QLabel] = []
        if project.has_actions:
            actions_row = QHBoxLayout()
            if project.live_link:
                self.action_links.append(link_label("Live", project.live_link))
            if project.github_link:
                self.action_links.append(link_label("GitHub", project.github_link))
            for link in self.action_links:
                actions_row.addWidget(link)
            actions_row.addStretch()
            layout.addLayout(actions_row)

        layout.addStretch()

    def action_labels(self) -> list[str]:
        return [link.property("link_text") for link in self.action_links]

    @property
    def is_hovered(self) -> bool:
        return bool(self.property("hovered"))

    def set_hovered(self, hovered: bool) -> None:
        if self.is_hovered == hovered:
            return
        self.setProperty("hovered", hovered)
        # Dynamic properties only restyle after a re-polish
        self.style().unpolish(self)
        self.style().polish(self)
        self.update()

    def enterEvent(self, event: QEnterEvent) -> None:
        super().enterEvent(event)
        self.set_hovered(True)

    def leaveEvent(self, event: QEvent) -> None:
        super().leaveEvent(event)
        self.set_hovered(False)


class ProjectsSection(Section):
    COLUMNS = 2

    def __init__(self, projects: Sequence[Project], parent: Optional[QWidget] = None) -> None:
        super().__init__("Projects", parent)

        grid = QGridLayout()
        grid.setSpacing(24)
        self.cards: list[ProjectCard] = []
        for index, project in enumerate(projects):
            card = ProjectCard(project)
            grid.addWidget(card, index // self.COLUMNS, index % self.COLUMNS)
            self.cards.append(card)

        self.layout_box.addLayout(grid)
