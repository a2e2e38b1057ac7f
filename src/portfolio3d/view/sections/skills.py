"""
Skills Section
The skill tags, in content order, inside a wrapping and scrollable list.
Tags appear one after another the first time the section is shown.
"""
from typing import Optional, Sequence

from PySide6.QtCore import QSize, Qt, QTimer
from PySide6.QtWidgets import QAbstractItemView, QListView, QListWidget, QListWidgetItem, QWidget

from portfolio3d.config import SKILL_STAGGER_MS
from portfolio3d.model.content import Skill
from portfolio3d.view.sections.base import Section

TAG_STYLE = """
    QListWidget { background: transparent; border: none; }
    QListWidget::item {
        color: #93c5fd;
        background-color: rgba(30, 58, 138, 50);
        border: 1px solid #1d4ed8;
        border-radius: 12px;
        padding: 4px 12px;
        margin: 4px;
    }
"""


class SkillsSection(Section):
    def __init__(self, skills: Sequence[Skill], parent: Optional[QWidget] = None) -> None:
        super().__init__("Skills", parent)

        self.list_skills = QListWidget()
        self.list_skills.setViewMode(QListView.ViewMode.IconMode)
        self.list_skills.setFlow(QListView.Flow.LeftToRight)
        self.list_skills.setWrapping(True)
        self.list_skills.setResizeMode(QListView.ResizeMode.Adjust)
        self.list_skills.setMovement(QListView.Movement.Static)
        self.list_skills.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.list_skills.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.list_skills.setUniformItemSizes(False)
        self.list_skills.setMaximumHeight(160)
        self.list_skills.setStyleSheet(TAG_STYLE)

        for skill in skills:
            item = QListWidgetItem(skill.label)
            item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            item.setSizeHint(QSize(self.fontMetrics().horizontalAdvance(skill.label) + 40, 34))
            self.list_skills.addItem(item)
            item.setHidden(True)

        self.layout_box.addWidget(self.list_skills)

        # Staggered entrance: one tag every SKILL_STAGGER_MS
        self._shown_count = 0
        self._stagger = QTimer(self)
        self._stagger.setInterval(SKILL_STAGGER_MS)
        self._stagger.timeout.connect(self.reveal_next)

    def labels(self) -> list[str]:
        return [self.list_skills.item(i).text() for i in range(self.list_skills.count())]

    def visible_labels(self) -> list[str]:
        return [
            self.list_skills.item(i).text()
            for i in range(self.list_skills.count())
            if not self.list_skills.item(i).isHidden()
        ]

    def on_first_show(self) -> None:
        self.reveal_next()
        if self._shown_count < self.list_skills.count():
            self._stagger.start()

    def reveal_next(self) -> bool:
        """Shows the next hidden tag. Returns False once every tag is visible."""
        if self._shown_count >= self.list_skills.count():
            self._stagger.stop()
            return False
        self.list_skills.item(self._shown_count).setHidden(False)
        self._shown_count += 1
        if self._shown_count >= self.list_skills.count():
            self._stagger.stop()
        return True
