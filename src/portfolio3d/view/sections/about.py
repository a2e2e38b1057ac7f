from typing import Optional

from PySide6.QtWidgets import QLabel, QWidget

from portfolio3d.config import MUTED_TEXT_COLOR
from portfolio3d.model.content import Profile
from portfolio3d.view.sections.base import Section


class AboutSection(Section):
    def __init__(self, profile: Profile, parent: Optional[QWidget] = None) -> None:
        super().__init__("About Me", parent)

        self.lbl_bio = QLabel(profile.bio)
        self.lbl_bio.setWordWrap(True)
        self.lbl_bio.setStyleSheet(f"color: {MUTED_TEXT_COLOR}; font-size: 17px;")
        self.layout_box.addWidget(self.lbl_bio)
