from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from portfolio3d.model.content import ContactLink
from portfolio3d.view.sections.base import Section, link_label


class ContactSection(Section):
    def __init__(self, links: Sequence[ContactLink], parent: Optional[QWidget] = None) -> None:
        super().__init__("Get in Touch", parent)

        row = QHBoxLayout()
        row.setSpacing(32)
        row.addStretch()
        self.links: list[QLabel] = []
        for contact in links:
            label = link_label(contact.label, contact.url)
            label.setStyleSheet("font-size: 18px;")
            row.addWidget(label, alignment=Qt.AlignmentFlag.AlignCenter)
            self.links.append(label)
        row.addStretch()

        self.layout_box.addLayout(row)
