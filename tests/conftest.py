from __future__ import annotations

import os
from typing import Iterator

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from portfolio3d.model.content import ContactLink, ContentModel, Profile, Project, Skill


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def content() -> ContentModel:
    return ContentModel(
        profile=Profile(
            name="Ada Example",
            title="Backend Developer",
            bio="Builds things.",
            links=(
                ContactLink("GitHub", "https://github.com/example"),
                ContactLink("Mail", "mailto:ada@example.com"),
            ),
        ),
        skills=(Skill("Python"), Skill("Qt"), Skill("VTK")),
        projects=(
            Project("Both", "Live and source", ("Python",), "https://live.example", "https://github.com/x/both"),
            Project("Live only", "Hosted", ("Qt",), live_link="https://live.example"),
            Project("Source only", "Library", ("NumPy",), github_link="https://github.com/x/lib"),
            Project("Neither", "Private", ()),
        ),
    )
