from portfolio3d.view.sections.about import AboutSection
from portfolio3d.view.sections.contact import ContactSection
from portfolio3d.view.sections.projects import ProjectCard, ProjectsSection
from portfolio3d.view.sections.skills import SkillsSection

__all__ = ["AboutSection", "ContactSection", "ProjectCard", "ProjectsSection", "SkillsSection"]
