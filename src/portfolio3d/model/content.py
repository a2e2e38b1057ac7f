"""
Portfolio Content (Data Model)
==============================
Immutable records rendered by the window: the profile, the ordered skill
tags and the project cards.

Why is this file needed?
------------------------
1. Single Source: Views iterate these records and never hold their own copy
   of names, descriptions or links.
2. Immutability: Every record is a frozen dataclass and every collection a
   tuple, so nothing can mutate the content after it is loaded.
3. Serialization: `to_dict`/`from_dict` mirror the JSON payload consumed by
   `portfolio3d.model.io`.

Classes:
    ContactLink, Profile, Skill, Project: Leaf records.
    ContentModel: The root container.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class ContentError(ValueError):
    """Raised when a content payload cannot be turned into a ContentModel."""


def _require(data: Dict[str, Any], key: str, record: str) -> Any:
    if not isinstance(data, dict):
        raise ContentError(f"{record} must be an object, got {type(data).__name__}.")
    if key not in data or data[key] is None:
        raise ContentError(f"{record} is missing required field '{key}'.")
    return data[key]


def _optional_link(value: Any) -> Optional[str]:
    """Links are only checked for presence; blank strings count as absent."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class ContactLink:
    label: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "url": self.url}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ContactLink:
        return ContactLink(
            label=str(_require(data, "label", "Contact link")),
            url=str(_require(data, "url", "Contact link")),
        )


@dataclass(frozen=True)
class Profile:
    name: str
    title: str
    bio: str
    links: tuple[ContactLink, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "bio": self.bio,
            "links": [link.to_dict() for link in self.links],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Profile:
        return Profile(
            name=str(_require(data, "name", "Profile")),
            title=str(_require(data, "title", "Profile")),
            bio=str(data.get("bio", "")),
            links=tuple(ContactLink.from_dict(item) for item in data.get("links", [])),
        )


@dataclass(frozen=True)
class Skill:
    label: str

    def to_dict(self) -> str:
        return self.label

    @staticmethod
    def from_dict(data: Any) -> Skill:
        # Skills are stored either as bare strings or as {"label": ...}
        if isinstance(data, str):
            return Skill(label=data)
        return Skill(label=str(_require(data, "label", "Skill")))


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    tags: tuple[str, ...] = ()
    live_link: Optional[str] = None
    github_link: Optional[str] = None

    @property
    def has_actions(self) -> bool:
        return self.live_link is not None or self.github_link is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
        }
        if self.live_link:
            data["live_link"] = self.live_link
        if self.github_link:
            data["github_link"] = self.github_link
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Project:
        return Project(
            title=str(_require(data, "title", "Project")),
            description=str(data.get("description", "")),
            tags=tuple(str(tag) for tag in data.get("tags", [])),
            live_link=_optional_link(data.get("live_link")),
            github_link=_optional_link(data.get("github_link")),
        )


@dataclass(frozen=True)
class ContentModel:
    """
    Root of the static content. Read-only after load; pass the same instance
    to every section widget.
    """
    profile: Profile
    skills: tuple[Skill, ...] = field(default_factory=tuple)
    projects: tuple[Project, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "skills": [skill.to_dict() for skill in self.skills],
            "projects": [project.to_dict() for project in self.projects],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ContentModel:
        profile = Profile.from_dict(_require(data, "profile", "Content"))
        skills = data.get("skills", [])
        projects = data.get("projects", [])
        if not isinstance(skills, list) or not isinstance(projects, list):
            raise ContentError("'skills' and 'projects' must be lists.")
        return ContentModel(
            profile=profile,
            skills=tuple(Skill.from_dict(item) for item in skills),
            projects=tuple(Project.from_dict(item) for item in projects),
        )
