"""Outline and build result models."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from bookoutline.schemas.chapter import Chapter


class Group(str, Enum):
    """Top-level chapter collections of a book."""

    FRONTMATTER = "frontmatter"
    MAINMATTER = "mainmatter"
    BACKMATTER = "backmatter"


class Outline(BaseModel):
    """The three chapter groups of a book, each in reading order."""

    model_config = ConfigDict(frozen=True)

    frontmatter: tuple[Chapter, ...] = Field(default_factory=tuple)
    mainmatter: tuple[Chapter, ...] = Field(default_factory=tuple)
    backmatter: tuple[Chapter, ...] = Field(default_factory=tuple)

    def group(self, group: Group) -> tuple[Chapter, ...]:
        return getattr(self, group.value)

    def groups(self) -> Iterator[tuple[Group, tuple[Chapter, ...]]]:
        for group in Group:
            yield group, self.group(group)


class IssueKind(str, Enum):
    """Recoverable problems met while building an outline."""

    UNRECOGNIZED_NODE = "unrecognized-node"
    TITLE_RESOLUTION = "title-resolution"
    DEPTH_LIMIT = "depth-limit"
    ROOT_NOT_MAPPING = "root-not-mapping"
    GROUP_NOT_ARRAY = "group-not-array"


class BuildIssue(BaseModel):
    """One recoverable problem, located by its position in the outline."""

    kind: IssueKind
    location: str
    message: str


class BuildResult(BaseModel):
    """Outline plus every issue collected while building it."""

    outline: Outline
    issues: list[BuildIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues
