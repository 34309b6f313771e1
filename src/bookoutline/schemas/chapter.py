"""Chapter tree model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Chapter(BaseModel):
    """A node of the book outline.

    Attributes:
        title: Display title, possibly empty.
        path: Source file of the chapter, or None when it has none.
        draft: True when the chapter is not backed by a file on disk.
        sections: Nested sub-chapters, in outline order.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    path: Path | None = None
    draft: bool = False
    sections: tuple["Chapter", ...] = Field(default_factory=tuple)

    @classmethod
    def empty(cls) -> Chapter:
        """Placeholder produced for nodes with no chapter interpretation."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return (
            not self.title
            and self.path is None
            and not self.draft
            and not self.sections
        )
