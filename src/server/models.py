"""Pydantic models for the outline API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from bookoutline.schemas import BuildIssue, Outline
from server.server_config import MAX_OUTLINE_DEPTH, MAX_OUTLINE_SIZE_KB


class OutlineRequest(BaseModel):
    """Request model for the /api/outline endpoint.

    Attributes
    ----------
    outline : str
        YAML outline text.
    drop_empty : bool
        Leave placeholder chapters out of the result.
    max_depth : int
        Deepest ``sections`` nesting to read.

    """

    outline: str = Field(..., description="YAML outline text")
    drop_empty: bool = Field(default=False, description="Drop placeholder chapters")
    max_depth: int = Field(
        default=MAX_OUTLINE_DEPTH,
        ge=0,
        le=MAX_OUTLINE_DEPTH,
        description="Deepest sections nesting to read",
    )

    @field_validator("outline")
    @classmethod
    def validate_outline(cls, v: str) -> str:
        """Validate that ``outline`` is not empty and not oversized."""
        if not v.strip():
            err = "outline cannot be empty"
            raise ValueError(err)
        if len(v.encode("utf-8")) > MAX_OUTLINE_SIZE_KB * 1024:
            err = f"outline exceeds {MAX_OUTLINE_SIZE_KB} KB"
            raise ValueError(err)
        return v


class OutlineSuccessResponse(BaseModel):
    """Success response model for the /api/outline endpoint.

    Attributes
    ----------
    outline : Outline
        The chapter groups.
    tree : str
        Indented chapter tree.
    summary : str
        Chapter counts per group.
    issues : list[BuildIssue]
        Recoverable problems found while building.

    """

    outline: Outline
    tree: str = Field(..., description="Indented chapter tree")
    summary: str = Field(..., description="Chapter counts per group")
    issues: list[BuildIssue] = Field(default_factory=list, description="Recoverable build problems")


class OutlineErrorResponse(BaseModel):
    """Error response model for the /api/outline endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
OutlineResponse = Union[OutlineSuccessResponse, OutlineErrorResponse]
