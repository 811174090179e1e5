"""Post metadata model."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class PostMetadata(BaseModel):
    """Parsed front matter of a single post file."""

    path: Path | None = Field(default=None, description="Source file path")
    data: dict[Any, Any] = Field(default_factory=dict, description="Raw front matter mapping")
    categories: list[str] = Field(
        default_factory=list, description="Normalized category names"
    )
