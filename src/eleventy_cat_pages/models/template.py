"""Template document model."""

import copy
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TemplateDocument(BaseModel):
    """Category page template split into front matter and an opaque body."""

    model_config = ConfigDict(frozen=True)

    path: Path | None = Field(default=None, description="Template file path")
    metadata: dict[Any, Any] = Field(..., description="Parsed front matter mapping")
    body: str = Field(default="", description="Template text after the front matter")
    newline: str = Field(default="\n", description="Line ending of the front matter delimiters")

    def clone_metadata(self) -> dict[Any, Any]:
        """Return an independent deep copy of the front matter."""
        return copy.deepcopy(self.metadata)
