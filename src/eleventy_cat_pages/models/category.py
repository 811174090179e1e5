"""Category record model for the persisted category store."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryRecord(BaseModel):
    """One entry of the category store.

    Serialized with the ``category`` key to stay compatible with the data file
    consumed by the site build. Unknown keys added by hand are kept as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(..., alias="category", description="Category name (unique key)")
    count: int = Field(default=0, ge=0, description="Number of posts in this category")
    description: str = Field(default="", description="Operator-curated description")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> str:
        return str(value).strip()

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return "" if value is None else str(value)

    def to_store_dict(self) -> dict[str, Any]:
        """Dump in store order: category, count, description, then extras."""
        data: dict[str, Any] = {
            "category": self.name,
            "count": self.count,
            "description": self.description,
        }
        if self.model_extra:
            data.update(self.model_extra)
        return data
