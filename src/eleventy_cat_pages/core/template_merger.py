"""Merge the category page template with a per-category filter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from eleventy_cat_pages.models.category import CategoryRecord
from eleventy_cat_pages.models.template import TemplateDocument
from eleventy_cat_pages.services.frontmatter import (
    FRONTMATTER_DELIMITER,
    UNCATEGORIZED,
    FrontmatterError,
    detect_newline,
    split_frontmatter,
)
from eleventy_cat_pages.utils.logging import get_logger
from eleventy_cat_pages.utils.text_utils import js_string_literal

logger = get_logger(__name__)

PAGINATION_KEY = "pagination"
FILTER_KEY = "before"

# Mirrors normalize_categories: arrays element-wise, scalars split on commas,
# names trimmed, empty dropped. Posts left with no names only match the
# uncategorized page.
FILTER_PREDICATE = (
    "function(paginationData, fullData){ "
    "const category = %(category)s; "
    "return paginationData.filter((item) => { "
    "const value = item.categories !== undefined ? item.categories "
    ": (item.data ? item.data.categories : undefined); "
    "let names = []; "
    "if (Array.isArray(value)) { "
    "names = value.filter((name) => name !== null && name !== undefined)"
    ".map((name) => String(name).trim()); "
    "} else if (value !== null && value !== undefined) { "
    "names = String(value).split(\",\").map((name) => name.trim()); "
    "} "
    "names = names.filter((name) => name.length > 0); "
    "%(no_names)s"
    "return names.includes(category); "
    "});}"
)
NO_NAMES_CLAUSE = "if (names.length === 0) { return true; } "


class TemplateError(ValueError):
    """Raised when the page template cannot be used for merging."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def parse_template(text: str, path: Path | None = None) -> TemplateDocument:
    """Build a template document from template text."""
    try:
        raw, body = split_frontmatter(text)
        metadata = yaml.safe_load(raw) if raw is not None else None
    except (FrontmatterError, yaml.YAMLError) as exc:
        raise TemplateError(f"Template front matter is invalid: {exc}", path=path) from exc

    if raw is None:
        raise TemplateError("Template has no front matter block", path=path)
    if not isinstance(metadata, dict):
        raise TemplateError("Template front matter must be a mapping", path=path)
    if not isinstance(metadata.get(PAGINATION_KEY), dict):
        raise TemplateError(
            f"Template front matter must contain a '{PAGINATION_KEY}' mapping", path=path
        )

    return TemplateDocument(
        path=path, metadata=metadata, body=body, newline=detect_newline(text)
    )


def load_template(path: Path) -> TemplateDocument:
    """Read and parse the template file."""
    logger.info(f"Reading template file {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"Unable to read template: {exc}", path=path) from exc
    return parse_template(text, path=path)


def build_filter_predicate(name: str) -> str:
    """Return the pagination callback selecting posts in one category."""
    return FILTER_PREDICATE % {
        "category": js_string_literal(name),
        "no_names": NO_NAMES_CLAUSE if name == UNCATEGORIZED else "",
    }


def dump_frontmatter(metadata: dict[Any, Any], newline: str = "\n") -> str:
    """Serialize front matter as YAML, keeping key order."""
    return yaml.dump(
        metadata,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=4096,
        line_break=newline,
    )


def merge_category_page(template: TemplateDocument, record: CategoryRecord) -> str | None:
    """
    Render the category page text for one category.

    The template itself is never modified: every call works on a fresh copy
    of its front matter. Returns None for an empty category name.
    """
    name = record.name.strip()
    if not name:
        return None

    metadata = template.clone_metadata()
    metadata[PAGINATION_KEY][FILTER_KEY] = build_filter_predicate(name)

    newline = template.newline
    return (
        f"{FRONTMATTER_DELIMITER}{newline}"
        f"{dump_frontmatter(metadata, newline)}"
        f"{FRONTMATTER_DELIMITER}{newline}"
        f"{template.body}"
    )
