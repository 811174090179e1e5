"""Front matter parsing and category extraction for post files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from eleventy_cat_pages.models.post import PostMetadata
from eleventy_cat_pages.utils.text_utils import split_delimited

UNCATEGORIZED = "Uncategorized"
FRONTMATTER_DELIMITER = "---"


class FrontmatterError(ValueError):
    """Raised when a file's front matter cannot be parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.path}: {message}" if self.path else message


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """
    Split text into its raw front matter and body.

    The block starts on the first line with ``---`` and ends at the next line
    that is ``---``. The body is everything after the closing line, unchanged.

    Args:
        text: Full file contents

    Returns:
        Tuple of (raw YAML or None when the file has no front matter, body)
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return raw, body

    raise FrontmatterError("front matter block is not closed")


def detect_newline(text: str) -> str:
    """Return the line ending used by the first line of ``text``."""
    lines = text.splitlines(keepends=True)
    if lines:
        for ending in ("\r\n", "\n", "\r"):
            if lines[0].endswith(ending):
                return ending
    return "\n"


def parse_frontmatter(text: str) -> tuple[dict[Any, Any], str]:
    """Parse front matter into a mapping; returns (mapping, body)."""
    raw, body = split_frontmatter(text)
    if raw is None:
        return {}, body

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"invalid YAML front matter: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )
    return data, body


def normalize_categories(value: Any) -> list[str]:
    """
    Normalize a ``categories`` value to a list of names.

    Native lists are taken element by element without comma splitting.
    Scalars are converted to strings and split on commas. Names are trimmed
    and empty names dropped; when nothing is left the post is uncategorized.
    """
    if value is None:
        return [UNCATEGORIZED]

    if isinstance(value, (list, tuple)):
        names = [str(item).strip() for item in value if item is not None]
        names = [name for name in names if name]
    else:
        names = split_delimited(str(value))

    return names or [UNCATEGORIZED]


def load_post_metadata(path: Path) -> PostMetadata:
    """Read a post file and extract its categories."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FrontmatterError(f"unable to read file: {exc}", path=path) from exc

    try:
        data, _ = parse_frontmatter(text)
    except FrontmatterError as exc:
        exc.path = path
        raise

    return PostMetadata(
        path=path,
        data=data,
        categories=normalize_categories(data.get("categories")),
    )
