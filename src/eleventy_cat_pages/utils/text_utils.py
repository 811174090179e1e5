"""Text utilities for category names and generated page sources."""

import json


def page_stem(name: str) -> str:
    """
    Convert a category name to a page file stem.

    Lower-cases the name and removes every space, so "Web Dev" becomes
    "webdev". No other characters are touched.

    Args:
        name: Category name

    Returns:
        File stem for the category page
    """
    return name.lower().replace(" ", "")


def js_string_literal(value: str) -> str:
    """Quote a string as a JavaScript double-quoted literal."""
    # JSON strings are valid JS literals; keep non-ASCII readable
    return json.dumps(value, ensure_ascii=False)


def split_delimited(value: str, delimiter: str = ",") -> list[str]:
    """Split on a delimiter, trimming parts and dropping empty ones."""
    return [part.strip() for part in value.split(delimiter) if part.strip()]
