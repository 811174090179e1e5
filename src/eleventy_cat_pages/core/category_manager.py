"""Category manager for aggregating and persisting category counts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from eleventy_cat_pages.models.category import CategoryRecord
from eleventy_cat_pages.services.frontmatter import FrontmatterError, load_post_metadata
from eleventy_cat_pages.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryStoreError(RuntimeError):
    """Raised when the category store cannot be read or written."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class CategoryManager:
    """Manages the category store persisted to a JSON file."""

    def __init__(self, categories_file: Path):
        self.categories_file = categories_file

    def _read(self) -> list:
        try:
            raw = self.categories_file.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise CategoryStoreError(
                f"Unable to read category store: {exc}", path=self.categories_file
            ) from exc
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CategoryStoreError(
                f"Category store is not valid JSON: {exc}", path=self.categories_file
            ) from exc
        if not isinstance(data, list):
            raise CategoryStoreError(
                "Category store must be a JSON array", path=self.categories_file
            )
        return data

    def _validate(self, item: object) -> CategoryRecord:
        try:
            return CategoryRecord.model_validate(item)
        except ValidationError as exc:
            raise CategoryStoreError(
                f"Invalid category entry {item!r}: {exc}", path=self.categories_file
            ) from exc

    def list_categories(self) -> list[CategoryRecord]:
        """Return the stored categories as saved by the last run."""
        if not self.categories_file.exists():
            return []
        return [self._validate(item) for item in self._read()]

    def load(self) -> list[CategoryRecord]:
        """Load stored categories with every count reset to zero."""
        if not self.categories_file.exists():
            logger.info("Category data file not found, will create a new one")
            return []

        logger.info(f"Reading existing categories file {self.categories_file}")
        records: list[CategoryRecord] = []
        seen: dict[str, CategoryRecord] = {}
        for item in self._read():
            record = self._validate(item)
            if record.name in seen:
                logger.warning(f"Duplicate category '{record.name}' in store, keeping the first")
                first = seen[record.name]
                if not first.description and record.description:
                    first.description = record.description
                continue

            record.count = 0
            seen[record.name] = record
            records.append(record)
        return records

    def save(self, records: Iterable[CategoryRecord]) -> None:
        """Overwrite the store with the given records, in order."""
        payload = [record.to_store_dict() for record in records]
        try:
            self.categories_file.parent.mkdir(parents=True, exist_ok=True)
            self.categories_file.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise CategoryStoreError(
                f"Unable to write category store: {exc}", path=self.categories_file
            ) from exc
        logger.info(f"Writing categories list to {self.categories_file}")


def build_category_list(
    records: list[CategoryRecord],
    files: Iterable[Path],
    *,
    skip_invalid: bool = False,
) -> tuple[list[CategoryRecord], list[Path]]:
    """
    Count category occurrences across post files.

    Records are matched by exact name and updated in place; unknown names
    get a new record. Each category token of each file adds one to its
    record's count.

    Args:
        records: Records loaded from the store (counts already reset)
        files: Post file paths
        skip_invalid: Skip files with broken front matter instead of failing

    Returns:
        Tuple of (records, files skipped because of parse errors)
    """
    logger.info("Building category list...")
    by_name = {record.name: record for record in records}
    skipped: list[Path] = []

    for path in files:
        logger.debug(f"Parsing {path}")
        try:
            post = load_post_metadata(path)
        except FrontmatterError as exc:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping {path}: {exc}")
            skipped.append(path)
            continue

        for name in post.categories:
            record = by_name.get(name)
            if record is None:
                logger.info(f"Found category: {name}")
                record = CategoryRecord(name=name, count=0)
                by_name[name] = record
                records.append(record)
            record.count += 1

    return records, skipped


def prune_categories(records: Iterable[CategoryRecord]) -> list[CategoryRecord]:
    """Drop categories that no post references anymore."""
    return [record for record in records if record.count > 0]


def sort_categories(records: Iterable[CategoryRecord]) -> list[CategoryRecord]:
    """Sort by name using plain code-point comparison."""
    return sorted(records, key=lambda record: record.name)
