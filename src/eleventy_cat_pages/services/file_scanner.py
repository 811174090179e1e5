"""Recursive post file discovery."""

from __future__ import annotations

import os
from pathlib import Path

from eleventy_cat_pages.utils.logging import get_logger

logger = get_logger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    logger.error(f"Unable to read folder {exc.filename}: {exc.strerror}")
    raise exc


def get_file_list(root: Path | str) -> list[Path]:
    """Return absolute paths of every file below ``root``.

    Every file counts as a post; there is no extension filter. Raises
    FileNotFoundError if ``root`` does not exist, and any OSError met while
    listing a subfolder.
    """
    root_path = Path(root).absolute()
    if not root_path.is_dir():
        raise FileNotFoundError(f"Posts folder not found: {root_path}")

    logger.info("Building file list...")
    logger.debug(f"filePath: {root_path}")

    files: list[Path] = []
    walk = os.walk(root_path, onerror=_raise_walk_error, followlinks=True)
    for dirpath, dirnames, filenames in walk:
        dirnames.sort()
        for filename in sorted(filenames):
            files.append(Path(dirpath) / filename)
    return files
