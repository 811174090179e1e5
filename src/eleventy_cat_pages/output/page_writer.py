"""Writer for generated category pages."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Mapping

from eleventy_cat_pages.utils.logging import get_logger
from eleventy_cat_pages.utils.text_utils import page_stem

logger = get_logger(__name__)


class PageWriteError(RuntimeError):
    """Raised when category pages cannot be written."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class PageWriter:
    """Replaces the categories folder with a freshly generated set of pages."""

    def __init__(self, output_dir: Path, extension: str = ".md"):
        self.output_dir = output_dir
        self.extension = extension if extension.startswith(".") else f".{extension}"

    def page_filename(self, name: str) -> str:
        """File name of the page for a category."""
        return f"{page_stem(name)}{self.extension}"

    def write_pages(self, pages: Mapping[str, str]) -> list[Path]:
        """
        Write all pages, replacing the previous contents of the output folder.

        Pages are written to a staging folder first and swapped in once all
        of them are on disk, so a failed run leaves the old pages in place.

        Args:
            pages: Category name to page text

        Returns:
            Paths of the written pages inside the output folder
        """
        parent = self.output_dir.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            staging = Path(tempfile.mkdtemp(prefix=f".{self.output_dir.name}-", dir=parent))
        except OSError as exc:
            raise PageWriteError(f"Unable to create staging folder: {exc}", path=parent) from exc

        written: dict[str, Path] = {}
        try:
            for name, text in pages.items():
                filename = self.page_filename(name)
                if filename in written:
                    logger.warning(f"Category '{name}' overwrites page {filename}")
                page_path = staging / filename
                logger.debug(f"Writing category page: {self.output_dir / filename}")
                page_path.write_text(text, encoding="utf-8", newline="")
                written[filename] = self.output_dir / filename
            self._swap_in(staging)
        except OSError as exc:
            shutil.rmtree(staging, ignore_errors=True)
            raise PageWriteError(
                f"Unable to write category pages: {exc}", path=self.output_dir
            ) from exc

        return sorted(written.values())

    def _swap_in(self, staging: Path) -> None:
        """Move the staging folder into place of the output folder."""
        logger.debug(f"Emptying categories folder: {self.output_dir}")
        if not self.output_dir.exists():
            # mkdtemp creates the folder as 0700
            staging.chmod(0o755)
            staging.rename(self.output_dir)
            return

        shutil.copymode(self.output_dir, staging)

        backup = self.output_dir.with_name(f"{staging.name}.old")
        self.output_dir.rename(backup)
        try:
            staging.rename(self.output_dir)
        except OSError:
            backup.rename(self.output_dir)
            raise

        try:
            shutil.rmtree(backup)
        except OSError as exc:
            logger.warning(f"Unable to remove previous categories folder {backup}: {exc}")
