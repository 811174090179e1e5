"""Main workflow orchestration for category page generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from eleventy_cat_pages.config import Settings
from eleventy_cat_pages.core.category_manager import (
    CategoryManager,
    build_category_list,
    prune_categories,
    sort_categories,
)
from eleventy_cat_pages.core.template_merger import load_template, merge_category_page
from eleventy_cat_pages.core.workflow_logger import WorkflowLogger, create_workflow_logger
from eleventy_cat_pages.models.category import CategoryRecord
from eleventy_cat_pages.models.site_config import SiteConfig
from eleventy_cat_pages.output.page_writer import PageWriter
from eleventy_cat_pages.services.file_scanner import get_file_list
from eleventy_cat_pages.utils.logging import get_logger

logger = get_logger(__name__)


class RunStatus(str, Enum):
    """Outcome of a generation run."""
    completed = "completed"
    no_posts = "no_posts"


@dataclass
class RunResult:
    """Summary of a generation run."""

    status: RunStatus
    files: list[Path] = field(default_factory=list)
    categories: list[CategoryRecord] = field(default_factory=list)
    pages: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)


class CategoryPagesWorkflow:
    """Runs scan, aggregation, store update and page generation in order."""

    def __init__(
        self,
        settings: Settings,
        config: SiteConfig,
        project_dir: Path,
        logger: WorkflowLogger | None = None,
    ):
        self.settings = settings
        self.config = config
        self.project_dir = project_dir
        self.logger = logger

        self.category_manager = CategoryManager(config.data_file(project_dir))
        self.page_writer = PageWriter(
            output_dir=config.categories_dir(project_dir),
            extension=settings.page_extension,
        )

    def run(self, skip_invalid: bool = False) -> RunResult:
        """
        Regenerate the category store and category pages.

        1. Load the template and the stored categories (counts reset)
        2. Scan the posts folder; stop without changes if it is empty
        3. Count categories, drop unused ones and sort by name
        4. Save the store
        5. Render and write one page per category
        """
        if self.logger:
            self.logger.log_run_start({
                "project_dir": str(self.project_dir),
                "config": self.config.model_dump(by_alias=True),
                "skip_invalid": skip_invalid,
            })

        try:
            result = self._run(skip_invalid)
        except Exception as exc:
            if self.logger:
                self.logger.log_error("generate", exc)
                self.logger.log_run_end(False, {"message": str(exc)})
            raise

        if self.logger:
            self.logger.log_run_end(True, {
                "status": result.status.value,
                "files": len(result.files),
                "categories": len(result.categories),
                "pages": len(result.pages),
            })
        return result

    def _run(self, skip_invalid: bool) -> RunResult:
        template = load_template(self.config.template_file(self.project_dir))
        records = self.category_manager.load()

        posts_dir = self.config.posts_dir(self.project_dir)
        files = get_file_list(posts_dir)
        if self.logger:
            self.logger.log_files_scanned(posts_dir, files)
        if not files:
            logger.error("No Post files found in the project, exiting")
            return RunResult(status=RunStatus.no_posts)
        logger.info(f"Located {len(files)} files")

        records, skipped = build_category_list(records, files, skip_invalid=skip_invalid)
        if skipped and self.logger:
            self.logger.log_skipped_files(skipped)

        logger.info("Deleting unused categories (from previous runs)")
        categories = sort_categories(prune_categories(records))
        logger.info(f"Identified {len(categories)} categories")
        if self.logger:
            self.logger.log_categories([record.to_store_dict() for record in categories])

        self.category_manager.save(categories)

        pages: dict[str, str] = {}
        for record in categories:
            text = merge_category_page(template, record)
            if text is not None:
                pages[record.name] = text
        written = self.page_writer.write_pages(pages)
        if self.logger:
            self.logger.log_pages_written(self.page_writer.output_dir, written)

        return RunResult(
            status=RunStatus.completed,
            files=files,
            categories=categories,
            pages=written,
            skipped_files=skipped,
        )


def create_workflow(
    settings: Settings,
    config: SiteConfig,
    project_dir: Path,
    enable_logging: bool = False,
) -> CategoryPagesWorkflow:
    """Factory function to create a workflow, optionally with a run log."""
    run_logger = None
    if enable_logging:
        logs_dir = settings.logs_dir
        if not logs_dir.is_absolute():
            logs_dir = project_dir / logs_dir
        run_logger = create_workflow_logger(logs_dir=logs_dir)
    return CategoryPagesWorkflow(settings, config, project_dir, logger=run_logger)
