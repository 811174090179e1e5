"""CLI commands for the Eleventy category page generator using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from eleventy_cat_pages.config import get_settings
from eleventy_cat_pages.core.category_manager import CategoryManager, CategoryStoreError
from eleventy_cat_pages.core.project import (
    ProjectValidationError,
    build_site_config,
    ensure_eleventy_project,
    load_site_config,
    validate_site_config,
    write_site_config,
)
from eleventy_cat_pages.core.template_merger import TemplateError
from eleventy_cat_pages.core.workflow import RunStatus, create_workflow
from eleventy_cat_pages.models.category import CategoryRecord
from eleventy_cat_pages.output.page_writer import PageWriteError
from eleventy_cat_pages.services.frontmatter import FrontmatterError
from eleventy_cat_pages.utils.logging import setup_logging


app = typer.Typer(
    name="eleventy-cat-pages",
    help="Generate category pages for an Eleventy site",
    no_args_is_help=True,
)

console = Console()

APP_NAME = "Eleventy Category File Generator"

RUN_ERRORS = (
    FrontmatterError,
    TemplateError,
    CategoryStoreError,
    PageWriteError,
    OSError,
)


# --- Generate Command ---


@app.command()
def generate(
    project_dir: Path = typer.Option(Path("."), "--project-dir", "-p", help="Eleventy project folder"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
    skip_invalid: bool = typer.Option(
        False, "--skip-invalid", help="Skip posts with broken front matter instead of failing"
    ),
    run_log: bool = typer.Option(False, "--run-log", help="Write a run log file"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write log messages to this file"
    ),
):
    """Rebuild the category data file and category pages."""
    settings = get_settings()
    setup_logging(logging.DEBUG if debug else logging.INFO, log_file=log_file)
    project_dir = project_dir.absolute()

    console.print(f"\n[bold]{APP_NAME}[/bold]")

    try:
        ensure_eleventy_project(project_dir, settings)
    except ProjectValidationError as exc:
        _fail(exc)

    config_file = settings.config_file(project_dir)
    if not config_file.exists():
        console.print(
            f"[yellow]Configuration file '{settings.config_file_name}' not found, creating...[/yellow]"
        )
        _write_config(project_dir, force=False)
        console.print("[dim]Review the configuration file and run the command again[/dim]")
        raise typer.Exit(0)

    try:
        config = load_site_config(config_file)
        validate_site_config(config, project_dir)
    except ProjectValidationError as exc:
        _fail(exc)

    wf = create_workflow(settings, config, project_dir, enable_logging=run_log)
    if wf.logger:
        console.print(f"[dim]Run log: {wf.logger.log_file}[/dim]")

    try:
        result = wf.run(skip_invalid=skip_invalid)
    except RUN_ERRORS as exc:
        _fail(exc)

    if result.status == RunStatus.no_posts:
        console.print("[yellow]No post files found in the project, nothing changed[/yellow]")
        raise typer.Exit(0)

    if debug:
        console.print(_category_table(result.categories))
    if result.skipped_files:
        console.print(f"[yellow]Skipped {len(result.skipped_files)} invalid post files[/yellow]")
        for path in result.skipped_files:
            console.print(f"  - {escape(str(path))}")
    console.print(
        f"[green]Wrote {len(result.categories)} categories and {len(result.pages)} pages[/green]"
    )


# --- Init Command ---


@app.command()
def init(
    project_dir: Path = typer.Option(Path("."), "--project-dir", "-p", help="Eleventy project folder"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Create the configuration file from the project layout."""
    setup_logging()
    _write_config(project_dir.absolute(), force=force)


# --- List Command ---


@app.command("list")
def list_categories(
    project_dir: Path = typer.Option(Path("."), "--project-dir", "-p", help="Eleventy project folder"),
):
    """Show the categories recorded in the category data file."""
    settings = get_settings()
    project_dir = project_dir.absolute()

    try:
        config = load_site_config(settings.config_file(project_dir))
        categories = CategoryManager(config.data_file(project_dir)).list_categories()
    except (ProjectValidationError, CategoryStoreError) as exc:
        _fail(exc)

    if not categories:
        console.print("[yellow]No categories recorded yet[/yellow]")
        return
    console.print(_category_table(categories))


def _write_config(project_dir: Path, force: bool) -> None:
    settings = get_settings()
    config_file = settings.config_file(project_dir)
    if config_file.exists() and not force:
        console.print(f"[red]{config_file} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = build_site_config(project_dir, settings)
    try:
        write_site_config(config, config_file)
    except OSError as exc:
        console.print(f"[red]Unable to write to {config_file}[/red]")
        console.print(f"[dim]{escape(str(exc))}[/dim]")
        raise typer.Exit(1)
    console.print(f"[green]Configuration written to {config_file}[/green]")


def _category_table(categories: list[CategoryRecord]) -> Table:
    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Description")
    for record in categories:
        table.add_row(escape(record.name), str(record.count), escape(record.description))
    return table


def _fail(exc: Exception) -> None:
    """Report an error and exit with a failure status."""
    path = getattr(exc, "path", None)
    console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}", highlight=False)
    if path and str(path) not in str(exc):
        console.print(f"[dim]Path: {escape(str(path))}[/dim]")
    raise typer.Exit(1)


# --- Entry Point ---


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
