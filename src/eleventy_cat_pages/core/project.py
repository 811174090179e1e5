"""Project discovery, configuration bootstrap and validation."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from pydantic import ValidationError

from eleventy_cat_pages.config import Settings
from eleventy_cat_pages.models.site_config import SiteConfig
from eleventy_cat_pages.utils.logging import get_logger

logger = get_logger(__name__)

SEARCH_FOLDERS = (".", "src")


class ProjectValidationError(RuntimeError):
    """Raised when the project is missing required files or folders."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Configuration file errors:\n\n" + "\n".join(problems))


@dataclass(frozen=True)
class PathCheck:
    """A path the project needs before a run can start."""

    path: Path
    is_folder: bool


def find_folder(name: str, project_dir: Path, search: tuple[str, ...] = SEARCH_FOLDERS) -> str:
    """Return the first existing ``<search>/<name>`` folder, else the last candidate."""
    candidates = [PurePosixPath(base) / name for base in search]
    for candidate in candidates:
        logger.debug(f"Checking {candidate}")
        if (project_dir / candidate).is_dir():
            return str(candidate)
    return str(candidates[-1])


def build_site_config(project_dir: Path, settings: Settings) -> SiteConfig:
    """Guess a configuration from the project layout."""
    data_folder = find_folder("_data", project_dir)
    return SiteConfig(
        categories_folder=find_folder("categories", project_dir),
        data_file_name=str(PurePosixPath(data_folder) / settings.data_file_name),
        data_folder=data_folder,
        posts_folder=find_folder("posts", project_dir),
        template_file_name=settings.template_file_name,
    )


def write_site_config(config: SiteConfig, path: Path) -> None:
    """Write the configuration file using forward slashes in paths."""
    logger.info(f"Writing configuration file {path.name}")
    data = {key: value.replace("\\", "/") for key, value in config.model_dump(by_alias=True).items()}
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def load_site_config(path: Path) -> SiteConfig:
    """Read the configuration file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return SiteConfig.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        raise ProjectValidationError([f"Unable to read configuration file '{path}': {exc}"]) from exc


def ensure_eleventy_project(project_dir: Path, settings: Settings) -> None:
    """Fail unless the folder looks like an Eleventy project."""
    logger.info("Validating project folder")
    marker = settings.marker_file(project_dir)
    if not marker.exists():
        raise ProjectValidationError([
            "Current folder is not an Eleventy project folder. "
            f"Unable to locate the '{settings.project_marker_file}' file."
        ])
    logger.debug("Project is an Eleventy project folder")


def required_paths(config: SiteConfig, project_dir: Path) -> list[PathCheck]:
    return [
        PathCheck(config.categories_dir(project_dir), is_folder=True),
        PathCheck(config.data_dir(project_dir), is_folder=True),
        PathCheck(config.posts_dir(project_dir), is_folder=True),
        PathCheck(config.template_file(project_dir), is_folder=False),
    ]


def validate_site_config(config: SiteConfig, project_dir: Path) -> None:
    """Check every required path, reporting all problems at once."""
    problems: list[str] = []
    for check in required_paths(config, project_dir):
        logger.debug(f"Validating '{check.path}'")
        if check.is_folder and not check.path.is_dir():
            problems.append(f"The '{check.path}' folder is required, but does not exist.")
        elif not check.is_folder and not check.path.is_file():
            problems.append(f"The '{check.path}' file is required, but does not exist.")

    if problems:
        raise ProjectValidationError(problems)
