"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAT_PAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Project layout
    config_file_name: str = Field(
        default="11ty-cat-pages.json", description="Project configuration file name"
    )
    project_marker_file: str = Field(
        default=".eleventy.js", description="File that marks an Eleventy project root"
    )
    data_file_name: str = Field(
        default="category-meta.json", description="Category store file name"
    )
    template_file_name: str = Field(
        default="11ty-cat-pages.liquid", description="Category page template file name"
    )

    # Output
    page_extension: str = Field(default=".md", description="Generated page file extension")

    # Paths
    logs_dir: Path = Field(default=Path("./logs"), description="Run log directory path")

    def config_file(self, project_dir: Path) -> Path:
        """Path to the project configuration file."""
        return project_dir / self.config_file_name

    def marker_file(self, project_dir: Path) -> Path:
        """Path to the Eleventy project marker file."""
        return project_dir / self.project_marker_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
