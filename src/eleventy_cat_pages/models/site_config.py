"""Project configuration file model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SiteConfig(BaseModel):
    """Contents of the project configuration file (camelCase on disk)."""

    model_config = ConfigDict(populate_by_name=True)

    categories_folder: str = Field(..., alias="categoriesFolder")
    data_file_name: str = Field(..., alias="dataFileName")
    data_folder: str = Field(..., alias="dataFolder")
    posts_folder: str = Field(..., alias="postsFolder")
    template_file_name: str = Field(..., alias="templateFileName")

    def resolve(self, project_dir: Path, value: str) -> Path:
        """Resolve a configured path against the project root."""
        path = Path(value)
        return path if path.is_absolute() else project_dir / path

    def categories_dir(self, project_dir: Path) -> Path:
        return self.resolve(project_dir, self.categories_folder)

    def data_dir(self, project_dir: Path) -> Path:
        return self.resolve(project_dir, self.data_folder)

    def data_file(self, project_dir: Path) -> Path:
        return self.resolve(project_dir, self.data_file_name)

    def posts_dir(self, project_dir: Path) -> Path:
        return self.resolve(project_dir, self.posts_folder)

    def template_file(self, project_dir: Path) -> Path:
        return self.resolve(project_dir, self.template_file_name)
