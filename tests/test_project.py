"""Tests for project bootstrap and validation."""

import json

import pytest

from eleventy_cat_pages.core.project import (
    ProjectValidationError,
    build_site_config,
    ensure_eleventy_project,
    load_site_config,
    validate_site_config,
    write_site_config,
)


class TestBuildSiteConfig:
    def test_root_layout(self, project_dir, settings):
        config = build_site_config(project_dir, settings)

        assert config.categories_folder == "categories"
        assert config.data_folder == "_data"
        assert config.data_file_name == "_data/category-meta.json"
        assert config.posts_folder == "posts"
        assert config.template_file_name == "11ty-cat-pages.liquid"

    def test_src_layout(self, tmp_path, settings):
        for folder in ("categories", "_data", "posts"):
            (tmp_path / "src" / folder).mkdir(parents=True)

        config = build_site_config(tmp_path, settings)
        assert config.categories_folder == "src/categories"
        assert config.data_file_name == "src/_data/category-meta.json"

    def test_defaults_to_src_when_missing(self, tmp_path, settings):
        config = build_site_config(tmp_path, settings)
        assert config.posts_folder == "src/posts"

    def test_write_and_load(self, project_dir, settings):
        path = project_dir / "11ty-cat-pages.json"
        write_site_config(build_site_config(project_dir, settings), path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert list(data) == [
            "categoriesFolder", "dataFileName", "dataFolder", "postsFolder", "templateFileName",
        ]
        assert load_site_config(path).posts_folder == "posts"


class TestValidation:
    def test_marker_file_required(self, tmp_path, settings):
        with pytest.raises(ProjectValidationError, match=".eleventy.js"):
            ensure_eleventy_project(tmp_path, settings)

    def test_valid_project(self, project_dir, settings, site_config):
        ensure_eleventy_project(project_dir, settings)
        validate_site_config(site_config, project_dir)

    def test_reports_all_missing_paths(self, project_dir, site_config):
        (project_dir / "posts").rmdir()
        (project_dir / "11ty-cat-pages.liquid").unlink()

        with pytest.raises(ProjectValidationError) as exc_info:
            validate_site_config(site_config, project_dir)

        problems = exc_info.value.problems
        assert len(problems) == 2
        assert "posts' folder is required" in problems[0]
        assert "11ty-cat-pages.liquid' file is required" in problems[1]

    def test_unreadable_config(self, tmp_path):
        path = tmp_path / "11ty-cat-pages.json"
        path.write_text('{"postsFolder": "posts"}', encoding="utf-8")

        with pytest.raises(ProjectValidationError, match="Unable to read configuration"):
            load_site_config(path)
