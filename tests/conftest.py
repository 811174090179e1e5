"""Shared fixtures for project-level tests."""

import os
from pathlib import Path

import pytest

from eleventy_cat_pages.config import Settings
from eleventy_cat_pages.models.site_config import SiteConfig

TEMPLATE = """---
layout: page
title: Category
pagination:
  data: collections.posts
  size: 20
  alias: posts
---
{% for post in posts %}
<a href="{{ post.url }}">{{ post.data.title }}</a>
{% endfor %}
"""


def write_post(project_dir: Path, relative: str, text: str) -> Path:
    path = project_dir / "posts" / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def deny_folder(monkeypatch, name: str) -> None:
    """Make listing any folder called ``name`` fail with a permission error."""
    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == name:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def project_dir(tmp_path):
    """An Eleventy project with the default folder layout and a template."""
    root = tmp_path / "site"
    for folder in ("categories", "_data", "posts"):
        (root / folder).mkdir(parents=True)
    (root / ".eleventy.js").write_text("module.exports = {};\n", encoding="utf-8")
    (root / "11ty-cat-pages.liquid").write_text(TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture
def site_config():
    return SiteConfig(
        categories_folder="categories",
        data_file_name="_data/category-meta.json",
        data_folder="_data",
        posts_folder="posts",
        template_file_name="11ty-cat-pages.liquid",
    )


@pytest.fixture
def scenario_posts(project_dir):
    """Post A in Tech and News, post B in Tech, post C without categories."""
    write_post(project_dir, "a.md", "---\ntitle: A\ncategories: Tech, News\n---\nA body\n")
    write_post(project_dir, "2024/b.md", "---\ntitle: B\ncategories: Tech\n---\nB body\n")
    write_post(project_dir, "c.md", "---\ntitle: C\n---\nC body\n")
    return project_dir
