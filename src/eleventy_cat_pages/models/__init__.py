"""Pydantic data models."""

from eleventy_cat_pages.models.category import CategoryRecord
from eleventy_cat_pages.models.post import PostMetadata
from eleventy_cat_pages.models.site_config import SiteConfig
from eleventy_cat_pages.models.template import TemplateDocument

__all__ = [
    "CategoryRecord",
    "PostMetadata",
    "SiteConfig",
    "TemplateDocument",
]
