"""Tests for front matter parsing."""

import pytest

from eleventy_cat_pages.services.frontmatter import (
    UNCATEGORIZED,
    FrontmatterError,
    detect_newline,
    load_post_metadata,
    normalize_categories,
    parse_frontmatter,
    split_frontmatter,
)


class TestSplitFrontmatter:
    def test_basic(self):
        raw, body = split_frontmatter("---\ntitle: Hello\n---\n# Body\n")
        assert raw == "title: Hello\n"
        assert body == "# Body\n"

    def test_no_frontmatter(self):
        raw, body = split_frontmatter("# Just a body\n")
        assert raw is None
        assert body == "# Just a body\n"

    def test_crlf_line_endings(self):
        raw, body = split_frontmatter("---\r\ntitle: Hello\r\n---\r\nBody\r\n")
        assert raw == "title: Hello\r\n"
        assert body == "Body\r\n"

    def test_body_with_delimiter_lines_untouched(self):
        text = "---\na: 1\n---\nintro\n---\nnot front matter\n---\n"
        _, body = split_frontmatter(text)
        assert body == "intro\n---\nnot front matter\n---\n"

    def test_empty_block(self):
        raw, body = split_frontmatter("---\n---\nBody")
        assert raw == ""
        assert body == "Body"

    def test_unclosed_block(self):
        with pytest.raises(FrontmatterError, match="not closed"):
            split_frontmatter("---\ntitle: Hello\n")


class TestDetectNewline:
    def test_lf(self):
        assert detect_newline("---\na: 1\n---\n") == "\n"

    def test_crlf(self):
        assert detect_newline("---\r\na: 1\r\n---\r\n") == "\r\n"

    def test_cr(self):
        assert detect_newline("---\ra: 1\r---\r") == "\r"

    def test_defaults_to_lf(self):
        assert detect_newline("") == "\n"
        assert detect_newline("---") == "\n"


class TestParseFrontmatter:
    def test_mapping(self):
        data, body = parse_frontmatter("---\ntitle: Hello\ntags: [a, b]\n---\nBody")
        assert data == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "Body"

    def test_empty_block_is_empty_mapping(self):
        data, _ = parse_frontmatter("---\n---\n")
        assert data == {}

    def test_invalid_yaml(self):
        with pytest.raises(FrontmatterError, match="invalid YAML"):
            parse_frontmatter("---\ntitle: [unclosed\n---\n")

    def test_non_mapping(self):
        with pytest.raises(FrontmatterError, match="must be a mapping"):
            parse_frontmatter("---\n- a\n- b\n---\n")


class TestNormalizeCategories:
    def test_absent(self):
        assert normalize_categories(None) == [UNCATEGORIZED]

    def test_comma_separated_scalar(self):
        assert normalize_categories("Tech, News") == ["Tech", "News"]

    def test_single_scalar(self):
        assert normalize_categories("  Tech ") == ["Tech"]

    def test_native_list_is_not_comma_split(self):
        assert normalize_categories(["Tech", "Q&A, FAQ"]) == ["Tech", "Q&A, FAQ"]

    def test_non_string_scalar(self):
        assert normalize_categories(2024) == ["2024"]

    def test_list_elements_trimmed_and_empty_dropped(self):
        assert normalize_categories([" Tech ", "", None, 7]) == ["Tech", "7"]

    def test_empty_values_are_uncategorized(self):
        assert normalize_categories("") == [UNCATEGORIZED]
        assert normalize_categories(" , ") == [UNCATEGORIZED]
        assert normalize_categories([]) == [UNCATEGORIZED]

    def test_literal_repeats_kept(self):
        assert normalize_categories("Tech, Tech") == ["Tech", "Tech"]


class TestLoadPostMetadata:
    def test_scalar_categories(self, tmp_path):
        post = tmp_path / "a.md"
        post.write_text("---\ntitle: A\ncategories: Tech, News\n---\nBody\n", encoding="utf-8")

        meta = load_post_metadata(post)
        assert meta.categories == ["Tech", "News"]
        assert meta.data["title"] == "A"
        assert meta.path == post

    def test_list_categories(self, tmp_path):
        post = tmp_path / "a.md"
        post.write_text("---\ncategories:\n  - Tech\n  - News\n---\n", encoding="utf-8")
        assert load_post_metadata(post).categories == ["Tech", "News"]

    def test_missing_field(self, tmp_path):
        post = tmp_path / "a.md"
        post.write_text("---\ntitle: A\n---\n", encoding="utf-8")
        assert load_post_metadata(post).categories == [UNCATEGORIZED]

    def test_no_frontmatter(self, tmp_path):
        post = tmp_path / "a.md"
        post.write_text("Plain text\n", encoding="utf-8")
        assert load_post_metadata(post).categories == [UNCATEGORIZED]

    def test_error_carries_path(self, tmp_path):
        post = tmp_path / "broken.md"
        post.write_text("---\ncategories: [Tech\n---\n", encoding="utf-8")

        with pytest.raises(FrontmatterError) as exc_info:
            load_post_metadata(post)
        assert exc_info.value.path == post
        assert "broken.md" in str(exc_info.value)
