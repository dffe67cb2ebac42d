"""Tests for frontmatter parsing and post construction."""

import pytest

from moyn.core.errors import ParseError
from moyn.core.frontmatter import build_post, extract_title, load_post, parse_frontmatter


class TestParseFrontmatter:
    """Test splitting markdown into metadata and body."""

    def test_no_frontmatter_keeps_whole_file(self):
        """Without a block the body is the full content and metadata is empty."""
        text = "# Title\n\nSome text.\n"
        parsed = parse_frontmatter(text)

        assert parsed.body == text
        fm = parsed.frontmatter
        assert fm.title is None
        assert fm.published is None
        assert fm.tags is None
        assert fm.slug is None
        assert fm.space is None

    def test_all_recognized_keys(self):
        """Should read title, published, tags, slug and space."""
        text = (
            "---\n"
            'title: "Shipping moyn"\n'
            "published: true\n"
            "tags: [rust, cli]\n"
            "slug: shipping-moyn\n"
            "space: dev-notes\n"
            "---\n"
            "Body text.\n"
        )
        parsed = parse_frontmatter(text)

        assert parsed.frontmatter.title == "Shipping moyn"
        assert parsed.frontmatter.published is True
        assert parsed.frontmatter.tags == ["rust", "cli"]
        assert parsed.frontmatter.slug == "shipping-moyn"
        assert parsed.frontmatter.space == "dev-notes"
        assert parsed.body == "Body text.\n"

    def test_unknown_keys_ignored(self):
        """Keys outside the recognized set should not cause errors."""
        parsed = parse_frontmatter("---\nauthor: me\ntitle: X\n---\nbody")
        assert parsed.frontmatter.title == "X"
        assert parsed.body == "body"

    def test_empty_block(self):
        """An empty block means no metadata."""
        parsed = parse_frontmatter("---\n---\n\nHello")
        assert parsed.frontmatter.title is None
        assert parsed.body == "Hello"

    def test_leading_blank_lines_allowed(self):
        """Blank lines before the opening marker are skipped."""
        parsed = parse_frontmatter("\n\n---\ntitle: X\n---\nbody")
        assert parsed.frontmatter.title == "X"

    def test_crlf_line_endings(self):
        """Windows line endings should parse the same way."""
        parsed = parse_frontmatter("---\r\ntitle: X\r\n---\r\nbody\r\n")
        assert parsed.frontmatter.title == "X"
        assert parsed.body == "body\r\n"

    def test_dashes_later_in_file_are_not_frontmatter(self):
        """A horizontal rule after the first line is just body text."""
        text = "Intro\n\n---\n\nMore"
        parsed = parse_frontmatter(text)
        assert parsed.body == text
        assert parsed.frontmatter.title is None

    def test_unclosed_block_fails(self):
        """An opened but never closed block is an error."""
        with pytest.raises(ParseError, match="never closed"):
            parse_frontmatter("---\ntitle: X\n\nBody without end")

    def test_invalid_yaml_fails(self):
        with pytest.raises(ParseError, match="YAML"):
            parse_frontmatter("---\ntitle: [unclosed\n---\nbody")

    def test_non_mapping_fails(self):
        with pytest.raises(ParseError, match="mapping"):
            parse_frontmatter("---\n- a\n- b\n---\nbody")

    @pytest.mark.parametrize(
        "line, key",
        [
            ("tags: rust", "tags"),
            ("tags: [1, 2]", "tags"),
            ("published: maybe", "published"),
            ("title: [a, b]", "title"),
            ("slug: 42", "slug"),
            ("space: {a: b}", "space"),
        ],
    )
    def test_wrong_value_shape_fails(self, line, key):
        """Recognized keys with the wrong type name the offending key."""
        with pytest.raises(ParseError, match=f"'{key}'"):
            parse_frontmatter(f"---\n{line}\n---\nbody")


class TestExtractTitle:
    """Test title fallback from body and filename."""

    def test_first_heading(self):
        body = "intro\n\n# Heading\n\n# Another\n"
        assert extract_title(body, "post.md") == "Heading"

    def test_indented_heading(self):
        assert extract_title("   #   Spaced out   \n", "post.md") == "Spaced out"

    def test_subheadings_ignored(self):
        """Only level-one headings count."""
        assert extract_title("## Not this\n", "notes.md") == "notes"

    def test_filename_fallback(self):
        assert extract_title("no headings here", "/tmp/my-first-post.md") == "my-first-post"


class TestBuildPost:
    """Test title precedence and defaults."""

    def test_frontmatter_title_wins_over_heading(self):
        text = '---\ntitle: "X"\n---\n# Heading\n\nbody'
        assert build_post(text, "file.md").title == "X"

    def test_heading_when_no_frontmatter_title(self):
        text = "---\ntags: [a]\n---\n# Heading\n"
        assert build_post(text, "file.md").title == "Heading"

    def test_filename_when_no_title_anywhere(self):
        assert build_post("plain text", "weekly-notes.md").title == "weekly-notes"

    def test_blank_frontmatter_title_falls_back(self):
        text = '---\ntitle: "  "\n---\n# Heading\n'
        assert build_post(text, "file.md").title == "Heading"

    def test_defaults(self):
        """Slug, space absent; tags empty; published false."""
        post = build_post("# T\n", "t.md")
        assert post.slug is None
        assert post.space is None
        assert post.tags == []
        assert post.published is False

    def test_body_excludes_frontmatter(self):
        post = build_post("---\ntitle: X\n---\n\nHello\n", "x.md")
        assert post.body == "Hello\n"

    def test_duplicate_tags_dropped(self):
        post = build_post("---\ntags: [cli, rust, cli]\n---\n", "x.md")
        assert post.tags == ["cli", "rust"]


class TestLoadPost:
    """Test reading posts from disk."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "hello.md"
        path.write_text("Just text\n", encoding="utf-8")

        post = load_post(path)

        assert post.title == "hello"
        assert post.body == "Just text\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParseError, match="Could not read"):
            load_post(tmp_path / "missing.md")
