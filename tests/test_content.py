"""
Tests for content collection schemas and validation.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from portfolio_sync.content import (
    BlogFrontmatter,
    ProjectFrontmatter,
    VisualFrontmatter,
    load_all_collections,
    load_collection,
)


def write_entry(directory, name, text):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class TestSchemas:

    def test_project_defaults(self):
        project = ProjectFrontmatter(
            title="Ghosted",
            description="Job tracker",
            techStack=["Go"],
            role="Developer",
            highlights=["Fast"],
        )

        assert project.featured is False
        assert project.order == 0
        assert project.media is None
        assert project.tech_stack == ["Go"]

    def test_project_url_must_be_absolute(self):
        with pytest.raises(ValidationError):
            ProjectFrontmatter(
                title="Ghosted",
                description="Job tracker",
                techStack=[],
                role="Developer",
                highlights=[],
                github="not-a-url",
            )

    def test_project_urls_are_parsed(self):
        project = ProjectFrontmatter(
            title="Ghosted",
            description="Job tracker",
            techStack=[],
            role="Developer",
            highlights=[],
            url="https://ghosted.dev",
            github="https://github.com/celloopa/ghosted",
        )

        assert project.github.host == "github.com"
        assert project.github.path == "/celloopa/ghosted"
        assert project.url.scheme == "https"

    def test_project_media_gallery(self):
        project = ProjectFrontmatter(
            title="Ghosted",
            description="Job tracker",
            techStack=[],
            role="Developer",
            highlights=[],
            media=[{"layout": "two", "items": [{"src": "/a.png"}, {"src": "/b.png", "alt": "B"}]}],
        )
        assert project.media[0].items[1].alt == "B"

    def test_gallery_layout_is_restricted(self):
        with pytest.raises(ValidationError):
            ProjectFrontmatter(
                title="x", description="x", techStack=[], role="x", highlights=[],
                media=[{"layout": "four", "items": []}],
            )

    def test_visual_category_is_restricted(self):
        VisualFrontmatter(title="Box", description="Packaging", category="packaging")
        with pytest.raises(ValidationError):
            VisualFrontmatter(title="Box", description="Packaging", category="sculpture")

    def test_blog_dates_are_coerced(self):
        post = BlogFrontmatter(title="Hello", description="First post", publishDate="2024-01-15")

        assert isinstance(post.publish_date, datetime)
        assert post.publish_date.year == 2024
        assert post.draft is False
        assert post.updated_date is None

    def test_blog_accepts_yaml_dates(self):
        post = BlogFrontmatter(
            title="Hello",
            description="First post",
            publishDate=date(2024, 1, 15),
            updatedDate=date(2024, 2, 1),
        )

        assert post.publish_date == datetime(2024, 1, 15)
        assert post.updated_date == datetime(2024, 2, 1)


class TestLoadCollection:

    def test_valid_and_invalid_entries(self, tmp_path):
        projects = tmp_path / "projects"
        write_entry(projects, "ghosted.mdx", (
            "---\n"
            "title: \"Ghosted\"\n"
            "description: Job tracker\n"
            "techStack:\n"
            "  - Go\n"
            "role: Developer\n"
            "highlights:\n"
            "  - Keyboard-driven\n"
            "featured: true\n"
            "order: 2\n"
            "---\n"
            "Body\n"
        ))
        write_entry(projects, "broken.mdx", "---\ntitle: Broken\n---\nBody\n")

        report = load_collection(tmp_path, "projects")

        assert not report.ok
        assert [entry.slug for entry in report.entries] == ["ghosted"]
        entry = report.entries[0]
        assert entry.data.title == "Ghosted"
        assert entry.data.featured is True
        assert entry.data.order == 2
        assert entry.body == "Body\n"

        assert [error.slug for error in report.errors] == ["broken"]
        assert any(message.startswith("description") for message in report.errors[0].errors)

    def test_empty_field_becomes_none(self, tmp_path):
        write_entry(tmp_path / "visuals", "box.md", (
            "---\n"
            "title: Box\n"
            "description: Packaging study\n"
            "category: packaging\n"
            "image:\n"
            "---\n"
            "Body\n"
        ))

        report = load_collection(tmp_path, "visuals")

        assert report.ok
        assert report.entries[0].data.image is None

    def test_missing_collection_dir(self, tmp_path):
        report = load_collection(tmp_path, "blog")
        assert report.ok
        assert report.entries == []

    def test_unknown_collection(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown collection"):
            load_collection(tmp_path, "recipes")

    def test_all_collections(self, tmp_path):
        write_entry(tmp_path / "blog", "hello.mdx", (
            "---\ntitle: Hello\ndescription: First\npublishDate: 2024-01-15\n---\nHi\n"
        ))

        reports = load_all_collections(tmp_path)

        assert [report.collection for report in reports] == ["projects", "visuals", "blog"]
        assert len(reports[2].entries) == 1

    def test_media_gallery_from_front_matter(self, tmp_path):
        write_entry(tmp_path / "visuals", "box.mdx", (
            "---\n"
            "title: Box\n"
            "description: Packaging study\n"
            "category: packaging\n"
            "tags: [print, dieline]\n"
            "media:\n"
            "  - layout: full\n"
            "    items:\n"
            "      - src: /a.png\n"
            "        alt: Front\n"
            "  - layout: two\n"
            "    items:\n"
            "      - src: /b.png\n"
            "      - src: /c.png\n"
            "        caption: \"Back: flat\"\n"
            "---\n"
            "Body\n"
        ))

        report = load_collection(tmp_path, "visuals")

        assert report.ok
        visual = report.entries[0].data
        assert visual.tags == ["print", "dieline"]
        assert [gallery.layout for gallery in visual.media] == ["full", "two"]
        assert visual.media[0].items[0].alt == "Front"
        assert visual.media[1].items[1].caption == "Back: flat"

    def test_invalid_utf8_is_reported_per_file(self, tmp_path):
        blog = tmp_path / "blog"
        write_entry(blog, "hello.mdx", (
            "---\ntitle: Hello\ndescription: First\npublishDate: 2024-01-15\n---\nHi\n"
        ))
        (blog / "latin1.mdx").write_bytes(
            b"---\ntitle: Caf\xe9\ndescription: Second\npublishDate: 2024-02-01\n---\nHi\n"
        )

        report = load_collection(tmp_path, "blog")

        assert [entry.slug for entry in report.entries] == ["hello"]
        assert [error.slug for error in report.errors] == ["latin1"]
        assert "not valid UTF-8" in report.errors[0].errors[0]

    def test_yaml_syntax_error_is_reported_per_file(self, tmp_path):
        write_entry(tmp_path / "blog", "broken.mdx", (
            "---\ntitle: [unclosed\ndescription: First\n---\nHi\n"
        ))

        report = load_collection(tmp_path, "blog")

        assert report.entries == []
        assert report.errors[0].errors[0].startswith("<front matter>:")

    def test_non_mapping_header_is_reported(self, tmp_path):
        write_entry(tmp_path / "blog", "list.mdx", "---\n- just\n- a list\n---\nHi\n")

        report = load_collection(tmp_path, "blog")

        assert report.errors[0].errors == [
            "<front matter>: Front matter must be a mapping of field names to values"
        ]

    def test_file_without_header_fails_schema(self, tmp_path):
        write_entry(tmp_path / "blog", "plain.md", "Just a body\n")

        report = load_collection(tmp_path, "blog")

        assert report.errors[0].slug == "plain"
        assert any(message.startswith("title") for message in report.errors[0].errors)
