"""Tests for flatdocs.services.loader."""

import pytest

from flatdocs.models.config import EngineConfig
from flatdocs.services.loader import load_page, resolve_page_path


class TestLoadPage:
    def test_returns_page_fields(self, config, content_dir):
        page = load_page(content_dir / "example-page.md", config)
        assert page is not None
        assert page.slug == "example-page"
        assert page.title == "Example Page"
        assert page.path == "example-page.md"
        assert page.meta == {"title": "Example Page", "sort": "1"}
        assert page.active is False

    def test_body_has_meta_stripped_and_variables_substituted(self, config, content_dir):
        page = load_page(content_dir / "example-page.md", config)
        assert page.body.startswith("This is an example page.")
        assert "/docs/sub/example-sub-page" in page.body
        assert "%base_url%" not in page.body

    def test_missing_file_returns_none(self, config, content_dir):
        assert load_page(content_dir / "nonexistent-page.md", config) is None

    def test_directory_returns_none(self, config, content_dir):
        assert load_page(content_dir / "sub", config) is None

    def test_non_document_returns_none(self, config, content_dir):
        (content_dir / "image.png").write_bytes(b"\x89PNG")
        assert load_page(content_dir / "image.png", config) is None

    def test_outside_content_dir_returns_none(self, config, tmp_path):
        outside = tmp_path / "outside.md"
        outside.write_text("secret", encoding="utf-8")
        assert load_page(outside, config) is None

    def test_slug_includes_directory(self, config, content_dir):
        page = load_page(content_dir / "sub" / "example-sub-page.md", config)
        assert page.slug == "sub-example-sub-page"
        assert page.path == "sub/example-sub-page.md"

    def test_title_falls_back_to_file_name(self, config, content_dir):
        (content_dir / "getting-started.md").write_text("No meta.", encoding="utf-8")
        page = load_page(content_dir / "getting-started.md", config)
        assert page.title == "Getting Started"
        assert page.meta == {}

    def test_excerpt_length_from_config(self, content_dir):
        config = EngineConfig(content_dir=content_dir, excerpt_length=7)
        page = load_page(content_dir / "example-page.md", config)
        assert page.excerpt == "This is"

    def test_custom_variables_override_builtins(self, content_dir):
        config = EngineConfig(
            content_dir=content_dir, base_url="/docs", variables={"base_url": "/custom"}
        )
        page = load_page(content_dir / "example-page.md", config)
        assert "/custom/sub/example-sub-page" in page.body

    def test_bom_is_ignored(self, config, content_dir):
        (content_dir / "bom.md").write_bytes("\ufeff/*\nTitle: Bom\n*/\nText".encode("utf-8"))
        page = load_page(content_dir / "bom.md", config)
        assert page.title == "Bom"
        assert page.body == "Text"

    def test_undecodable_file_raises(self, config, content_dir):
        (content_dir / "binary.md").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(UnicodeDecodeError):
            load_page(content_dir / "binary.md", config)


class TestResolvePagePath:
    def test_resolves_slug_path(self, config, content_dir):
        path = resolve_page_path("sub/example-sub-page", config)
        assert path == content_dir / "sub" / "example-sub-page.md"

    def test_accepts_leading_slash_and_extension(self, config, content_dir):
        path = resolve_page_path("/example-page.md", config)
        assert path == content_dir / "example-page.md"

    def test_rejects_traversal(self, config):
        assert resolve_page_path("../outside", config) is None

    def test_missing_returns_none(self, config):
        assert resolve_page_path("nope", config) is None
        assert resolve_page_path("", config) is None


class TestLoadPageThroughSymlink:
    def test_slug_from_link_name(self, config, content_dir):
        (content_dir / "alias").symlink_to(content_dir / "sub", target_is_directory=True)
        page = load_page(content_dir / "alias" / "example-sub-page.md", config)
        assert page.slug == "alias-example-sub-page"

    def test_link_escaping_root_refused(self, config, content_dir, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.md").write_text("secret", encoding="utf-8")
        (content_dir / "escape").symlink_to(outside, target_is_directory=True)
        assert load_page(content_dir / "escape" / "secret.md", config) is None
