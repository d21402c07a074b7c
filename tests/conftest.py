"""Shared fixtures: a small content directory mirroring a typical docs site."""

import pytest

from flatdocs.models.config import EngineConfig

EXAMPLE_PAGE = """/*
Title: Example Page
Sort: 1
*/
This is an example page. It links to %base_url%/sub/example-sub-page.
"""

EXAMPLE_SUB_PAGE = """/*
Title: Example Sub Page
*/
Some content in a sub directory.
"""


@pytest.fixture
def content_dir(tmp_path):
    root = tmp_path / "content"
    (root / "sub").mkdir(parents=True)
    (root / "example-page.md").write_text(EXAMPLE_PAGE, encoding="utf-8")
    (root / "sub" / "example-sub-page.md").write_text(EXAMPLE_SUB_PAGE, encoding="utf-8")
    return root


@pytest.fixture
def config(content_dir):
    return EngineConfig(content_dir=content_dir, base_url="/docs")
