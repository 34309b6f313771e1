"""Test setup for bookoutline."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bookoutline.builder import BuilderOptions, OutlineBuilder  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    for name in ("bookoutline", "server"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


@pytest.fixture
def offline_builder() -> OutlineBuilder:
    """Builder whose filesystem check never finds a file."""
    return OutlineBuilder(BuilderOptions(), exists=lambda path: False)


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """A small book source directory with Markdown and HTML chapters."""
    (tmp_path / "preface.md").write_text("# Preface\n\nWhy this book.\n", encoding="utf-8")
    (tmp_path / "chapter1.md").write_text(
        "---\ntitle: The Nameless Stone\n---\n# Ignored heading\n", encoding="utf-8"
    )
    (tmp_path / "glossary.html").write_text(
        "<html><head><title>Terms</title></head><body><h1>Glossary</h1></body></html>",
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("plain notes\n", encoding="utf-8")
    return tmp_path
