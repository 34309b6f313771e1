"""Read display titles out of chapter source files."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from bookoutline.config import BOOKOUTLINE_TITLE_MAX_BYTES
from bookoutline.exceptions import TitleResolutionError

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML titles (pip install beautifulsoup4)."
    ) from exc


MARKDOWN_SUFFIXES = frozenset({".md", ".markdown", ".mdown", ".mkd"})
HTML_SUFFIXES = frozenset({".html", ".htm", ".xhtml"})

_ATX_H1_RE = re.compile(r"^ {0,3}#(?!#)\s+(?P<title>.+?)(?:\s+#+)?\s*$")
_SETEXT_H1_RE = re.compile(r"^ {0,3}=+\s*$")
_FENCE_RE = re.compile(r"^ {0,3}(```|~~~)")
_FRONT_MATTER_DELIM = "---"


def title_from_file(path: Path, *, max_bytes: int = BOOKOUTLINE_TITLE_MAX_BYTES) -> str:
    """Return a display title for the chapter stored at ``path``.

    Markdown files use their front-matter ``title`` or first level-one
    heading, HTML files their ``<h1>`` or ``<title>``. Anything else, or a
    file without a heading, falls back to the file name.

    Raises:
        TitleResolutionError: If the file cannot be read or decoded.
    """
    suffix = path.suffix.lower()
    title: str | None = None
    if suffix in MARKDOWN_SUFFIXES:
        title = extract_markdown_title(_read_head(path, max_bytes))
    elif suffix in HTML_SUFFIXES:
        title = extract_html_title(_read_head(path, max_bytes))
    return title or file_title(path)


def file_title(path: Path) -> str:
    """Use the last path component as the title."""
    name = path.name
    if not name:
        raise TitleResolutionError(f"Path has no file name: {path}")
    return name


def extract_markdown_title(text: str) -> str | None:
    """Find the title of a Markdown document."""
    lines = text.splitlines()
    body_start = 0

    if lines and lines[0].strip() == _FRONT_MATTER_DELIM:
        for index in range(1, len(lines)):
            if lines[index].strip() in (_FRONT_MATTER_DELIM, "..."):
                title = _front_matter_title("\n".join(lines[1:index]))
                if title:
                    return title
                body_start = index + 1
                break

    in_fence = False
    previous = ""
    for line in lines[body_start:]:
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            previous = ""
            continue
        if in_fence:
            continue
        match = _ATX_H1_RE.match(line)
        if match:
            return match.group("title").strip()
        if previous.strip() and _SETEXT_H1_RE.match(line):
            return previous.strip()
        previous = line
    return None


def extract_html_title(html: str) -> str | None:
    """Find the title of an HTML document."""
    soup = BeautifulSoup(html, "lxml")
    heading = soup.find("h1")
    if heading:
        text = heading.get_text(" ", strip=True)
        if text:
            return text
    if soup.title:
        text = soup.title.get_text(" ", strip=True)
        if text:
            return text
    return None


def _front_matter_title(block: str) -> str | None:
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError:
        return None
    if isinstance(data, dict):
        title = data.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
    return None


def _read_head(path: Path, max_bytes: int) -> str:
    try:
        with path.open("rb") as handle:
            data = handle.read(max_bytes + 1)
    except OSError as exc:
        raise TitleResolutionError(f"Cannot read {path}: {exc}") from exc

    truncated = len(data) > max_bytes
    data = data[:max_bytes]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte character split by the read limit is not an error.
        if truncated and exc.start >= len(data) - 3:
            return data[: exc.start].decode("utf-8")
        raise TitleResolutionError(f"{path} is not valid UTF-8: {exc}") from exc
