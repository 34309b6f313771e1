"""Build typed chapter outlines from the generic node tree."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import Callable, Iterable, cast

from bookoutline.classifier import ChapterShape, classify
from bookoutline.config import (
    BOOKOUTLINE_DROP_EMPTY,
    BOOKOUTLINE_FALLBACK_TITLE,
    BOOKOUTLINE_MAX_DEPTH,
)
from bookoutline.exceptions import BuildError, TitleResolutionError
from bookoutline.fs_utils import path_exists, resolve_candidate
from bookoutline.nodes import load_node, load_node_file
from bookoutline.schemas import (
    ArrayNode,
    BooleanNode,
    BuildIssue,
    BuildResult,
    Chapter,
    Group,
    IssueKind,
    MappingNode,
    Node,
    NullNode,
    Outline,
    StringNode,
)
from bookoutline.titles import title_from_file
from bookoutline.utils.logging_config import get_logger

logger = get_logger(__name__)

ExistsCheck = Callable[[Path], bool]
TitleResolver = Callable[[Path], str]


@dataclass
class BuilderOptions:
    """Options for outline building.

    Attributes:
        root: Directory that relative chapter paths are resolved against.
            None means the current working directory.
        drop_empty: If True, leave placeholder chapters (nodes with no chapter
            interpretation, and empty records) out of every sequence.
        max_depth: Deepest ``sections`` nesting that is descended into.
        fallback_title: Title used for records whose ``title`` is not text,
            and for files whose title cannot be resolved.
        strict: If True, ``build_outline`` raises BuildError when any issue
            was recorded.
    """

    root: Path | None = None
    drop_empty: bool = BOOKOUTLINE_DROP_EMPTY
    max_depth: int = BOOKOUTLINE_MAX_DEPTH
    fallback_title: str = BOOKOUTLINE_FALLBACK_TITLE
    strict: bool = False


def chapter_from_path(path: Path, title: str) -> Chapter:
    """Chapter backed by an existing file."""
    return Chapter(title=title, path=path, draft=False)


def chapter_from_title(title: str) -> Chapter:
    """Draft chapter that only has a title."""
    return Chapter(title=title, path=None, draft=True)


def chapter_from_link(
    title: str,
    path: str | Path | None,
    sections: tuple[Chapter, ...] = (),
) -> Chapter:
    """Chapter from a ``[title](path)`` link; an empty target makes a draft."""
    resolved = Path(path) if path else None
    return Chapter(title=title, path=resolved, draft=resolved is None, sections=sections)


class OutlineBuilder:
    """Turn nodes into chapters, collecting recoverable issues on the way.

    ``exists`` and ``title_for`` default to the local filesystem check and the
    file title reader, both anchored at ``options.root``.

    ``build_outline`` starts from an empty issue list and hands the issues
    back in its result. Direct ``build`` and ``build_sequence`` calls append
    to ``issues`` across calls; collect and clear them with ``take_issues``.
    """

    def __init__(
        self,
        options: BuilderOptions | None = None,
        *,
        exists: ExistsCheck | None = None,
        title_for: TitleResolver | None = None,
    ) -> None:
        self.options = options or BuilderOptions()
        self._exists = exists or partial(path_exists, root=self.options.root)
        self._title_for = title_for or self._read_title
        self.issues: list[BuildIssue] = []

    def build_outline(self, root: Node) -> BuildResult:
        """Build the three chapter groups from the document root.

        Raises:
            BuildError: In strict mode, if any issue was recorded.
        """
        self.issues = []
        groups: dict[str, tuple[Chapter, ...]] = {}

        if isinstance(root, MappingNode):
            for group in Group:
                value = root.get(group.value)
                if value is None or isinstance(value, NullNode):
                    continue
                if not isinstance(value, ArrayNode):
                    self._record(
                        IssueKind.GROUP_NOT_ARRAY,
                        group.value,
                        f"expected a list of chapters, got {type(value).__name__}",
                    )
                    continue
                groups[group.value] = self.build_sequence(value.items, location=group.value)
        elif not isinstance(root, NullNode):
            self._record(
                IssueKind.ROOT_NOT_MAPPING,
                "$",
                f"expected a mapping of chapter groups, got {type(root).__name__}",
            )

        result = BuildResult(outline=Outline(**groups), issues=self.take_issues())
        logger.info(
            "Outline built",
            extra={
                **{group.value: len(chapters) for group, chapters in result.outline.groups()},
                "issues": len(result.issues),
            },
        )
        if self.options.strict and result.issues:
            raise BuildError(result.issues)
        return result

    def take_issues(self) -> list[BuildIssue]:
        """Return the issues recorded so far and start a new list."""
        issues, self.issues = self.issues, []
        return issues

    def build_sequence(
        self,
        nodes: Iterable[Node],
        *,
        location: str = "$",
        depth: int = 0,
    ) -> tuple[Chapter, ...]:
        """Build every node in order; same operation at every nesting level."""
        chapters: list[Chapter] = []
        for index, node in enumerate(nodes):
            chapter = self.build(node, location=f"{location}[{index}]", depth=depth)
            if self.options.drop_empty and chapter.is_empty:
                continue
            chapters.append(chapter)
        return tuple(chapters)

    def build(self, node: Node, *, location: str = "$", depth: int = 0) -> Chapter:
        """Build one chapter, dispatching on the node's shape."""
        shape = classify(node)
        if shape is ChapterShape.TEXT:
            return self._from_text(cast(StringNode, node).value, location)
        if shape is ChapterShape.RECORD:
            return self._from_record(cast(MappingNode, node), location, depth)

        self._record(
            IssueKind.UNRECOGNIZED_NODE,
            location,
            f"{type(node).__name__} is not a chapter",
        )
        return Chapter.empty()

    def _from_text(self, text: str, location: str) -> Chapter:
        candidate = Path(text)
        if text and self._check_exists(candidate):
            return chapter_from_path(candidate, self._resolve_title(candidate, location))
        return chapter_from_title(text)

    def _from_record(self, node: MappingNode, location: str, depth: int) -> Chapter:
        title = ""
        title_node = node.get("title")
        if title_node is not None:
            title = title_node.value if isinstance(title_node, StringNode) else self.options.fallback_title

        path: Path | None = None
        path_node = node.get("path")
        if isinstance(path_node, StringNode) and path_node.value:
            path = Path(path_node.value)

        draft_node = node.get("draft")
        draft = draft_node.value if isinstance(draft_node, BooleanNode) else False

        sections: tuple[Chapter, ...] = ()
        sections_node = node.get("sections")
        if isinstance(sections_node, ArrayNode) and sections_node.items:
            if depth >= self.options.max_depth:
                self._record(
                    IssueKind.DEPTH_LIMIT,
                    f"{location}.sections",
                    f"sections nested deeper than {self.options.max_depth} levels were skipped",
                )
            else:
                sections = self.build_sequence(
                    sections_node.items,
                    location=f"{location}.sections",
                    depth=depth + 1,
                )

        return Chapter(title=title, path=path, draft=draft, sections=sections)

    def _check_exists(self, candidate: Path) -> bool:
        try:
            return self._exists(candidate)
        except (OSError, ValueError) as exc:
            logger.debug("Existence check failed for %s: %s", candidate, exc)
            return False

    def _resolve_title(self, path: Path, location: str) -> str:
        try:
            return self._title_for(path)
        except (TitleResolutionError, OSError, UnicodeError) as exc:
            self._record(IssueKind.TITLE_RESOLUTION, location, str(exc))
            return path.name or self.options.fallback_title

    def _read_title(self, path: Path) -> str:
        return title_from_file(resolve_candidate(path, self.options.root))

    def _record(self, kind: IssueKind, location: str, message: str) -> None:
        issue = BuildIssue(kind=kind, location=location, message=message)
        self.issues.append(issue)
        logger.debug(
            "Outline issue",
            extra={"kind": kind.value, "location": location, "detail": message},
        )


def build_outline_from_yaml(
    text: str,
    options: BuilderOptions | None = None,
    *,
    exists: ExistsCheck | None = None,
    title_for: TitleResolver | None = None,
) -> BuildResult:
    """Parse YAML outline text and build it.

    Raises:
        ParseError: If the text is not a single valid YAML document.
        BuildError: In strict mode, if any issue was recorded.
    """
    builder = OutlineBuilder(options, exists=exists, title_for=title_for)
    return builder.build_outline(load_node(text))


def build_outline_from_file(
    path: Path,
    options: BuilderOptions | None = None,
    *,
    exists: ExistsCheck | None = None,
    title_for: TitleResolver | None = None,
) -> BuildResult:
    """Build the outline stored at ``path``.

    Chapter paths are resolved against the outline's directory unless
    ``options.root`` says otherwise.
    """
    opts = options or BuilderOptions()
    if opts.root is None:
        opts = replace(opts, root=path.parent)
    builder = OutlineBuilder(opts, exists=exists, title_for=title_for)
    return builder.build_outline(load_node_file(path))
