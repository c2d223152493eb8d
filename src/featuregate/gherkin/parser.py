"""Gherkin document parser.

Line-oriented parser for English-keyword Gherkin. Produces the frozen models
in ``featuregate.gherkin.models``; any structural problem is reported as a
ResolutionError pointing at the offending line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from featuregate.core.errors import ResolutionError
from featuregate.gherkin.models import (
    Background,
    DocString,
    Examples,
    Feature,
    Rule,
    Scenario,
    Step,
)

FEATURE_KEYWORDS = ("Feature", "Business Need", "Ability")
RULE_KEYWORDS = ("Rule",)
BACKGROUND_KEYWORDS = ("Background",)
OUTLINE_KEYWORDS = ("Scenario Outline", "Scenario Template")
SCENARIO_KEYWORDS = ("Scenario", "Example")
EXAMPLES_KEYWORDS = ("Examples", "Scenarios")
STEP_KEYWORDS = ("Given ", "When ", "Then ", "And ", "But ", "* ")
DOC_STRING_DELIMITERS = ('"""', "```")

_LANGUAGE_RE = re.compile(r"^#\s*language\s*:\s*([\w-]+)\s*$")

# Header kinds, matched in this order so longer keywords win.
_HEADERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("feature", FEATURE_KEYWORDS),
    ("rule", RULE_KEYWORDS),
    ("background", BACKGROUND_KEYWORDS),
    ("outline", OUTLINE_KEYWORDS),
    ("scenario", SCENARIO_KEYWORDS),
    ("examples", EXAMPLES_KEYWORDS),
)


@dataclass
class _StepBuilder:
    keyword: str
    text: str
    line: int
    rows: list[tuple[str, ...]] = field(default_factory=list)
    doc_string: DocString | None = None

    def build(self) -> Step:
        return Step(
            keyword=self.keyword,
            text=self.text,
            line=self.line,
            data_table=tuple(self.rows) if self.rows else None,
            doc_string=self.doc_string,
        )


@dataclass
class _ExamplesBuilder:
    name: str
    line: int
    tags: list[str]
    rows: list[tuple[str, ...]] = field(default_factory=list)

    def build(self) -> Examples:
        header = self.rows[0] if self.rows else ()
        return Examples(
            name=self.name,
            line=self.line,
            tags=tuple(self.tags),
            header=header,
            rows=tuple(self.rows[1:]),
        )


@dataclass
class _StepContainer:
    """Background or scenario under construction."""

    kind: str
    keyword: str
    name: str
    line: int
    tags: list[str] = field(default_factory=list)
    description: list[str] = field(default_factory=list)
    steps: list[_StepBuilder] = field(default_factory=list)
    examples: list[_ExamplesBuilder] = field(default_factory=list)

    def build_background(self) -> Background:
        return Background(
            name=self.name,
            line=self.line,
            steps=tuple(s.build() for s in self.steps),
        )

    def build_scenario(self) -> Scenario:
        return Scenario(
            keyword=self.keyword,
            name=self.name,
            line=self.line,
            tags=tuple(self.tags),
            description=_join_description(self.description),
            steps=tuple(s.build() for s in self.steps),
            examples=tuple(e.build() for e in self.examples),
        )


@dataclass
class _Section:
    """Feature or Rule body under construction."""

    keyword: str
    name: str
    line: int
    tags: list[str] = field(default_factory=list)
    description: list[str] = field(default_factory=list)
    background: _StepContainer | None = None
    scenarios: list[_StepContainer] = field(default_factory=list)
    rules: list[_Section] = field(default_factory=list)

    def build_rule(self) -> Rule:
        return Rule(
            name=self.name,
            line=self.line,
            tags=tuple(self.tags),
            description=_join_description(self.description),
            background=self.background.build_background() if self.background else None,
            scenarios=tuple(s.build_scenario() for s in self.scenarios),
        )


def _join_description(lines: list[str]) -> str:
    return "\n".join(lines).strip()


def _match_header(stripped: str) -> tuple[str, str, str] | None:
    """Return (kind, keyword, name) for a ``Keyword: name`` line."""
    for kind, keywords in _HEADERS:
        for keyword in keywords:
            prefix = keyword + ":"
            if stripped.startswith(prefix):
                return kind, keyword, stripped[len(prefix) :].strip()
    return None


def _parse_row(stripped: str) -> tuple[str, ...]:
    """Split a ``| a | b |`` table row into cells, honouring ``\\|`` escapes."""
    body = stripped[1:]
    if body.endswith("|"):
        body = body[:-1]
    cells: list[str] = []
    current: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            if nxt == "|":
                current.append("|")
            elif nxt == "n":
                current.append("\n")
            else:
                current.append(nxt)
        elif ch == "|":
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    cells.append("".join(current).strip())
    return tuple(cells)


def _parse_tags(stripped: str) -> list[str]:
    tags: list[str] = []
    for token in stripped.split():
        if token.startswith("#"):
            break
        tags.append(token)
    return tags


class _Parser:
    def __init__(self, source: str, uri: str) -> None:
        self.source = source
        self.uri = uri
        self.language = "en"
        self.feature: _Section | None = None
        self.rule: _Section | None = None
        self.container: _StepContainer | None = None
        self.examples: _ExamplesBuilder | None = None
        self.pending_tags: list[str] = []
        # Description lines are accepted only right after a header
        self.description: list[str] | None = None
        self.last_step: _StepBuilder | None = None

    def fail(self, line: int, reason: str) -> ResolutionError:
        return ResolutionError.parse_failed(self.uri, line, reason)

    def parse(self) -> Feature | None:
        lines = self.source.splitlines()
        index = 0
        while index < len(lines):
            index = self._consume(lines, index)
        if self.pending_tags:
            raise self.fail(len(lines), "Tags must be followed by a Feature, Rule, Scenario or Examples")
        if self.feature is None:
            return None
        return self._build()

    def _consume(self, lines: list[str], index: int) -> int:
        lineno = index + 1
        raw = lines[index]
        stripped = raw.strip()

        if not stripped:
            if self.description:
                self.description.append("")
            return index + 1

        if stripped.startswith("#"):
            match = _LANGUAGE_RE.match(stripped)
            if match and self.feature is None:
                self.language = match.group(1)
                if self.language != "en":
                    raise self.fail(lineno, f"Unsupported language: {self.language}")
            return index + 1

        if stripped.startswith("@"):
            self.pending_tags.extend(_parse_tags(stripped))
            self.description = None
            return index + 1

        header = _match_header(stripped)
        if header is not None:
            self._open(lineno, *header)
            return index + 1

        if stripped.startswith(STEP_KEYWORDS):
            self._step(lineno, stripped)
            return index + 1

        if stripped.startswith("|"):
            self._row(lineno, stripped)
            return index + 1

        if stripped.startswith(DOC_STRING_DELIMITERS):
            return self._doc_string(lines, index)

        if self.description is None:
            if self.feature is None:
                raise self.fail(lineno, f"Expected a Feature but found: {stripped}")
            raise self.fail(lineno, f"Unexpected text: {stripped}")
        self.description.append(stripped)
        return index + 1

    def _take_tags(self) -> list[str]:
        tags, self.pending_tags = self.pending_tags, []
        return tags

    def _open(self, lineno: int, kind: str, keyword: str, name: str) -> None:
        if kind != "feature" and self.feature is None:
            raise self.fail(lineno, f"Expected a Feature but found: {keyword}")
        if kind == "background" and self.pending_tags:
            raise self.fail(lineno, "Background cannot be tagged")

        self.last_step = None
        if kind == "feature":
            if self.feature is not None:
                raise self.fail(lineno, "Only one Feature is allowed per document")
            self.feature = _Section(keyword=keyword, name=name, line=lineno, tags=self._take_tags())
            self.description = self.feature.description
        elif kind == "rule":
            assert self.feature is not None
            self.rule = _Section(keyword=keyword, name=name, line=lineno, tags=self._take_tags())
            self.feature.rules.append(self.rule)
            self.container = None
            self.examples = None
            self.description = self.rule.description
        elif kind == "background":
            section = self.rule or self.feature
            assert section is not None
            if section.background is not None or section.scenarios:
                raise self.fail(lineno, "Background must come before any scenario and appear once")
            self.container = _StepContainer(kind=kind, keyword=keyword, name=name, line=lineno)
            section.background = self.container
            self.examples = None
            self.description = self.container.description
        elif kind in ("scenario", "outline"):
            section = self.rule or self.feature
            assert section is not None
            self.container = _StepContainer(
                kind=kind, keyword=keyword, name=name, line=lineno, tags=self._take_tags()
            )
            section.scenarios.append(self.container)
            self.examples = None
            self.description = self.container.description
        else:
            if self.container is None or self.container.kind == "background":
                raise self.fail(lineno, "Examples must belong to a Scenario Outline")
            self.examples = _ExamplesBuilder(name=name, line=lineno, tags=self._take_tags())
            self.container.examples.append(self.examples)
            self.description = []

    def _step(self, lineno: int, stripped: str) -> None:
        if self.feature is None:
            raise self.fail(lineno, f"Expected a Feature but found: {stripped}")
        if self.pending_tags:
            raise self.fail(lineno, "Steps cannot be tagged")
        if self.container is None or self.examples is not None:
            raise self.fail(lineno, f"Step outside of a Scenario or Background: {stripped}")
        keyword = next(k for k in STEP_KEYWORDS if stripped.startswith(k))
        step = _StepBuilder(keyword=keyword.strip(), text=stripped[len(keyword) :].strip(), line=lineno)
        self.container.steps.append(step)
        self.last_step = step
        self.description = None

    def _row(self, lineno: int, stripped: str) -> None:
        row = _parse_row(stripped)
        if self.examples is not None:
            target = self.examples.rows
        elif self.last_step is not None and self.last_step.doc_string is None:
            target = self.last_step.rows
        else:
            raise self.fail(lineno, "Table row must follow a step or Examples")
        if target and len(target[0]) != len(row):
            raise self.fail(lineno, "Inconsistent cell count within the table")
        target.append(row)
        self.description = None

    def _doc_string(self, lines: list[str], index: int) -> int:
        lineno = index + 1
        opening = lines[index]
        stripped = opening.strip()
        if self.last_step is None or self.last_step.rows or self.last_step.doc_string is not None:
            raise self.fail(lineno, "Doc string must follow a step")
        delimiter = stripped[:3]
        media_type = stripped[3:].strip() or None
        indent = len(opening) - len(opening.lstrip())

        content: list[str] = []
        for close in range(index + 1, len(lines)):
            line = lines[close]
            if line.strip() == delimiter:
                self.last_step.doc_string = DocString(content="\n".join(content), media_type=media_type)
                self.description = None
                return close + 1
            # Strip up to the opening delimiter's indentation
            leading = len(line) - len(line.lstrip())
            content.append(line[min(indent, leading) :])
        raise self.fail(lineno, "Unterminated doc string")

    def _build(self) -> Feature:
        feature = self.feature
        assert feature is not None
        return Feature(
            uri=self.uri,
            source=self.source,
            name=feature.name,
            line=feature.line,
            keyword=feature.keyword,
            language=self.language,
            tags=tuple(feature.tags),
            description=_join_description(feature.description),
            background=feature.background.build_background() if feature.background else None,
            scenarios=tuple(s.build_scenario() for s in feature.scenarios),
            rules=tuple(r.build_rule() for r in feature.rules),
        )


def parse_feature(source: str, uri: str) -> Feature | None:
    """Parse one Gherkin document.

    Returns None when the document holds no Feature at all (empty or
    comment-only text).

    Raises:
        ResolutionError: The document is not well-formed Gherkin.
    """
    return _Parser(source, uri).parse()
