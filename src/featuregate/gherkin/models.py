"""Parsed Gherkin document models.

A Feature is identified by two things: its ``source`` (the full text it was
parsed from) and its ``uri``. Everything else is structure for consumers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocString:
    content: str
    media_type: str | None = None


@dataclass(frozen=True)
class Step:
    """One Given/When/Then line with its optional argument."""

    keyword: str
    text: str
    line: int
    data_table: tuple[tuple[str, ...], ...] | None = None
    doc_string: DocString | None = None


@dataclass(frozen=True)
class Examples:
    name: str
    line: int
    tags: tuple[str, ...] = ()
    header: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class Background:
    name: str
    line: int
    steps: tuple[Step, ...] = ()


@dataclass(frozen=True)
class Scenario:
    """A Scenario, Example, or Scenario Outline."""

    keyword: str
    name: str
    line: int
    tags: tuple[str, ...] = ()
    description: str = ""
    steps: tuple[Step, ...] = ()
    examples: tuple[Examples, ...] = ()

    @property
    def is_outline(self) -> bool:
        return bool(self.examples) or self.keyword in ("Scenario Outline", "Scenario Template")


@dataclass(frozen=True)
class Rule:
    name: str
    line: int
    tags: tuple[str, ...] = ()
    description: str = ""
    background: Background | None = None
    scenarios: tuple[Scenario, ...] = ()


@dataclass(frozen=True)
class Feature:
    """A parsed feature document."""

    uri: str
    source: str
    name: str
    line: int
    keyword: str = "Feature"
    language: str = "en"
    tags: tuple[str, ...] = ()
    description: str = ""
    background: Background | None = None
    scenarios: tuple[Scenario, ...] = ()
    rules: tuple[Rule, ...] = ()

    @property
    def location(self) -> str:
        return self.uri

    def all_scenarios(self) -> list[Scenario]:
        """Top-level scenarios followed by scenarios nested in rules."""
        result = list(self.scenarios)
        for rule in self.rules:
            result.extend(rule.scenarios)
        return result
