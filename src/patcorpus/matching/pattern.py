"""Compiled document predicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from lxml import etree

from patcorpus.domain.classification import PatentClassification
from patcorpus.matching.document import read_classifications
from patcorpus.matching.exceptions import PredicateCompilationError


class Pattern(Protocol):
    """A predicate evaluated against a parsed document root."""

    def matches(self, root: etree._Element) -> bool:
        ...


@dataclass(frozen=True)
class XPathPattern:
    """An XPath expression compiled once and evaluated per document."""

    expression: str
    source: str | None = None  # normalized classification text
    _xpath: etree.XPath = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            xpath = etree.XPath(self.expression)
        except etree.XPathSyntaxError as e:
            raise PredicateCompilationError(
                f"invalid XPath {self.expression!r}: {e}", self.source
            ) from e
        object.__setattr__(self, "_xpath", xpath)

    def matches(self, root: etree._Element) -> bool:
        return bool(self._xpath(root))

    def __str__(self) -> str:
        return self.expression


@dataclass(frozen=True)
class ContainmentPattern:
    """Matches documents carrying a classification that ``wanted`` contains."""

    wanted: PatentClassification

    def matches(self, root: etree._Element) -> bool:
        return self.matches_any(read_classifications(root))

    def matches_any(self, classifications: list[PatentClassification]) -> bool:
        return any(self.wanted.is_contained(c) for c in classifications)

    def __str__(self) -> str:
        return self.wanted.get_text_normalized()
