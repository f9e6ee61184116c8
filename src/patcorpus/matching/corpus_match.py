"""Corpus match adapters: wanted classifications -> predicates -> document.

Usage::

    matcher = MatchClassificationXPath(wanted)
    matcher.setup()
    for xml_doc, patent_type in documents:
        if matcher.on(xml_doc, patent_type).match():
            writer.write(xml_doc)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from patcorpus.domain.classification import (
    ClassificationType,
    PatentClassification,
    get_by_type,
)
from patcorpus.domain.document import PatentType
from patcorpus.matching.document import Document
from patcorpus.matching.exceptions import MatcherNotReadyError
from patcorpus.matching.pattern import ContainmentPattern, Pattern, XPathPattern
from patcorpus.matching.pattern_matcher import MatchResult, PatternMatcher
from patcorpus.matching.xpath_builder import build_xpath, ensure_compilable

logger = logging.getLogger(__name__)

# Predicates are added per taxonomy in this order
COMPILE_ORDER = (
    ClassificationType.CPC,
    ClassificationType.USPC,
    ClassificationType.LOCARNO,
)


class CorpusMatch(Protocol):
    """Decides whether a document belongs in the corpus."""

    def setup(self) -> None:
        ...

    def on(self, document: Document, patent_type: PatentType) -> CorpusMatch:
        ...

    def match(self) -> bool:
        ...

    def evaluate(self) -> MatchResult:
        ...

    def last_match_pattern(self) -> str | None:
        ...


class ClassificationMatch(ABC):
    """Shared setup/bind/match flow over a set of wanted classifications."""

    def __init__(self, wanted: Iterable[PatentClassification]):
        self._wanted = list(wanted)
        self._matcher: PatternMatcher | None = None
        self._document: Document | None = None
        self._patent_type = PatentType.UNDEFINED

    @property
    def wanted(self) -> tuple[PatentClassification, ...]:
        return tuple(self._wanted)

    @property
    def patent_type(self) -> PatentType:
        return self._patent_type

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._matcher.patterns if self._matcher else ()

    @abstractmethod
    def _build_pattern(self, classification: PatentClassification) -> Pattern:
        """Compile one wanted classification."""

    def setup(self) -> None:
        """Compile all predicates; repeated calls are no-ops.

        Raises
        ------
        PredicateCompilationError
            If any wanted classification cannot be compiled. No predicate
            set is installed in that case.
        """
        if self._matcher is not None:
            return

        matcher = PatternMatcher()
        for classification_type in COMPILE_ORDER:
            for classification in get_by_type(self._wanted, classification_type):
                pattern = self._build_pattern(classification)
                logger.debug("%s pattern: %s", classification_type.label, pattern)
                matcher.add(pattern)

        logger.info("Matcher ready with %d patterns", len(matcher))
        self._matcher = matcher

    def on(self, document: Document, patent_type: PatentType) -> ClassificationMatch:
        self._document = document
        self._patent_type = patent_type
        return self

    def _ready(self) -> tuple[PatternMatcher, Document]:
        if self._matcher is None:
            raise MatcherNotReadyError("setup()")
        if self._document is None:
            raise MatcherNotReadyError("on()")
        return self._matcher, self._document

    def evaluate(self) -> MatchResult:
        """Evaluate the bound document without touching match diagnostics."""
        matcher, document = self._ready()
        return matcher.evaluate(document)

    def match(self) -> bool:
        matcher, document = self._ready()
        return matcher.match(document)

    def last_match_pattern(self) -> str | None:
        if self._matcher is None or self._matcher.last_matched_pattern is None:
            return None
        return str(self._matcher.last_matched_pattern)


class MatchClassificationXPath(ClassificationMatch):
    """Match patents by XPath predicates over the classifications in their XML."""

    def _build_pattern(self, classification: PatentClassification) -> Pattern:
        return XPathPattern(
            build_xpath(classification),
            source=classification.get_text_normalized(),
        )


class MatchClassificationContained(ClassificationMatch):
    """Match patents whose own classifications lie within a wanted one.

    Reads CPC, USPC and Locarno codes from the document and applies
    ``is_contained``, so a wanted CPC subgroup or USPC subclass narrows the
    match further than the XPath predicates do.
    """

    def _build_pattern(self, classification: PatentClassification) -> Pattern:
        ensure_compilable(classification)
        return ContainmentPattern(classification)
