"""Ordered predicate set evaluated against one document at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from patcorpus.matching.document import Document, parse_document
from patcorpus.matching.pattern import Pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of evaluating one document."""

    matched: bool
    pattern: Pattern | None = None  # first predicate that matched

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = MatchResult(matched=False)


class PatternMatcher:
    """Logical OR over predicates, evaluated in insertion order.

    ``evaluate`` returns the matching predicate as part of its result and
    keeps no state, so one matcher can serve concurrent evaluations.
    ``match`` additionally records ``last_matched_pattern`` for callers
    that read diagnostics after the fact; that attribute is per instance.
    """

    def __init__(self, patterns: Iterable[Pattern] | None = None):
        self._patterns: list[Pattern] = list(patterns or [])
        self._last_matched: Pattern | None = None

    def add(self, pattern: Pattern) -> None:
        self._patterns.append(pattern)

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return tuple(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def evaluate(self, document: Document) -> MatchResult:
        """Return the first matching predicate; never raises for bad documents."""
        if not self._patterns:
            return NO_MATCH

        root = parse_document(document)
        if root is None:
            return NO_MATCH

        for pattern in self._patterns:
            if pattern.matches(root):
                return MatchResult(matched=True, pattern=pattern)
        return NO_MATCH

    def match(self, document: Document) -> bool:
        result = self.evaluate(document)
        self._last_matched = result.pattern
        return result.matched

    @property
    def last_matched_pattern(self) -> Pattern | None:
        """Predicate behind the most recent ``match`` call (None after a miss)."""
        return self._last_matched
