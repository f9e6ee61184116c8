"""Patent classification base entity."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.exceptions import (
    ClassificationParseError,
    ClassificationValidationError,
)

logger = logging.getLogger(__name__)

PARSE_FAILED_MARKER = "__parseFailed"


class PatentClassification(ABC):
    """
    A single classification code of one taxonomy.

    Lifecycle:
    - Constructed from the raw text and the inventive/main flag
    - Parsed exactly once with ``parse_text``; later calls are no-ops
    - Read-only afterwards

    A failed parse leaves the instance inspectable: ``get_parts()`` is empty
    and ``get_text_normalized()`` returns the original text tagged with
    ``PARSE_FAILED_MARKER``.

    Hierarchy segments are stored as the populated prefix of the taxonomy's
    segment list, so the depth is the number of stored segments.
    """

    classification_type: ClassVar[ClassificationType]
    segment_names: ClassVar[tuple[str, ...]]

    def __init__(self, original_text: str, is_inventive_or_main: bool = False):
        """
        Initialize an unparsed classification.

        Parameters
        ----------
        original_text
            Raw text as found in the source data (kept untouched)
        is_inventive_or_main
            True for a document's main (or inventive) classification
        """
        self._original_text = original_text
        self._is_inventive_or_main = is_inventive_or_main
        self._segments: tuple[str, ...] = ()
        self._parsed = False
        self._parse_failed = False

    @property
    def original_text(self) -> str:
        return self._original_text

    @property
    def is_inventive_or_main(self) -> bool:
        return self._is_inventive_or_main

    @property
    def parse_failed(self) -> bool:
        return self._parse_failed

    @property
    def is_parsed(self) -> bool:
        """True once parsing succeeded."""
        return self._parsed and not self._parse_failed

    def parse_text(self, text: str | None = None) -> None:
        """Apply the taxonomy grammar to ``text`` (defaults to the original text).

        Raises
        ------
        ClassificationParseError
            If the text matches none of the accepted forms. The instance
            stays usable in its failed state.
        """
        if self._parsed:
            logger.debug("%s already parsed, ignoring %r", self, text)
            return
        self._parsed = True

        raw = self._original_text if text is None else text
        try:
            segments = self._parse_segments(self._prepare(raw or ""))
        except ClassificationParseError:
            self._parse_failed = True
            logger.debug(
                "%s parse failed %r", self.classification_type.label, raw
            )
            raise
        self._segments = segments

    def _prepare(self, text: str) -> str:
        return text.strip()

    @abstractmethod
    def _parse_segments(self, text: str) -> tuple[str, ...]:
        """Return the populated hierarchy segments or raise ClassificationParseError."""

    @abstractmethod
    def _format_normalized(self) -> str:
        """Canonical text for a successfully parsed instance."""

    def _fail(self, text: str) -> ClassificationParseError:
        return ClassificationParseError(self.classification_type.label, text)

    def _segment(self, index: int) -> str | None:
        if index < len(self._segments):
            return self._segments[index]
        return None

    def get_text_normalized(self) -> str:
        if self._parse_failed:
            return self._original_text + PARSE_FAILED_MARKER
        if not self._parsed:
            return self._original_text
        return self._format_normalized()

    def get_parts(self) -> tuple[str, ...]:
        if self._parse_failed:
            return ()
        return self._segments

    def get_depth(self) -> int:
        return len(self.get_parts())

    def is_contained(self, other: PatentClassification | None) -> bool:
        """True if ``other`` lies within this classification.

        Every segment this instance defines must equal the corresponding
        segment of ``other``; a coarser code therefore contains all finer
        codes sharing its prefix. Absent input, another taxonomy, or an
        unparsed side yields False.
        """
        if other is None or type(other) is not type(self):
            return False
        mine = self.get_parts()
        theirs = other.get_parts()
        if not mine or len(mine) > len(theirs):
            return False
        return theirs[: len(mine)] == mine

    def validate(self) -> bool:
        """Check the mandatory top-level segment.

        Raises
        ------
        ClassificationValidationError
            If the top-level segment is empty or absent.
        """
        if not self._segment(0):
            raise ClassificationValidationError(
                self.classification_type.label,
                self.segment_names[0],
                self._original_text,
            )
        return True

    def _identity(self) -> tuple:
        if self.is_parsed:
            return (self.classification_type, self._segments)
        return (self.classification_type, self.get_text_normalized())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatentClassification):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return self.get_text_normalized()

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={self._segment(i)!r}" for i, name in enumerate(self.segment_names)
        )
        return (
            f"{self.__class__.__name__}({fields}, "
            f"normalized={self.get_text_normalized()!r})"
        )
