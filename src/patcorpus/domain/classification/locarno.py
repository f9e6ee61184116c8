"""Locarno classification.

International classification used for the registration of industrial
designs, found on design patents. Codes have a two digit main class and a
two digit sub class, written ``MM-SS``.

See https://www.wipo.int/classifications/locarno/en/
"""

import re
from typing import ClassVar

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.patent_classification import (
    PatentClassification,
)

LOCARNO_PATTERN = re.compile(r"^([0-9]{2})[-/]?([0-9]{2})$")
SHORT_FORM_PATTERN = re.compile(r"^[0-9]{1,2}$")


class LocarnoClassification(PatentClassification):
    """Locarno design classification (main class + sub class)."""

    classification_type: ClassVar[ClassificationType] = ClassificationType.LOCARNO
    segment_names: ClassVar[tuple[str, ...]] = ("main_class", "sub_class")

    @property
    def main_class(self) -> str | None:
        return self._segment(0)

    @property
    def sub_class(self) -> str | None:
        return self._segment(1)

    def _parse_segments(self, text: str) -> tuple[str, ...]:
        # Bare main class: "6" -> 06-00, "14" -> 14-00
        if SHORT_FORM_PATTERN.match(text):
            return (text.zfill(2), "00")

        match = LOCARNO_PATTERN.match(text)
        if match is None:
            raise self._fail(text)
        return (match.group(1), match.group(2))

    def _format_normalized(self) -> str:
        return f"{self.main_class}-{self.sub_class}"
