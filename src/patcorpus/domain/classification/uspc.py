"""USPC (United States Patent Classification) classification.

Codes have a main class and an optional subclass, written ``345/156``.
Main classes are three digit numbers (``002``), design classes ``D01`` to
``D99``, or ``PLT`` for plants. Subclasses may carry a decimal extension
and an alpha suffix (``156.1``, ``2A``).

Accepted input forms::

    345          345/156      345 156      2/1       D14/341   PLT/101
    345156       " 73862.041" "  2  1"     D14341    PLT101

The separator-less forms are the fixed-width layout of the grant XML: a
three character main class and a three character subclass, each right
justified with spaces, followed by the subclass extension. A numeric main
class written without padding needs a ``/`` or whitespace before its
subclass, so ``1234`` is rejected.
"""

import re
from typing import ClassVar

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.patent_classification import (
    PatentClassification,
)

SUBCLASS_EXTENSION = r"(?P<sub_ext>(?:\.[0-9]+)?[A-Z]*)"

USPC_PATTERN = re.compile(
    r"^(?P<main>D[0-9]{1,2}|PLT|[0-9]{1,3})"
    r"(?:(?:\s*/\s*|\s+)(?P<sub>(?P<sub_int>[0-9]{1,3})" + SUBCLASS_EXTENSION + r"))?$"
)
USPC_FIXED_WIDTH_PATTERN = re.compile(
    r"^(?P<main>D[0-9]{2}|PLT|[0-9]{3}| [0-9]{2}|  [0-9])"
    r"(?P<sub>(?P<sub_int>[0-9]{3}| [0-9]{2}|  [0-9])" + SUBCLASS_EXTENSION + r")$"
)


class UspcClassification(PatentClassification):
    """USPC classification (main class + optional subclass)."""

    classification_type: ClassVar[ClassificationType] = ClassificationType.USPC
    segment_names: ClassVar[tuple[str, ...]] = ("main_class", "sub_class")

    @property
    def main_class(self) -> str | None:
        return self._segment(0)

    @property
    def sub_class(self) -> str | None:
        return self._segment(1)

    @property
    def document_main_class(self) -> str | None:
        """Main class as grant XML writes it once trimmed (``73``, not ``073``)."""
        main = self.main_class
        if main is None or not main.isdigit():
            return main
        return main.lstrip("0") or "0"

    def _prepare(self, text: str) -> str:
        # Leading spaces are significant in the fixed-width form
        return text.rstrip().upper()

    def _parse_segments(self, text: str) -> tuple[str, ...]:
        stripped = text.strip()
        match = (
            USPC_FIXED_WIDTH_PATTERN.match(text)
            or USPC_FIXED_WIDTH_PATTERN.match(stripped)
            or USPC_PATTERN.match(stripped)
        )
        if match is None:
            raise self._fail(stripped)

        main = match.group("main").strip()
        if main.startswith("D"):
            main = "D" + main[1:].zfill(2)
        elif main != "PLT":
            main = main.zfill(3)

        if match.group("sub") is None:
            return (main,)
        sub = match.group("sub_int").strip().zfill(3) + match.group("sub_ext")
        return (main, sub)

    def _format_normalized(self) -> str:
        return "/".join(self.get_parts())
