"""CPC (Cooperative Patent Classification) classification.

Hierarchy: section (``H``), class (``04``), subclass (``N``), main group
(``21``) and subgroup (``2343``), written ``H04N21/2343``.

Accepted input forms::

    H            H04          H04N         H04N21
    H04N 21/00   H04N21/2343  H04N 21 / 2343
    H04N0021234300   (fixed width: 4 digit group, 6 digit subgroup)

The subgroup digits behave like a decimal fraction: trailing zeros carry no
meaning, and ``/00`` denotes the main group itself.
"""

import re
from typing import ClassVar

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.patent_classification import (
    PatentClassification,
)

CPC_PATTERN = re.compile(
    r"^(?P<section>[A-HY])"
    r"(?:(?P<class>[0-9]{2})"
    r"(?:(?P<subclass>[A-Z])"
    r"(?:\s*(?P<group>[0-9]{1,4})"
    r"(?:\s*/\s*(?P<subgroup>[0-9]{1,6}))?"
    r")?)?)?$"
)
CPC_FIXED_WIDTH_PATTERN = re.compile(
    r"^(?P<section>[A-HY])(?P<class>[0-9]{2})(?P<subclass>[A-Z])"
    r"(?P<group>[0-9]{4})(?P<subgroup>[0-9]{6})$"
)

MAIN_GROUP_SUBGROUP = "00"


class CpcClassification(PatentClassification):
    """CPC classification with up to five hierarchy levels."""

    classification_type: ClassVar[ClassificationType] = ClassificationType.CPC
    segment_names: ClassVar[tuple[str, ...]] = (
        "section",
        "main_class",
        "sub_class",
        "main_group",
        "subgroup",
    )

    @property
    def section(self) -> str | None:
        return self._segment(0)

    @property
    def main_class(self) -> str | None:
        return self._segment(1)

    @property
    def sub_class(self) -> str | None:
        return self._segment(2)

    @property
    def main_group(self) -> str | None:
        return self._segment(3)

    @property
    def subgroup(self) -> str | None:
        return self._segment(4)

    def _parse_segments(self, text: str) -> tuple[str, ...]:
        text = text.upper()
        match = CPC_FIXED_WIDTH_PATTERN.match(text) or CPC_PATTERN.match(text)
        if match is None:
            raise self._fail(text)

        segments = [
            match.group(name)
            for name in ("section", "class", "subclass")
            if match.group(name)
        ]

        group = match.group("group")
        if group is not None:
            group = group.lstrip("0")
            if not group:
                raise self._fail(text)
            segments.append(group)

            subgroup = _normalize_subgroup(match.group("subgroup"))
            if subgroup != MAIN_GROUP_SUBGROUP:
                segments.append(subgroup)

        return tuple(segments)

    def _format_normalized(self) -> str:
        if self.main_group is None:
            return "".join(self.get_parts())
        subgroup = self.subgroup or MAIN_GROUP_SUBGROUP
        return (
            f"{self.section}{self.main_class}{self.sub_class}"
            f"{self.main_group}/{subgroup}"
        )


def _normalize_subgroup(value: str | None) -> str:
    if not value:
        return MAIN_GROUP_SUBGROUP
    return value.rstrip("0").ljust(2, "0")
