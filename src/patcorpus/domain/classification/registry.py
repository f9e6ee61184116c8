"""Classification registry: filtering and construction by taxonomy."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.cpc import CpcClassification
from patcorpus.domain.classification.exceptions import ClassificationParseError
from patcorpus.domain.classification.locarno import LocarnoClassification
from patcorpus.domain.classification.patent_classification import (
    PatentClassification,
)
from patcorpus.domain.classification.uspc import UspcClassification

logger = logging.getLogger(__name__)

CLASSIFICATION_CLASSES: dict[ClassificationType, type[PatentClassification]] = {
    ClassificationType.CPC: CpcClassification,
    ClassificationType.USPC: UspcClassification,
    ClassificationType.LOCARNO: LocarnoClassification,
}


def get_by_type(
    classifications: Iterable[PatentClassification],
    classification_type: ClassificationType,
) -> list[PatentClassification]:
    """Return the classifications of one taxonomy, in their original order."""
    return [
        c for c in classifications if c.classification_type is classification_type
    ]


def group_by_type(
    classifications: Iterable[PatentClassification],
) -> dict[ClassificationType, list[PatentClassification]]:
    """Partition classifications by taxonomy (every taxonomy key present)."""
    items = list(classifications)
    return {ct: get_by_type(items, ct) for ct in ClassificationType}


def create_classification(
    text: str,
    classification_type: ClassificationType,
    is_inventive_or_main: bool = False,
) -> PatentClassification:
    """Build and parse a classification.

    Raises
    ------
    ClassificationParseError
        If ``text`` is not a valid code of the given taxonomy.
    """
    classification = CLASSIFICATION_CLASSES[classification_type](
        text, is_inventive_or_main
    )
    classification.parse_text()
    return classification


def try_create_classification(
    text: str,
    classification_type: ClassificationType,
    is_inventive_or_main: bool = False,
) -> PatentClassification:
    """Like ``create_classification`` but returns the failed instance on bad input."""
    classification = CLASSIFICATION_CLASSES[classification_type](
        text, is_inventive_or_main
    )
    try:
        classification.parse_text()
    except ClassificationParseError as e:
        logger.debug("Keeping unparsed classification: %s", e)
    return classification
