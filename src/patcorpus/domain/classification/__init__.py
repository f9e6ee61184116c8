"""Patent classification domain: taxonomies, parsing and containment."""

from patcorpus.domain.classification.classification_type import ClassificationType
from patcorpus.domain.classification.cpc import CpcClassification
from patcorpus.domain.classification.exceptions import (
    ClassificationParseError,
    ClassificationValidationError,
)
from patcorpus.domain.classification.locarno import LocarnoClassification
from patcorpus.domain.classification.patent_classification import (
    PARSE_FAILED_MARKER,
    PatentClassification,
)
from patcorpus.domain.classification.registry import (
    CLASSIFICATION_CLASSES,
    create_classification,
    get_by_type,
    group_by_type,
    try_create_classification,
)
from patcorpus.domain.classification.uspc import UspcClassification

__all__ = [
    "CLASSIFICATION_CLASSES",
    "PARSE_FAILED_MARKER",
    "ClassificationParseError",
    "ClassificationType",
    "ClassificationValidationError",
    "CpcClassification",
    "LocarnoClassification",
    "PatentClassification",
    "UspcClassification",
    "create_classification",
    "get_by_type",
    "group_by_type",
    "try_create_classification",
]
