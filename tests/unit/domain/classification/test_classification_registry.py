"""Unit tests for classification construction and filtering."""

import pytest

from patcorpus.domain.classification import (
    CLASSIFICATION_CLASSES,
    ClassificationParseError,
    ClassificationType,
    CpcClassification,
    LocarnoClassification,
    UspcClassification,
    create_classification,
    get_by_type,
    group_by_type,
    try_create_classification,
)


@pytest.fixture
def mixed():
    return [
        create_classification("H04N21/2343", ClassificationType.CPC),
        create_classification("345/156", ClassificationType.USPC),
        create_classification("G06F3/0482", ClassificationType.CPC),
        create_classification("14-01", ClassificationType.LOCARNO),
    ]


class TestCreateClassification:
    """Construction by taxonomy."""

    def test_every_type_has_a_class(self):
        assert set(CLASSIFICATION_CLASSES) == set(ClassificationType)

    @pytest.mark.parametrize(
        ("classification_type", "text", "cls"),
        [
            (ClassificationType.CPC, "H04N", CpcClassification),
            (ClassificationType.USPC, "345", UspcClassification),
            (ClassificationType.LOCARNO, "14", LocarnoClassification),
        ],
    )
    def test_creates_parsed_instance(self, classification_type, text, cls):
        classification = create_classification(
            text, classification_type, is_inventive_or_main=True
        )

        assert isinstance(classification, cls)
        assert classification.is_parsed is True
        assert classification.is_inventive_or_main is True

    def test_invalid_code_raises(self):
        with pytest.raises(ClassificationParseError) as exc_info:
            create_classification("not-a-code", ClassificationType.LOCARNO)

        assert exc_info.value.details["classification_type"] == "Locarno"

    def test_try_create_keeps_failed_instance(self):
        """Bad input yields an inspectable failed instance."""
        classification = try_create_classification("???", ClassificationType.USPC)

        assert classification.parse_failed is True
        assert classification.get_text_normalized() == "???__parseFailed"


class TestGetByType:
    """Filtering a mixed collection by taxonomy."""

    def test_preserves_order(self, mixed):
        cpc = get_by_type(mixed, ClassificationType.CPC)

        assert [c.get_text_normalized() for c in cpc] == [
            "H04N21/2343",
            "G06F3/0482",
        ]

    def test_no_match_returns_empty(self, mixed):
        assert get_by_type(mixed[:1], ClassificationType.LOCARNO) == []

    def test_accepts_any_iterable(self, mixed):
        result = get_by_type(iter(mixed), ClassificationType.USPC)
        assert [str(c) for c in result] == ["345/156"]

    def test_group_by_type_has_every_key(self, mixed):
        groups = group_by_type(mixed[:2])

        assert set(groups) == set(ClassificationType)
        assert groups[ClassificationType.LOCARNO] == []
        assert len(groups[ClassificationType.CPC]) == 1
