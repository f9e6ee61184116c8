"""Tests for the domain exception hierarchy."""

from patcorpus.domain.classification import (
    ClassificationParseError,
    ClassificationValidationError,
)
from patcorpus.domain.shared import (
    BusinessRuleViolation,
    DomainException,
    ErrorCode,
    ValidationError,
)
from patcorpus.matching import MatcherNotReadyError, PredicateCompilationError


class TestDomainExceptions:
    """Error codes and details."""

    def test_parse_error(self):
        error = ClassificationParseError("CPC", "H4N")

        assert isinstance(error, ValidationError)
        assert error.code is ErrorCode.CLASSIFICATION_PARSE_FAILED
        assert error.details == {"classification_type": "CPC", "text": "H4N"}
        assert str(error) == "Failed to parse CPC classification: 'H4N'"

    def test_validation_error(self):
        error = ClassificationValidationError("USPC", "main_class", "")

        assert isinstance(error, DomainException)
        assert error.field == "main_class"
        assert error.code is ErrorCode.CLASSIFICATION_INVALID

    def test_predicate_compilation_error(self):
        error = PredicateCompilationError("empty main-group", "H04N")

        assert isinstance(error, BusinessRuleViolation)
        assert error.reason == "empty main-group"
        assert str(error) == "Cannot compile predicate for 'H04N': empty main-group"

    def test_predicate_compilation_error_without_subject(self):
        assert str(PredicateCompilationError("empty section")) == (
            "Cannot compile predicate: empty section"
        )

    def test_matcher_not_ready(self):
        error = MatcherNotReadyError("setup()")

        assert error.code is ErrorCode.MATCHER_NOT_READY
        assert "call setup() first" in str(error)
        assert "MATCHER_NOT_READY" in repr(error)
