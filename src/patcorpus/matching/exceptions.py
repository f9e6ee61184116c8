"""Matching exceptions."""

from patcorpus.domain.shared.exceptions import BusinessRuleViolation, ErrorCode


class PredicateCompilationError(BusinessRuleViolation):
    """Raised when a classification cannot be turned into a safe predicate.

    Fatal to matcher setup: a partially compiled predicate set would
    silently change what the corpus contains.
    """

    def __init__(self, reason: str, classification: str | None = None) -> None:
        subject = f" for {classification!r}" if classification else ""
        super().__init__(
            message=f"Cannot compile predicate{subject}: {reason}",
            code=ErrorCode.PREDICATE_COMPILATION_FAILED,
            details={"classification": classification, "reason": reason},
        )
        self.reason = reason


class MatcherNotReadyError(BusinessRuleViolation):
    """Raised when matching is attempted before setup() or on()."""

    def __init__(self, missing: str) -> None:
        super().__init__(
            message=f"Matcher not ready: call {missing} first",
            code=ErrorCode.MATCHER_NOT_READY,
            details={"missing": missing},
        )
