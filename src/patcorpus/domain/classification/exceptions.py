"""Classification domain exceptions."""

from patcorpus.domain.shared.exceptions import ErrorCode, ValidationError


class ClassificationParseError(ValidationError):
    """Raised when raw classification text matches no accepted grammar form."""

    def __init__(self, classification_type: str, text: str) -> None:
        super().__init__(
            message=f"Failed to parse {classification_type} classification: {text!r}",
            code=ErrorCode.CLASSIFICATION_PARSE_FAILED,
            details={"classification_type": classification_type, "text": text},
        )
        self.text = text


class ClassificationValidationError(ValidationError):
    """Raised when a parsed classification misses a mandatory segment."""

    def __init__(self, classification_type: str, field: str, text: str) -> None:
        super().__init__(
            message=f"Invalid {classification_type} classification {text!r}: "
            f"missing {field}",
            code=ErrorCode.CLASSIFICATION_INVALID,
            details={
                "classification_type": classification_type,
                "field": field,
                "text": text,
            },
        )
        self.field = field
