"""Patent document type enumeration."""

from enum import Enum


class PatentType(Enum):
    """Kinds of patent documents found in the bulk data."""

    UTILITY = "utility"
    DESIGN = "design"
    PLANT = "plant"
    REISSUE = "reissue"
    DEFENSIVE_PUBLICATION = "defensive-publication"
    SIR = "statutory-invention-registration"
    UNDEFINED = "undefined"

    @classmethod
    def from_appl_type(cls, value: str | None) -> "PatentType":
        """Map an ``appl-type`` attribute value, falling back to UNDEFINED."""
        if not value:
            return cls.UNDEFINED
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNDEFINED
