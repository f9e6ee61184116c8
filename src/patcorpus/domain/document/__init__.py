"""Patent document domain types."""

from patcorpus.domain.document.patent_type import PatentType

__all__ = ["PatentType"]
