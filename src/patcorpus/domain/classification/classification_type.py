"""Classification taxonomy enumeration."""

from enum import Enum


class ClassificationType(Enum):
    """Patent classification schemes understood by the matcher."""

    CPC = "cpc"  # Cooperative Patent Classification
    USPC = "uspc"  # United States Patent Classification
    LOCARNO = "locarno"  # International design classification

    @property
    def label(self) -> str:
        return self.name if self is not ClassificationType.LOCARNO else "Locarno"
