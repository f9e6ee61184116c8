"""Patent classification parsing and corpus matching."""

__version__ = "0.1.0"
