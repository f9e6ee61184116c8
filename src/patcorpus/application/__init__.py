"""Application services."""

from patcorpus.application.corpus_builder import CorpusBuilder, CorpusStats

__all__ = ["CorpusBuilder", "CorpusStats"]
