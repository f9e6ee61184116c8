"""Build a patent corpus: filter bulk documents by classification."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from patcorpus.infrastructure.bulk_reader import iter_bulk_documents
from patcorpus.infrastructure.partition_writer import PartitionFileWriter
from patcorpus.matching.corpus_match import CorpusMatch
from patcorpus.matching.document import (
    detect_patent_type,
    document_id,
    parse_document,
)

logger = logging.getLogger(__name__)


@dataclass
class CorpusStats:
    """Counters for one corpus build."""

    total: int = 0
    matched: int = 0
    skipped: int = 0  # empty or malformed documents
    by_pattern: Counter[str] = field(default_factory=Counter)

    @property
    def rejected(self) -> int:
        return self.total - self.matched - self.skipped


class CorpusBuilder:
    """Feed documents through a CorpusMatch and write the accepted ones."""

    def __init__(self, match: CorpusMatch, writer: PartitionFileWriter):
        self._match = match
        self._writer = writer

    def process(
        self,
        documents: Iterable[str],
        stats: CorpusStats | None = None,
    ) -> CorpusStats:
        """Evaluate each document, writing matches to the partitioned sink.

        Raises
        ------
        PredicateCompilationError
            From matcher setup, before any document is read.
        """
        self._match.setup()
        stats = stats or CorpusStats()

        for document in documents:
            stats.total += 1
            root = parse_document(document)
            if root is None:
                stats.skipped += 1
                continue

            result = self._match.on(root, detect_patent_type(root)).evaluate()
            if not result.matched:
                continue

            stats.matched += 1
            stats.by_pattern[str(result.pattern)] += 1
            logger.debug("Matched %s on %s", document_id(root), result.pattern)
            self._writer.write(document)

        return stats

    def build(self, paths: Iterable[Path]) -> CorpusStats:
        """Process every bulk file in ``paths`` into one corpus."""
        stats = CorpusStats()
        for path in paths:
            before = stats.matched
            self.process(iter_bulk_documents(path), stats)
            logger.info(
                "%s: %d matched (%d documents so far)",
                Path(path).name,
                stats.matched - before,
                stats.total,
            )
        return stats
