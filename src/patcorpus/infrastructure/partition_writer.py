"""Buffered file writer which rolls over to a new file at a partition threshold."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import IO, Protocol

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


class PartitionPredicate(Protocol):
    """Decides when the current output file is full."""

    @property
    def is_partitioned(self) -> bool:
        """True if any limit is in force (output gets ``-partN`` names)."""
        ...

    def threshold_reached(self, record: str) -> bool:
        """True if ``record`` must go to a new file."""
        ...

    def add(self, record: str) -> None:
        """Account for a record written to the current file."""
        ...

    def reset_counts(self) -> None:
        ...


class DefaultPartitionPredicate:
    """Record-count and size based partitioning; a zero limit is disabled."""

    def __init__(
        self,
        record_limit: int = 0,
        size_limit_mb: int = 0,
        encoding: str = "utf-8",
    ):
        if record_limit < 0 or size_limit_mb < 0:
            msg = "Partition limits must not be negative"
            raise ValueError(msg)
        self.record_limit = record_limit
        self.size_limit_bytes = size_limit_mb * BYTES_PER_MB
        self._encoding = encoding
        self._records = 0
        self._bytes = 0

    @property
    def is_partitioned(self) -> bool:
        return bool(self.record_limit or self.size_limit_bytes)

    def threshold_reached(self, record: str) -> bool:
        # An empty file always takes the record, even an oversized one
        if self._records == 0:
            return False
        if self.record_limit and self._records >= self.record_limit:
            return True
        size = len(record.encode(self._encoding))
        return bool(
            self.size_limit_bytes and self._bytes + size > self.size_limit_bytes
        )

    def add(self, record: str) -> None:
        self._records += 1
        self._bytes += len(record.encode(self._encoding))

    def reset_counts(self) -> None:
        self._records = 0
        self._bytes = 0


class PartitionFileWriter:
    """Write records to ``<name>.<suffix>``, rolling over to ``<name>-partN.<suffix>``.

    The first file carries no part number; later files are numbered from 1.
    An optional header and footer are written at every file open and close.

    Use as a context manager so the last file gets its footer::

        with PartitionFileWriter(out_dir, "corpus", "xml", predicate) as writer:
            writer.write(xml_doc)
    """

    def __init__(  # NOQA: PLR0913
        self,
        output_dir: Path,
        file_name: str,
        file_suffix: str,
        predicate: PartitionPredicate | None = None,
        encoding: str = "utf-8",
        header: str | None = None,
        footer: str | None = None,
    ):
        self.output_dir = Path(output_dir)
        self.file_name = file_name
        self.file_suffix = file_suffix.lstrip(".")
        self.predicate = predicate or DefaultPartitionPredicate(encoding=encoding)
        self.encoding = encoding
        self.header = header
        self.footer = footer

        self._file: IO[str] | None = None
        self._file_part = 0
        self.files_written: list[Path] = []
        self.records_written = 0

    @classmethod
    def with_limits(  # NOQA: PLR0913
        cls,
        output_dir: Path,
        file_name: str,
        file_suffix: str,
        record_limit: int = 0,
        size_limit_mb: int = 0,
        encoding: str = "utf-8",
    ) -> PartitionFileWriter:
        """Writer using DefaultPartitionPredicate."""
        return cls(
            output_dir,
            file_name,
            file_suffix,
            DefaultPartitionPredicate(record_limit, size_limit_mb, encoding),
            encoding=encoding,
        )

    def write(self, record: str) -> None:
        file = self._file
        if file is None or self.predicate.threshold_reached(record):
            file = self._open_next()
        file.write(record)
        self.predicate.add(record)
        self.records_written += 1

    def _output_path(self) -> Path:
        name = self.file_name
        if self.predicate.is_partitioned and self._file_part > 0:
            name = f"{name}-part{self._file_part}"
        return self.output_dir / f"{name}.{self.file_suffix}"

    def _open_next(self) -> IO[str]:
        self.close()

        path = self._output_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Opening writer: %s", path)
        self._file = open(path, "w", encoding=self.encoding)  # NOQA: SIM115
        self.files_written.append(path)
        if self.header is not None:
            self._file.write(self.header)
        return self._file

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        if self.footer is not None:
            self._file.write(self.footer)
        self._file.close()
        self._file = None
        self._file_part += 1
        self.predicate.reset_counts()

    def __enter__(self) -> PartitionFileWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
