"""File based document source and output sink."""

from patcorpus.infrastructure.bulk_reader import iter_bulk_documents, split_documents
from patcorpus.infrastructure.partition_writer import (
    DefaultPartitionPredicate,
    PartitionFileWriter,
    PartitionPredicate,
)

__all__ = [
    "DefaultPartitionPredicate",
    "PartitionFileWriter",
    "PartitionPredicate",
    "iter_bulk_documents",
    "split_documents",
]
