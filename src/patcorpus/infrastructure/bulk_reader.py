"""Read USPTO bulk data files.

A bulk file concatenates many XML documents, each starting with its own
``<?xml ...?>`` declaration. Weekly archives ship the file inside a zip.
"""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

XML_DECLARATION = "<?xml"


def split_documents(lines: Iterable[str]) -> Iterator[str]:
    """Group lines into documents, starting a new one at each XML declaration."""
    buffer: list[str] = []
    for line in lines:
        if line.lstrip().startswith(XML_DECLARATION) and buffer:
            document = "".join(buffer)
            if document.strip():
                yield document
            buffer = []
        buffer.append(line)

    document = "".join(buffer)
    if document.strip():
        yield document


def iter_bulk_documents(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the XML documents of a bulk file (``.xml`` or ``.zip``)."""
    path = Path(path)
    if path.suffix.lower() == ".zip":
        with zipfile.ZipFile(path) as archive:
            members = [n for n in archive.namelist() if n.lower().endswith(".xml")]
            logger.info("Reading %s (%d xml members)", path.name, len(members))
            for name in members:
                with archive.open(name) as raw:
                    text = io.TextIOWrapper(raw, encoding=encoding)
                    yield from split_documents(text)
        return

    logger.info("Reading %s", path.name)
    with open(path, encoding=encoding) as f:
        yield from split_documents(f)
