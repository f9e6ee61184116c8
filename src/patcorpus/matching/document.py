"""Patent XML document access.

Documents arrive as text, bytes or already parsed lxml trees. Text is parsed
with a hardened parser: no DTD loading, no entity resolution, no network.
"""

from __future__ import annotations

import logging
from typing import Union

from lxml import etree

from patcorpus.domain.classification import (
    ClassificationType,
    PatentClassification,
    try_create_classification,
)
from patcorpus.domain.document import PatentType

logger = logging.getLogger(__name__)

Document = Union[str, bytes, etree._Element, etree._ElementTree]

CPC_NODES = (
    ".//classifications-cpc/main-cpc/classification-cpc",
    ".//classifications-cpc/further-cpc/classification-cpc",
)
USPC_MAIN = ".//classification-national/main-classification"
USPC_FURTHER = ".//classification-national/further-classification"
LOCARNO_MAIN = ".//classification-locarno/main-classification"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
        huge_tree=True,
    )


def parse_document(document: Document) -> etree._Element | None:
    """Return the root element of ``document`` or None if it is not well formed."""
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    if isinstance(document, etree._Element):
        return document

    data = document.encode("utf-8") if isinstance(document, str) else document
    if not data or not data.strip():
        logger.warning("Skipping empty document")
        return None
    try:
        return etree.fromstring(data, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        logger.warning("Skipping malformed document: %s", e)
        return None


def detect_patent_type(root: etree._Element) -> PatentType:
    """Read ``application-reference/@appl-type``."""
    reference = root.find(".//application-reference")
    if reference is None:
        return PatentType.UNDEFINED
    return PatentType.from_appl_type(reference.get("appl-type"))


def document_id(root: etree._Element) -> str | None:
    """Publication number (``publication-reference//doc-number``), if present."""
    number = root.findtext(".//publication-reference/document-id/doc-number")
    return number.strip() if number else None


def read_classifications(root: etree._Element) -> list[PatentClassification]:
    """Collect the parsed CPC, USPC and Locarno classifications of a document.

    Codes that do not parse are logged and left out.
    """
    found: list[PatentClassification] = []

    for path in CPC_NODES:
        is_main = "/main-cpc/" in path
        for node in root.iterfind(path):
            text = _cpc_text(node)
            if text:
                found.append(
                    try_create_classification(text, ClassificationType.CPC, is_main)
                )

    for path, is_main in ((USPC_MAIN, True), (USPC_FURTHER, False)):
        for node in root.iterfind(path):
            if node.text and node.text.strip():
                found.append(
                    try_create_classification(
                        node.text, ClassificationType.USPC, is_main
                    )
                )

    for node in root.iterfind(LOCARNO_MAIN):
        if node.text and node.text.strip():
            found.append(
                try_create_classification(node.text, ClassificationType.LOCARNO, True)
            )

    parsed = [c for c in found if c.is_parsed]
    if len(parsed) < len(found):
        logger.debug(
            "Dropped %d unparsable classifications", len(found) - len(parsed)
        )
    return parsed


def _cpc_text(node: etree._Element) -> str:
    fields = [
        (node.findtext(name) or "").strip()
        for name in ("section", "class", "subclass", "main-group")
    ]
    if not all(fields):
        return ""
    subgroup = (node.findtext("subgroup") or "").strip()
    text = "".join(fields)
    return f"{text}/{subgroup}" if subgroup else text
