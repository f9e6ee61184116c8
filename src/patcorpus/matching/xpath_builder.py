"""Compile classifications into XPath predicates over patent XML.

One expression per classification, selecting the taxonomy's node in the
document schema::

    //classifications-cpc/main-cpc/classification-cpc[section/text()='H'
        and class/text()='04' and subclass/text()='N'
        and main-group[starts-with(.,'21')]]
    //classification-national/main-classification[starts-with(normalize-space(.),'345')]
    //classification-locarno/main-classification[starts-with(
        translate(normalize-space(.),'-/ ',''),'1401')]

Compilation is pure: the same classification always yields the same text.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from patcorpus.domain.classification import (
    ClassificationType,
    ClassificationValidationError,
    CpcClassification,
    LocarnoClassification,
    PatentClassification,
    UspcClassification,
)
from patcorpus.matching.exceptions import PredicateCompilationError

CPC_NODE_PATH = "//classifications-cpc/main-cpc/classification-cpc"
USPC_NODE_PATH = "//classification-national/main-classification"
LOCARNO_NODE_PATH = "//classification-locarno/main-classification"

# Literal values are embedded between single quotes
SAFE_LITERAL = re.compile(r"[A-Za-z0-9./ -]+")


def xpath_literal(value: str | None, field: str = "value") -> str:
    """Quote ``value`` as an XPath string literal, rejecting unsafe content."""
    if not value:
        raise PredicateCompilationError(f"empty {field}")
    if not SAFE_LITERAL.fullmatch(value):
        raise PredicateCompilationError(f"unsafe characters in {field}: {value!r}")
    return f"'{value}'"


def ensure_compilable(classification: PatentClassification) -> None:
    """Raise PredicateCompilationError unless parsed and valid."""
    if not classification.is_parsed:
        raise PredicateCompilationError(
            "classification is not parsed", classification.get_text_normalized()
        )
    try:
        classification.validate()
    except ClassificationValidationError as e:
        raise PredicateCompilationError(
            e.message, classification.get_text_normalized()
        ) from e


def _literal(
    classification: PatentClassification, field: str, value: str | None
) -> str:
    try:
        return xpath_literal(value, field)
    except PredicateCompilationError as e:
        raise PredicateCompilationError(
            e.reason, classification.get_text_normalized()
        ) from e


def build_cpc_xpath(cpc: CpcClassification) -> str:
    """CPC predicate: exact section, class and subclass, main group prefix.

    The subgroup is not matched, so a wanted main group also selects all
    of its subgroups.
    """
    ensure_compilable(cpc)
    section = _literal(cpc, "section", cpc.section)
    main_class = _literal(cpc, "class", cpc.main_class)
    sub_class = _literal(cpc, "subclass", cpc.sub_class)
    main_group = _literal(cpc, "main-group", cpc.main_group)
    return (
        f"{CPC_NODE_PATH}["
        f"section/text()={section}"
        f" and class/text()={main_class}"
        f" and subclass/text()={sub_class}"
        f" and main-group[starts-with(.,{main_group})]"
        "]"
    )


def build_uspc_xpath(uspc: UspcClassification) -> str:
    """USPC predicate: main classification text starts with the main class.

    Matches on the patent's own classification; the subclass is ignored.
    Grant XML does not zero-pad main classes, so ``073`` compiles to ``'73'``.
    """
    ensure_compilable(uspc)
    main_class = _literal(uspc, "main class", uspc.document_main_class)
    return f"{USPC_NODE_PATH}[starts-with(normalize-space(.),{main_class})]"


def build_locarno_xpath(locarno: LocarnoClassification) -> str:
    """Locarno predicate: separator-insensitive prefix on ``MMSS``."""
    ensure_compilable(locarno)
    code = _literal(
        locarno, "main/sub class", f"{locarno.main_class}{locarno.sub_class}"
    )
    return (
        f"{LOCARNO_NODE_PATH}"
        f"[starts-with(translate(normalize-space(.),'-/ ',''),{code})]"
    )


XPATH_BUILDERS: dict[ClassificationType, Callable[..., str]] = {
    ClassificationType.CPC: build_cpc_xpath,
    ClassificationType.USPC: build_uspc_xpath,
    ClassificationType.LOCARNO: build_locarno_xpath,
}


def build_xpath(classification: PatentClassification) -> str:
    """Dispatch to the builder of the classification's taxonomy."""
    return XPATH_BUILDERS[classification.classification_type](classification)
