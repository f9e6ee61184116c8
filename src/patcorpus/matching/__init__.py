"""Predicate compilation and document matching."""

from patcorpus.matching.corpus_match import (
    ClassificationMatch,
    CorpusMatch,
    MatchClassificationContained,
    MatchClassificationXPath,
)
from patcorpus.matching.document import (
    Document,
    detect_patent_type,
    document_id,
    parse_document,
    read_classifications,
)
from patcorpus.matching.exceptions import (
    MatcherNotReadyError,
    PredicateCompilationError,
)
from patcorpus.matching.pattern import ContainmentPattern, Pattern, XPathPattern
from patcorpus.matching.pattern_matcher import NO_MATCH, MatchResult, PatternMatcher
from patcorpus.matching.xpath_builder import (
    build_cpc_xpath,
    build_locarno_xpath,
    build_uspc_xpath,
    build_xpath,
    xpath_literal,
)

__all__ = [
    "NO_MATCH",
    "ClassificationMatch",
    "ContainmentPattern",
    "CorpusMatch",
    "Document",
    "MatchClassificationContained",
    "MatchClassificationXPath",
    "MatchResult",
    "MatcherNotReadyError",
    "Pattern",
    "PatternMatcher",
    "PredicateCompilationError",
    "XPathPattern",
    "build_cpc_xpath",
    "build_locarno_xpath",
    "build_uspc_xpath",
    "build_xpath",
    "detect_patent_type",
    "document_id",
    "parse_document",
    "read_classifications",
    "xpath_literal",
]
