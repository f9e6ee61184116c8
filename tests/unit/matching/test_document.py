"""Unit tests for patent XML document access."""

import logging

import pytest
from lxml import etree

from patcorpus.domain.classification import ClassificationType, get_by_type
from patcorpus.domain.document import PatentType
from patcorpus.matching import (
    detect_patent_type,
    document_id,
    parse_document,
    read_classifications,
)


class TestParseDocument:
    """Document inputs of every accepted shape."""

    def test_text(self, grant_xml):
        root = parse_document(grant_xml)

        assert root is not None
        assert root.tag == "us-patent-grant"

    def test_bytes(self, grant_xml):
        assert parse_document(grant_xml.encode("utf-8")).tag == "us-patent-grant"

    def test_parsed_element_is_returned_as_is(self, grant_xml):
        root = parse_document(grant_xml)
        assert parse_document(root) is root

    def test_element_tree(self, grant_xml):
        tree = etree.ElementTree(parse_document(grant_xml))
        assert parse_document(tree).tag == "us-patent-grant"

    @pytest.mark.parametrize("document", ["", "   \n", b""])
    def test_empty(self, document, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_document(document) is None

        assert "empty document" in caplog.text

    def test_malformed(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_document("<a><b></a>") is None

        assert "malformed document" in caplog.text

    def test_entities_are_not_expanded(self):
        """Internal entity declarations are left unresolved."""
        document = (
            '<?xml version="1.0"?>\n'
            '<!DOCTYPE doc [<!ENTITY secret "expanded">]>\n'
            "<doc>&secret;</doc>"
        )
        root = parse_document(document)

        assert root is not None
        assert "expanded" not in (root.text or "")


class TestDetectPatentType:
    """appl-type attribute mapping."""

    def test_utility(self, grant_xml):
        assert detect_patent_type(parse_document(grant_xml)) is PatentType.UTILITY

    def test_design(self, design_xml):
        assert detect_patent_type(parse_document(design_xml)) is PatentType.DESIGN

    def test_unknown_value(self, grant_xml_factory):
        root = parse_document(grant_xml_factory(appl_type="something-new"))
        assert detect_patent_type(root) is PatentType.UNDEFINED

    def test_missing_reference(self):
        assert detect_patent_type(parse_document("<doc/>")) is PatentType.UNDEFINED


class TestDocumentId:
    def test_publication_number(self, grant_xml):
        assert document_id(parse_document(grant_xml)) == "09000001"

    def test_missing(self):
        assert document_id(parse_document("<doc/>")) is None


class TestReadClassifications:
    """Classification extraction from the bibliographic data."""

    def test_utility_grant(self, grant_xml_factory):
        root = parse_document(
            grant_xml_factory(
                further_cpc=("G", "06", "F", "3", "0482"),
                further_uspc="725/39",
            )
        )
        found = read_classifications(root)

        cpc = get_by_type(found, ClassificationType.CPC)
        uspc = get_by_type(found, ClassificationType.USPC)
        assert [str(c) for c in cpc] == ["H04N21/2343", "G06F3/0482"]
        assert [c.is_inventive_or_main for c in cpc] == [True, False]
        assert [str(c) for c in uspc] == ["345/156", "725/039"]
        assert [c.is_inventive_or_main for c in uspc] == [True, False]

    def test_design_grant(self, design_xml):
        found = read_classifications(parse_document(design_xml))

        assert [str(c) for c in found] == ["D14/341", "14-01"]
        assert found[1].classification_type is ClassificationType.LOCARNO

    def test_fixed_width_uspc(self, grant_xml_factory):
        root = parse_document(grant_xml_factory(cpc=None, uspc=" 73862.041"))

        assert [str(c) for c in read_classifications(root)] == ["073/862.041"]

    def test_unparsable_codes_are_dropped(self, grant_xml_factory):
        root = parse_document(grant_xml_factory(cpc=None, uspc="???"))
        assert read_classifications(root) == []

    def test_no_classifications(self):
        assert read_classifications(parse_document("<doc/>")) == []
