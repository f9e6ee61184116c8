"""Unit tests for bulk file reading."""

import zipfile

from patcorpus.infrastructure import iter_bulk_documents, split_documents


class TestSplitDocuments:
    """Concatenated XML documents split at declarations."""

    def test_splits_at_declaration(self):
        text = (
            '<?xml version="1.0"?>\n<a>1</a>\n'
            '<?xml version="1.0"?>\n<a>2</a>\n'
        )
        documents = list(split_documents(text.splitlines(keepends=True)))

        assert documents == [
            '<?xml version="1.0"?>\n<a>1</a>\n',
            '<?xml version="1.0"?>\n<a>2</a>\n',
        ]

    def test_skips_blank_documents(self):
        lines = ["\n", "  \n", '<?xml version="1.0"?>\n', "<a/>\n"]
        assert list(split_documents(lines)) == ['<?xml version="1.0"?>\n<a/>\n']

    def test_empty_input(self):
        assert list(split_documents([])) == []


class TestIterBulkDocuments:
    """Plain and zipped bulk files."""

    def test_xml_file(self, tmp_path, grant_xml, design_xml):
        path = tmp_path / "ipg150407.xml"
        path.write_text(grant_xml + design_xml, encoding="utf-8")

        documents = list(iter_bulk_documents(path))

        assert documents == [grant_xml, design_xml]

    def test_zip_file(self, tmp_path, grant_xml, design_xml):
        path = tmp_path / "ipg150407.zip"
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("ipg150407.xml", grant_xml + design_xml)
            archive.writestr("README.txt", "not xml")

        documents = list(iter_bulk_documents(path))

        assert len(documents) == 2
        assert "<doc-number>D0700001</doc-number>" in documents[1]
