"""Shared fixtures: sample USPTO grant documents and settings isolation."""

from collections.abc import Callable, Generator

import pytest

from patcorpus_config import clear_settings_cache

GRANT_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE us-patent-grant SYSTEM "us-patent-grant-v45-2014-04-03.dtd" [ ]>
<us-patent-grant lang="EN" dtd-version="v4.5 2014-04-03" country="US">
<us-bibliographic-data-grant>
<publication-reference>
<document-id>
<country>US</country>
<doc-number>{doc_number}</doc-number>
<kind>B2</kind>
<date>20150407</date>
</document-id>
</publication-reference>
<application-reference appl-type="{appl_type}">
<document-id>
<country>US</country>
<doc-number>13000001</doc-number>
<date>20120101</date>
</document-id>
</application-reference>
{classifications}
</us-bibliographic-data-grant>
</us-patent-grant>
"""

CPC_TEMPLATE = """<classification-cpc>
<cpc-version-indicator><date>20130101</date></cpc-version-indicator>
<section>{section}</section>
<class>{cls}</class>
<subclass>{subclass}</subclass>
<main-group>{main_group}</main-group>
<subgroup>{subgroup}</subgroup>
<symbol-position>F</symbol-position>
<classification-value>I</classification-value>
</classification-cpc>"""


def _cpc_node(code: tuple[str, str, str, str, str]) -> str:
    section, cls, subclass, main_group, subgroup = code
    return CPC_TEMPLATE.format(
        section=section,
        cls=cls,
        subclass=subclass,
        main_group=main_group,
        subgroup=subgroup,
    )


def make_grant_xml(  # NOQA: PLR0913
    cpc: tuple[str, str, str, str, str] | None = ("H", "04", "N", "21", "2343"),
    further_cpc: tuple[str, str, str, str, str] | None = None,
    uspc: str | None = "345/156",
    further_uspc: str | None = None,
    locarno: str | None = None,
    doc_number: str = "09000001",
    appl_type: str = "utility",
) -> str:
    parts: list[str] = []
    if cpc or further_cpc:
        parts.append("<classifications-cpc>")
        if cpc:
            parts.append(f"<main-cpc>\n{_cpc_node(cpc)}\n</main-cpc>")
        if further_cpc:
            parts.append(f"<further-cpc>\n{_cpc_node(further_cpc)}\n</further-cpc>")
        parts.append("</classifications-cpc>")
    if locarno:
        parts.append(
            "<classification-locarno><edition>10</edition>"
            f"<main-classification>{locarno}</main-classification>"
            "</classification-locarno>"
        )
    if uspc:
        further = (
            f"<further-classification>{further_uspc}</further-classification>"
            if further_uspc
            else ""
        )
        parts.append(
            "<classification-national><country>US</country>"
            f"<main-classification>{uspc}</main-classification>{further}"
            "</classification-national>"
        )
    return GRANT_TEMPLATE.format(
        doc_number=doc_number,
        appl_type=appl_type,
        classifications="\n".join(parts),
    )


@pytest.fixture
def grant_xml_factory() -> Callable[..., str]:
    """Build grant XML with chosen classifications."""
    return make_grant_xml


@pytest.fixture
def grant_xml() -> str:
    """Utility grant classified H04N 21/2343 (CPC) and 345/156 (USPC)."""
    return make_grant_xml()


@pytest.fixture
def design_xml() -> str:
    """Design grant classified Locarno 14-01 and USPC D14/341."""
    return make_grant_xml(
        cpc=None,
        uspc="D14341",
        locarno="1401",
        doc_number="D0700001",
        appl_type="design",
    )


@pytest.fixture(autouse=True)
def _isolated_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Keep PATCORPUS_* settings from leaking between tests."""
    monkeypatch.delenv("PATCORPUS_ENV_FILE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
