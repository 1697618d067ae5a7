"""Serialize full text to fulltext.xml markup."""

from lxml import etree
from lxml.builder import E

from schemas.fulltext import FullText, Page


def serialize_fulltext(fulltext: FullText) -> bytes:
    """Render a FullText as a UTF-8 ``<pages>`` document.

    Each page carries ``number`` and ``sequence`` attributes and a single
    ``<text>`` child holding its ``<word coords="a,b,c,d">`` elements.

    Args:
        fulltext: Paginated full text

    Returns:
        Pretty-printed XML with declaration
    """
    root = E.pages(*(_page(page) for page in fulltext.pages))
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    )


def _page(page: Page) -> etree._Element:
    return E.page(
        E.text(
            *(E.word(word.text, coords=str(word.coordinates)) for word in page.words)
        ),
        number=str(page.number),
        sequence=str(page.sequence),
    )
