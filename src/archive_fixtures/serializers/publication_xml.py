"""Serialize publication metadata to publication.xml markup."""

from lxml import etree
from lxml.builder import E

from schemas.publication import Author, Publication


def serialize_publication(publication: Publication) -> bytes:
    """Render a Publication as a UTF-8 ``<publication>`` document.

    Args:
        publication: Publication metadata

    Returns:
        Pretty-printed XML with declaration
    """
    root = E.publication(
        E.identifier(str(publication.identifier)),
        E.authors(*(_author(author) for author in publication.authors)),
        E.title(
            E.longtitle(publication.title.long_title),
            E.shorttitle(publication.title.short_title),
        ),
        E.subjects(*(E.subject(subject) for subject in publication.subjects)),
    )
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    )


def _author(author: Author) -> etree._Element:
    return E.author(
        E.authorname(author.name),
        E.dob(author.date_of_birth.formatted()),
    )
