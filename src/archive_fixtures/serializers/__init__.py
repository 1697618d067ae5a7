"""Serializers from document models to XML."""

from .fulltext_xml import serialize_fulltext
from .publication_xml import serialize_publication

__all__ = ["serialize_publication", "serialize_fulltext"]
