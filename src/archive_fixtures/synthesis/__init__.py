"""Random document synthesis."""

from .builder import Builder
from .fulltext_builder import FullTextBuilder
from .primitives import RandomPrimitives
from .publication_builder import PublicationBuilder

__all__ = [
    "Builder",
    "RandomPrimitives",
    "PublicationBuilder",
    "FullTextBuilder",
]
