"""Schema definitions for archive fixtures."""

from .archive import ArchiveEntry, GenerationReport
from .fulltext import Coordinates, FullText, Page, Word
from .publication import Author, BirthDate, Publication, Title

__all__ = [
    "ArchiveEntry",
    "Author",
    "BirthDate",
    "Coordinates",
    "FullText",
    "GenerationReport",
    "Page",
    "Publication",
    "Title",
    "Word",
]
