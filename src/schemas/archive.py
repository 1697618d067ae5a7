"""Archive layout schemas.

Directory structure written for each publication:
    {root}/
    └── publication-{identifier}/
        ├── publication.xml       # Publication
        ├── fulltext.xml          # FullText
        └── images/
            └── {identifier}.tif  # empty placeholder
"""

from pydantic import BaseModel


class ArchiveEntry(BaseModel):
    """On-disk footprint of one generated publication.

    Paths are relative to the output root.

    Attributes:
        identifier: Publication identifier
        directory: Publication directory
        publication_path: Metadata document
        fulltext_path: Full-text document
        image_path: Placeholder image
        page_count: Number of pages written to the full text
    """

    identifier: int
    directory: str
    publication_path: str
    fulltext_path: str
    image_path: str
    page_count: int = 0


class GenerationReport(BaseModel):
    """Outcome of one generation run.

    Attributes:
        requested: Number of publications asked for
        entries: Publications that were written completely
        errors: Messages for publications that failed
    """

    requested: int
    entries: list[ArchiveEntry] = []
    errors: list[str] = []

    @property
    def written(self) -> int:
        return len(self.entries)
