"""Full-text schemas.

A FullText is the logical content of one ``fulltext.xml`` document: an
ordered list of pages, each holding positioned words.

Page numbers model the printed numbering of a scan that may start part way
through a document, while sequence numbers always count scan order from 1.
"""

from pydantic import BaseModel, Field, model_validator


class Coordinates(BaseModel):
    """Bounding box of a word on its page.

    Attributes:
        x1: First corner, horizontal
        y1: First corner, vertical
        x2: Second corner, horizontal
        y2: Second corner, vertical
    """

    x1: int
    y1: int
    x2: int
    y2: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.x1, self.y1, self.x2, self.y2

    def __str__(self) -> str:
        return ",".join(str(value) for value in self.as_tuple())


class Word(BaseModel):
    """A single positioned word.

    Attributes:
        text: Word content
        coordinates: Bounding box on the page
    """

    text: str
    coordinates: Coordinates


class Page(BaseModel):
    """A page of full text.

    Attributes:
        number: Printed page number
        sequence: 1-based position of the page in the scan
        words: Words on the page, in reading order
    """

    number: int = Field(ge=1)
    sequence: int = Field(ge=1)
    words: list[Word] = Field(min_length=1)


class FullText(BaseModel):
    """Paginated full text of one publication.

    Attributes:
        pages: Pages in scan order (at least one)
    """

    pages: list[Page] = Field(min_length=1)

    @model_validator(mode="after")
    def _pages_are_contiguous(self) -> "FullText":
        first_number = self.pages[0].number
        for index, page in enumerate(self.pages):
            if page.sequence != index + 1:
                raise ValueError(
                    f"page at position {index} has sequence {page.sequence}, "
                    f"expected {index + 1}"
                )
            if page.number != first_number + index:
                raise ValueError(
                    f"page at position {index} has number {page.number}, "
                    f"expected {first_number + index}"
                )
        return self

    @property
    def word_count(self) -> int:
        return sum(len(page.words) for page in self.pages)
