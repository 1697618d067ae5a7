"""Publication metadata schemas.

A Publication is the logical content of one ``publication.xml`` document:

    publication/
    ├── identifier
    ├── authors/author*       # authorname, dob
    ├── title                 # longtitle, shorttitle
    └── subjects/subject*
"""

from pydantic import BaseModel, Field, model_validator


class BirthDate(BaseModel):
    """An author's date of birth.

    Day and month are range-checked independently and never cross-checked
    against real month lengths, so dates such as 31-02 are allowed.

    Attributes:
        day: Day of month (1-31)
        month: Month (1-12)
        year: Four-digit year
    """

    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1, le=9999)

    def formatted(self) -> str:
        """Return the date as DD-MM-YYYY."""
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"


class Author(BaseModel):
    """A publication author.

    Attributes:
        name: Author name
        date_of_birth: Author's date of birth
    """

    name: str
    date_of_birth: BirthDate


class Title(BaseModel):
    """Long and short title of a publication.

    Attributes:
        long_title: Full title
        short_title: Prefix of the long title
    """

    long_title: str
    short_title: str

    @model_validator(mode="after")
    def _short_title_is_prefix(self) -> "Title":
        if len(self.short_title) > len(self.long_title):
            raise ValueError("short_title is longer than long_title")
        if not self.long_title.startswith(self.short_title):
            raise ValueError("short_title must be a prefix of long_title")
        return self


class Publication(BaseModel):
    """Metadata for one generated publication.

    Attributes:
        identifier: Positive, run-unique publication identifier
        authors: Ordered list of authors (at least one)
        title: Publication title
        subjects: Ordered list of subject terms (at least one)
    """

    identifier: int = Field(ge=1)
    authors: list[Author] = Field(min_length=1)
    title: Title
    subjects: list[str] = Field(min_length=1)
