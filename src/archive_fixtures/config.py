"""Configuration for the document synthesis model."""

import json
from pathlib import Path

from pydantic import BaseModel, field_validator

PUBLICATION_DIR_PREFIX = "publication-"
PUBLICATION_FILENAME = "publication.xml"
FULLTEXT_FILENAME = "fulltext.xml"
IMAGES_DIRNAME = "images"
IMAGE_EXTENSION = ".tif"

Range = tuple[int, int]


class SynthesisLimits(BaseModel):
    """Inclusive (min, max) bounds used when synthesizing documents.

    The defaults describe the standard fixture shape; tests and the
    ``--limits`` option may narrow them, e.g. to keep full texts small.
    """

    author_count: Range = (1, 5)
    author_name_length: Range = (1, 30)
    long_title_length: Range = (10, 100)
    short_title_length: Range = (1, 10)
    subject_count: Range = (1, 10)
    subject_length: Range = (1, 15)
    page_count: Range = (1, 1000)
    words_per_page: Range = (100, 200)
    word_length: Range = (1, 15)
    coordinate: Range = (1, 300)
    birth_year: Range = (1000, 2000)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("*")
    @classmethod
    def _check_range(cls, value: Range, info) -> Range:
        low, high = value
        if low < 1:
            raise ValueError(f"{info.field_name} minimum must be at least 1, got {low}")
        if high < low:
            raise ValueError(f"{info.field_name} maximum {high} is below minimum {low}")
        return value

    @field_validator("birth_year")
    @classmethod
    def _check_year(cls, value: Range) -> Range:
        if value[1] > 9999:
            raise ValueError("birth_year must fit in four digits")
        return value


def load_limits(path: Path) -> SynthesisLimits:
    """Load synthesis limits from a JSON file.

    Keys that are absent keep their defaults.

    Args:
        path: Path to a JSON object mapping limit names to [min, max] pairs

    Returns:
        Validated SynthesisLimits
    """
    data = json.loads(path.read_text())
    return SynthesisLimits.model_validate(data)
