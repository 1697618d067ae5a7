"""Pytest fixtures for archive fixture tests."""

import random

import pytest

from archive_fixtures.config import SynthesisLimits
from archive_fixtures.synthesis import RandomPrimitives
from schemas.fulltext import Coordinates, FullText, Page, Word
from schemas.publication import Author, BirthDate, Publication, Title


@pytest.fixture
def rng():
    """Seeded random source so failures are reproducible."""
    return random.Random(20240115)


@pytest.fixture
def small_limits():
    """Limits that keep full texts small enough for end-to-end runs."""
    return SynthesisLimits(page_count=(1, 4), words_per_page=(1, 5))


@pytest.fixture
def primitives(rng):
    """RandomPrimitives over the seeded source with default limits."""
    return RandomPrimitives(rng=rng)


@pytest.fixture
def small_primitives(rng, small_limits):
    """RandomPrimitives over the seeded source with small limits."""
    return RandomPrimitives(rng=rng, limits=small_limits)


@pytest.fixture
def sample_publication():
    """Hand-written publication with characters that need escaping."""
    return Publication(
        identifier=7,
        authors=[
            Author(name="Ada<Lovelace>", date_of_birth=BirthDate(day=10, month=12, year=1815)),
            Author(name="C&B", date_of_birth=BirthDate(day=31, month=2, year=1000)),
        ],
        title=Title(long_title="A Treatise on Engines", short_title="A Treatise"),
        subjects=["mathematics", "engines"],
    )


@pytest.fixture
def sample_fulltext():
    """Two-page full text starting at printed page 12."""
    return FullText(
        pages=[
            Page(
                number=12,
                sequence=1,
                words=[
                    Word(text="Hello", coordinates=Coordinates(x1=1, y1=2, x2=30, y2=40)),
                    Word(text="World", coordinates=Coordinates(x1=35, y1=2, x2=70, y2=40)),
                ],
            ),
            Page(
                number=13,
                sequence=2,
                words=[
                    Word(text="a<b", coordinates=Coordinates(x1=300, y1=300, x2=1, y2=1)),
                ],
            ),
        ]
    )
