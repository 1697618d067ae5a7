"""Bounded random generators used by the document builders.

All bounds are inclusive at both ends. The random source is injected so a
seeded ``random.Random`` yields reproducible fixtures; without one, each
instance draws from its own unseeded generator.
"""

import random

from archive_fixtures.config import SynthesisLimits
from schemas.fulltext import Coordinates
from schemas.publication import BirthDate

# Printable ASCII without the space character
TEXT_FIRST_CODE_POINT = 33
TEXT_LAST_CODE_POINT = 126


class RandomPrimitives:
    """Bounded integer, text, date and coordinate generators.

    Attributes:
        rng: Underlying random source
        limits: Bounds for birth years and coordinates
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        limits: SynthesisLimits | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize the generators.

        Args:
            rng: Random source to draw from. Takes precedence over ``seed``.
            limits: Synthesis limits (default: SynthesisLimits())
            seed: Seed for a new random source when ``rng`` is not given
        """
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.limits = limits or SynthesisLimits()

    def random_int(self, minimum: int, maximum: int) -> int:
        """Return a uniformly chosen integer in [minimum, maximum].

        Raises:
            ValueError: If maximum is less than minimum
        """
        if maximum < minimum:
            raise ValueError(f"Empty range: maximum {maximum} < minimum {minimum}")
        return self.rng.randint(minimum, maximum)

    def random_in(self, bounds: tuple[int, int]) -> int:
        """Return a uniformly chosen integer within an inclusive (min, max) pair."""
        return self.random_int(*bounds)

    def random_text(self, length: int) -> str:
        """Return ``length`` characters drawn from printable ASCII (33-126).

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError(f"Text length must not be negative, got {length}")
        return "".join(
            chr(self.random_int(TEXT_FIRST_CODE_POINT, TEXT_LAST_CODE_POINT))
            for _ in range(length)
        )

    def random_date(self) -> BirthDate:
        """Return a date with independently drawn day, month and year.

        Day and month are not checked against each other, so the result
        may not exist on a real calendar.
        """
        day = self.random_int(1, 31)
        month = self.random_int(1, 12)
        year = self.random_in(self.limits.birth_year)
        return BirthDate(day=day, month=month, year=year)

    def random_coordinates(self) -> Coordinates:
        """Return a bounding box of four independent coordinates."""
        low, high = self.limits.coordinate
        return Coordinates(
            x1=self.random_int(low, high),
            y1=self.random_int(low, high),
            x2=self.random_int(low, high),
            y2=self.random_int(low, high),
        )
