"""Publication metadata builder."""

import logging

from schemas.publication import Author, Publication, Title

from .builder import Builder

logger = logging.getLogger(__name__)


class PublicationBuilder(Builder):
    """Synthesize publication metadata.

    The PublicationBuilder:
    1. Draws between 1 and 5 authors, each with a random name and birth date
    2. Draws a long title and carves a short title out of its prefix
    3. Draws between 1 and 10 subject terms
    """

    def build(self, identifier: int) -> Publication:
        """Build the metadata for one publication.

        Args:
            identifier: Publication identifier

        Returns:
            Publication for the identifier

        Raises:
            ValueError: If identifier is not positive
        """
        self._check_identifier(identifier)

        authors = [
            self._build_author()
            for _ in range(self.primitives.random_in(self.limits.author_count))
        ]
        title = self._build_title()
        subjects = [
            self.primitives.random_text(
                self.primitives.random_in(self.limits.subject_length)
            )
            for _ in range(self.primitives.random_in(self.limits.subject_count))
        ]

        logger.debug(
            f"Built publication {identifier} with {len(authors)} authors "
            f"and {len(subjects)} subjects"
        )
        return Publication(
            identifier=identifier,
            authors=authors,
            title=title,
            subjects=subjects,
        )

    def _build_author(self) -> Author:
        name = self.primitives.random_text(
            self.primitives.random_in(self.limits.author_name_length)
        )
        return Author(name=name, date_of_birth=self.primitives.random_date())

    def _build_title(self) -> Title:
        """Build a long title and a short title taken from its prefix.

        The short title's upper bound is capped at the long title's actual
        length, and the lower bound at the upper bound.
        """
        long_title = self.primitives.random_text(
            self.primitives.random_in(self.limits.long_title_length)
        )
        low, high = self.limits.short_title_length
        high = min(high, len(long_title))
        low = min(low, high)
        short_title = long_title[: self.primitives.random_int(low, high)]
        return Title(long_title=long_title, short_title=short_title)
