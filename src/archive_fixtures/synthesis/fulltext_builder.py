"""Full-text builder."""

import logging

from schemas.fulltext import FullText, Page, Word

from .builder import Builder

logger = logging.getLogger(__name__)


class FullTextBuilder(Builder):
    """Synthesize paginated full text with word coordinates.

    The FullTextBuilder:
    1. Draws a page count, then a starting page number in [1, page count]
    2. Numbers pages consecutively from the starting number, while
       sequence numbers always run from 1
    3. Fills each page with 100-200 random words, each with a bounding box

    The full text does not depend on the publication metadata; the
    identifier is only checked and used for logging.
    """

    def build(self, identifier: int) -> FullText:
        """Build the full text for one publication.

        Args:
            identifier: Publication identifier

        Returns:
            FullText with at least one page

        Raises:
            ValueError: If identifier is not positive
        """
        self._check_identifier(identifier)

        page_count = self.primitives.random_in(self.limits.page_count)
        start_number = self.primitives.random_int(1, page_count)

        pages = [
            Page(
                number=start_number + index,
                sequence=index + 1,
                words=self._build_words(),
            )
            for index in range(page_count)
        ]

        fulltext = FullText(pages=pages)
        logger.debug(
            f"Built full text for publication {identifier}: {page_count} pages "
            f"starting at page {start_number}, {fulltext.word_count} words"
        )
        return fulltext

    def _build_words(self) -> list[Word]:
        return [
            Word(
                text=self.primitives.random_text(
                    self.primitives.random_in(self.limits.word_length)
                ),
                coordinates=self.primitives.random_coordinates(),
            )
            for _ in range(self.primitives.random_in(self.limits.words_per_page))
        ]
