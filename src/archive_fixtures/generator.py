"""Archive generator for end-to-end fixture runs.

Wires the document builders and the layout writer together and generates
publications one after another into a single output root.
"""

import logging
import random
from pathlib import Path

from archive_fixtures.config import SynthesisLimits
from archive_fixtures.exceptions import FilesystemError, FixtureError
from archive_fixtures.synthesis import FullTextBuilder, PublicationBuilder, RandomPrimitives
from archive_fixtures.writers import ArchiveLayoutWriter
from schemas.archive import GenerationReport

logger = logging.getLogger(__name__)


class ArchiveGenerator:
    """Generate a run of synthetic publications.

    Publications are generated strictly in sequence. The generator owns the
    identifier counter: it starts at zero for each new generator and is
    incremented once per publication, so a first run of N yields 1..N and a
    later run on the same generator continues from N + 1.

    A publication that fails to build or write is logged and recorded in the
    report; the run continues with the next identifier. Files written before
    the failure are left in place.

    Attributes:
        output_root: Existing directory receiving publication directories
        primitives: Random generators shared by both builders
        publication_builder: Builder for publication metadata
        fulltext_builder: Builder for full texts
        writer: Layout writer for the output root
        last_identifier: Identifier of the most recent publication (0 if none)
    """

    def __init__(
        self,
        output_root: Path,
        rng: random.Random | None = None,
        limits: SynthesisLimits | None = None,
        writer: ArchiveLayoutWriter | None = None,
    ) -> None:
        self.output_root = output_root
        self.primitives = RandomPrimitives(rng=rng, limits=limits)
        self.publication_builder = PublicationBuilder(self.primitives)
        self.fulltext_builder = FullTextBuilder(self.primitives)
        self.writer = writer or ArchiveLayoutWriter(output_root)
        self.last_identifier = 0

    def next_identifier(self) -> int:
        self.last_identifier += 1
        return self.last_identifier

    def generate(self, count: int) -> GenerationReport:
        """Generate ``count`` publications.

        Args:
            count: Number of publications (zero or more)

        Returns:
            GenerationReport listing written entries and errors

        Raises:
            ValueError: If count is negative
            FilesystemError: If the output root is not an existing directory
        """
        if count < 0:
            raise ValueError(f"Publication count must not be negative, got {count}")
        try:
            root_is_dir = self.output_root.is_dir()
        except OSError as e:
            raise FilesystemError(
                f"Cannot inspect output directory {self.output_root}: {e}",
                path=self.output_root,
            ) from e
        if not root_is_dir:
            raise FilesystemError(
                f"Output directory not found: {self.output_root}",
                path=self.output_root,
            )

        logger.info(f"Generating {count} publications in {self.output_root}")
        report = GenerationReport(requested=count)

        for _ in range(count):
            identifier = self.next_identifier()
            try:
                publication = self.publication_builder.build(identifier)
                fulltext = self.fulltext_builder.build(identifier)
                entry = self.writer.write(identifier, publication, fulltext)
            except FixtureError as e:
                logger.error(f"Failed to generate publication {identifier}: {e}")
                report.errors.append(f"Publication {identifier}: {e}")
                continue

            report.entries.append(entry)
            logger.info(
                f"Generated publication {identifier} "
                f"({entry.page_count} pages) in {entry.directory}"
            )

        logger.info(
            f"Generation complete: {report.written} of {count} publications written"
        )
        return report
