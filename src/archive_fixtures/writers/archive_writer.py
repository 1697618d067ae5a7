"""Archive Layout Writer for materializing generated publications on disk.

Writes one publication directory per identifier under an output root,
containing the metadata document, the full-text document and an empty
placeholder page image.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from lxml import etree
from pydantic import BaseModel

from archive_fixtures.config import (
    FULLTEXT_FILENAME,
    IMAGE_EXTENSION,
    IMAGES_DIRNAME,
    PUBLICATION_DIR_PREFIX,
    PUBLICATION_FILENAME,
)
from archive_fixtures.exceptions import FilesystemError, SerializationError
from archive_fixtures.serializers import serialize_fulltext, serialize_publication
from schemas.archive import ArchiveEntry
from schemas.fulltext import FullText
from schemas.publication import Publication

logger = logging.getLogger(__name__)


class ArchiveLayoutWriter:
    """Write a publication's documents into the archive layout.

    The ArchiveLayoutWriter:
    1. Ensures {root}/publication-{id}/ exists
    2. Writes publication.xml and fulltext.xml into it
    3. Ensures images/ exists and creates an empty {id}.tif placeholder

    Re-running into the same root reuses existing directories and leaves
    other files in them untouched. A path occupied by a regular file where
    a directory is expected is reported, never removed.

    Attributes:
        output_root: Directory under which publication directories are created
    """

    def __init__(self, output_root: Path) -> None:
        self.output_root = output_root

    def publication_dir(self, identifier: int) -> Path:
        return self.output_root / f"{PUBLICATION_DIR_PREFIX}{identifier}"

    def write(
        self, identifier: int, publication: Publication, fulltext: FullText
    ) -> ArchiveEntry:
        """Write all files for one publication.

        Args:
            identifier: Publication identifier (names the directory and image)
            publication: Metadata for publication.xml
            fulltext: Content for fulltext.xml

        Returns:
            ArchiveEntry with paths relative to the output root

        Raises:
            FilesystemError: If a directory or the placeholder cannot be created
            SerializationError: If a document cannot be written
        """
        pub_dir = self.publication_dir(identifier)
        self._ensure_directory(pub_dir)

        publication_path = pub_dir / PUBLICATION_FILENAME
        self._write_document(publication_path, publication, serialize_publication)

        fulltext_path = pub_dir / FULLTEXT_FILENAME
        self._write_document(fulltext_path, fulltext, serialize_fulltext)

        images_dir = pub_dir / IMAGES_DIRNAME
        self._ensure_directory(images_dir)
        image_path = images_dir / f"{identifier}{IMAGE_EXTENSION}"
        self._create_placeholder(image_path)

        logger.debug(f"Wrote archive entry for publication {identifier} to {pub_dir}")
        return ArchiveEntry(
            identifier=identifier,
            directory=self._relative(pub_dir),
            publication_path=self._relative(publication_path),
            fulltext_path=self._relative(fulltext_path),
            image_path=self._relative(image_path),
            page_count=len(fulltext.pages),
        )

    def _ensure_directory(self, path: Path) -> None:
        """Create ``path`` as a directory unless it already is one."""
        try:
            path.mkdir()
        except FileExistsError:
            try:
                is_dir = path.is_dir()
            except OSError as e:
                raise FilesystemError(f"Cannot inspect {path}: {e}", path=path) from e
            if not is_dir:
                raise FilesystemError(
                    f"Path exists and is not a directory: {path}", path=path
                ) from None
        except OSError as e:
            raise FilesystemError(f"Cannot create directory {path}: {e}", path=path) from e

    def _write_document(
        self,
        path: Path,
        document: BaseModel,
        serialize: Callable[..., bytes],
    ) -> None:
        """Serialize ``document`` and write it to ``path``."""
        try:
            path.write_bytes(serialize(document))
        except (OSError, ValueError, etree.LxmlError) as e:
            raise SerializationError(f"Cannot write {path}: {e}", path=path) from e
        logger.debug(f"Wrote {path}")

    def _create_placeholder(self, path: Path) -> None:
        """Create an empty file at ``path``; an existing file is kept as is."""
        try:
            path.touch(exist_ok=False)
        except FileExistsError:
            logger.debug(f"Placeholder image already exists: {path}")
            return
        except OSError as e:
            raise FilesystemError(f"Cannot create placeholder image {path}: {e}", path=path) from e
        logger.debug(f"Created placeholder image {path}")

    def _relative(self, path: Path) -> str:
        return path.relative_to(self.output_root).as_posix()
