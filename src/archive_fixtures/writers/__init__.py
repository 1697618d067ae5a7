"""Writers that lay generated publications out on disk."""

from .archive_writer import ArchiveLayoutWriter

__all__ = ["ArchiveLayoutWriter"]
