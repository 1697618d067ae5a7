"""Base class for document builders.

Builders synthesize the in-memory content of one document for a publication:

- PublicationBuilder: metadata for publication.xml
- FullTextBuilder: paginated, positioned text for fulltext.xml
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from archive_fixtures.config import SynthesisLimits

from .primitives import RandomPrimitives


class Builder(ABC):
    """Abstract base class for document builders.

    Attributes:
        primitives: Random generators shared by the builder
        limits: Bounds for every randomly sized part of the document
    """

    def __init__(self, primitives: RandomPrimitives | None = None) -> None:
        self.primitives = primitives or RandomPrimitives()

    @property
    def limits(self) -> SynthesisLimits:
        return self.primitives.limits

    @abstractmethod
    def build(self, identifier: int) -> BaseModel:
        """Synthesize the document for one publication.

        Args:
            identifier: Publication identifier (must be positive)

        Returns:
            The document model
        """
        pass

    def _check_identifier(self, identifier: int) -> None:
        if identifier < 1:
            raise ValueError(f"Publication identifier must be positive, got {identifier}")
