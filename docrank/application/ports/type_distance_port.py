"""Type distance port for comparing query and entry type signatures.

Why (SAM): Application defines the interface (port), infrastructure provides
concrete adapters. The ranking core treats the metric as a black box.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docrank.domain.types import TypeSignature


class TypeDistancePort(ABC):
    """Port for the distance between a query type and an entry type."""

    @abstractmethod
    def distance(self, query: TypeSignature, entry: TypeSignature) -> int:
        """Distance between two type signatures.

        Args:
            query: Type signature from the search query
            entry: Inner type signature of a type-bearing entry

        Returns:
            Non-negative integer, 0 for identical signatures. Grows with
            shape dissimilarity.

        Raises:
            RuntimeError: If the metric fails (wrapped to TypeDistanceError by use case)
        """
        ...
