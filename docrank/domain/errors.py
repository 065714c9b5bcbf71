"""Domain errors (typed) for ranking.

Why: Unified error family for the Application layer, without Infra leaks.
"""

from dataclasses import dataclass


class DomainError(Exception):
    """Base class for domain-specific errors."""


class ValidationError(DomainError):
    """Invalid input/domain state."""


@dataclass(eq=False)
class RankingInvariantError(DomainError):
    """Reasoning reached the cost assigner in a state no correct caller builds.

    Programming error, never mapped to a Result:
    - the query carries a type but the entry does not (caller must pre-filter)
    - both carry a type but no distance was computed
    """

    detail: str = ""

    def __str__(self) -> str:
        return self.detail


class TypeDistanceError(DomainError):
    """Type distance backend failed or is misconfigured."""
