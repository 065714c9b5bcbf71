# docrank/application/dto/rank_dto.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from docrank.domain.models import Entry
from docrank.domain.types import TypeSignature


@dataclass(frozen=True)
class RankRequest:
    """
    DTO for ranking candidate entries against a query.

    - query_words: tokenized query (case-sensitive, order preserved)
    - entries: candidates from the index, in retrieval order
    - query_type: optional type signature from the query
    - limit: keep at most this many results (None = use case default)
    """

    query_words: Sequence[str]
    entries: Sequence[Entry]
    query_type: TypeSignature | None = None
    limit: int | None = None


@dataclass(frozen=True)
class RankedEntries:
    """Candidates with their cost set, sorted ascending by cost."""

    entries: list[Entry]
    filtered_out: int = 0
