"""Type distance adapter using rapidfuzz edit distances.

Signatures are rendered to text, split into type tokens and compared with an
edit distance over token sequences, so "int -> string" vs "int -> int" is one
substitution rather than several character edits.

Why (SAM): Infrastructure adapters wrap external libraries with lazy imports
and raise RuntimeError, which the use case maps to a domain exception.
"""

from __future__ import annotations

import logging
import re
from importlib import import_module
from typing import Any

from ...application.ports.type_distance_port import TypeDistancePort
from ...domain.types import TypeSignature

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"->|'[A-Za-z_]\w*|[A-Za-z_][\w.']*|[*(),:?~]")

SUPPORTED_METRICS = ("levenshtein", "indel")


def tokenize_signature(signature: TypeSignature) -> list[str]:
    """Split a rendered signature into identifiers, type variables and punctuation.

    Examples:
        >>> tokenize_signature("('a -> 'b) -> 'a list -> 'b list")
        ['(', "'a", '->', "'b", ')', '->', "'a", 'list', '->', "'b", 'list']
    """
    return _TOKEN_RE.findall(str(signature))


class RapidFuzzTypeDistance(TypeDistancePort):
    """Token-level edit distance between type signatures.

    Args:
        metric: "levenshtein" (insert/delete/substitute) or "indel"
                (insert/delete only, a substitution costs 2)

    Raises:
        ValueError: If metric is not supported
        RuntimeError: If rapidfuzz import or scoring fails
    """

    def __init__(self, metric: str = "levenshtein") -> None:
        if metric not in SUPPORTED_METRICS:
            raise ValueError(f"unsupported type distance metric: {metric!r}")
        self.metric = metric
        self._scorer: Any | None = None

    def _load_scorer(self) -> Any:
        try:
            # Lazy import for testability
            distance_mod = import_module("rapidfuzz.distance")
        except Exception as e:
            raise RuntimeError(f"Failed to import rapidfuzz: {e}") from e
        if self.metric == "indel":
            return distance_mod.Indel
        return distance_mod.Levenshtein

    def distance(self, query: TypeSignature, entry: TypeSignature) -> int:
        if self._scorer is None:
            self._scorer = self._load_scorer()
            logger.debug("loaded rapidfuzz %s scorer", self.metric)

        q_tokens = tokenize_signature(query)
        e_tokens = tokenize_signature(entry)
        if q_tokens == e_tokens:
            return 0

        try:
            return int(self._scorer.distance(q_tokens, e_tokens))
        except Exception as e:
            msg = f"Type distance failed for query '{str(query)[:50]}': {e}"
            raise RuntimeError(msg) from e
