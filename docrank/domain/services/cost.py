"""Cost assignment: turns a Reasoning bundle into one integer cost.

Why (SAM): Weights and precedence live here and nowhere else, as immutable
module-level tables. Lower cost ranks higher. Costs are only comparable
within the same query evaluation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from types import MappingProxyType

from docrank.domain.errors import RankingInvariantError
from docrank.domain.models import Entry, KindClass, NameMatch, Reasoning
from docrank.domain.services.reasoning import TypeDistanceFn, compute_reasoning
from docrank.domain.types import Cost, TypeSignature

NON_STDLIB_COST = 100
NO_DOC_COST = 100
MODULE_TYPE_ORIGIN_COST = 400

NAME_MATCH_COSTS: Mapping[NameMatch, int] = MappingProxyType(
    {
        NameMatch.DOT_SUFFIX: 0,
        NameMatch.PREFIX_SUFFIX: 103,
        NameMatch.SUB_DOT: 104,
        NameMatch.SUB_UNDERSCORE: 105,
        NameMatch.SUB: 106,
        NameMatch.LOWERCASE: 107,
        NameMatch.DOC: 1000,
    }
)

KIND_COSTS: Mapping[KindClass, int] = MappingProxyType(
    {
        KindClass.VAL: 0,
        KindClass.MODULE: 0,
        KindClass.MODULE_TYPE: 0,
        KindClass.CONSTRUCTOR: 0,
        KindClass.FIELD: 0,
        KindClass.TYPE_DECL: 0,
        KindClass.EXCEPTION: 30,
        KindClass.CLASS_TYPE: 40,
        KindClass.CLASS: 40,
        KindClass.TYPE_EXTENSION: 40,
        KindClass.EXTENSION_CONSTRUCTOR: 50,
        KindClass.METHOD: 50,
        KindClass.DOC: 50,
    }
)

# Module-level entries are often undocumented yet still relevant.
_DOC_EXEMPT_KINDS = frozenset({KindClass.MODULE, KindClass.MODULE_TYPE})


def _type_cost(r: Reasoning) -> int:
    if r.type_in_entry and r.type_in_query:
        if r.type_distance is None:
            raise RankingInvariantError("entry and query carry a type but no distance was computed")
        return r.type_distance
    if r.type_in_entry:
        return 0
    if r.type_in_query:
        raise RankingInvariantError(
            "query carries a type but the entry does not; untyped entries must be filtered out"
        )
    return 0


def cost_of_reasoning(r: Reasoning) -> Cost:
    """Cost of an entry according to the reasons in r (lower is better).

    Sum of: stdlib bonus, doc presence, per-word name matches, kind, type
    distance, module-type origin and the name length as a tie-breaker.

    Raises:
        RankingInvariantError: If the reasoning could not have come from a
                               correct caller (see _type_cost)

    Note:
        "Stdlib.List.map" as a documented Val queried with ["map"] and no
        type costs 15: every term is 0 except the name length.
    """
    stdlib = 0 if r.is_stdlib else NON_STDLIB_COST
    doc = 0 if (r.has_doc or r.kind in _DOC_EXEMPT_KINDS) else NO_DOC_COST
    name_matches = sum(NAME_MATCH_COSTS[m] for m in r.name_matches)
    kind = KIND_COSTS[r.kind]
    module_type = MODULE_TYPE_ORIGIN_COST if r.is_from_module_type else 0
    return stdlib + doc + name_matches + kind + _type_cost(r) + module_type + r.name_length


def compute_cost(
    query_words: Sequence[str],
    query_type: TypeSignature | None,
    entry: Entry,
    *,
    distance: TypeDistanceFn | None = None,
) -> Cost:
    return cost_of_reasoning(compute_reasoning(query_words, query_type, entry, distance=distance))


def update_entry_cost(
    query_words: Sequence[str],
    query_type: TypeSignature | None,
    entry: Entry,
    *,
    distance: TypeDistanceFn | None = None,
) -> Entry:
    """Copy of entry with cost set for this query; every other field is kept."""
    return replace(entry, cost=compute_cost(query_words, query_type, entry, distance=distance))
